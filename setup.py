"""Taskboard - JSON-file backed task manager."""
from setuptools import setup, find_packages

setup(
    name="taskboard",
    version="1.0.0",
    description="Minimal task manager with a JSON file store, web UI and CLI",
    packages=find_packages(exclude=["tests", "tests.*", "e2e", "e2e.*"]),
    include_package_data=True,
    package_data={
        "taskboard": ["templates/*", "static/*"],
    },
    install_requires=[
        "click>=8.1.0",
        "flask>=3.0.0",
        "jinja2>=3.1.0",
        "rich>=13.0.0",
        "questionary>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-playwright>=0.4.0",
            "playwright>=1.40.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "taskboard=taskboard.cli:main",
        ],
    },
    python_requires=">=3.10",
)
