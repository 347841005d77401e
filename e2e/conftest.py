"""E2E test configuration for Playwright.

Starts the app on a free local port in a background thread, backed by a
temporary task database the tests seed and inspect directly.
"""

import copy
import json
import threading

import pytest
from werkzeug.serving import make_server

from taskboard.app import create_app
from taskboard.config import AppConfig


SAMPLE_TASKS = [
    {
        "id": "1234567890123",
        "title": "Test Task for Deletion",
        "description": "This task will be deleted",
        "status": "To Do",
        "priority": "High",
        "dueDate": "2025-12-31",
    },
    {
        "id": "9876543210987",
        "title": "Another Test Task",
        "description": "This task should remain",
        "status": "In Progress",
        "priority": "Medium",
        "dueDate": "2025-11-30",
    },
]


@pytest.fixture(scope="session")
def tasks_path(tmp_path_factory):
    """Database file shared by the live server and the tests."""
    return tmp_path_factory.mktemp("e2e") / "tasks.json"


@pytest.fixture(scope="session")
def live_server(tasks_path):
    """Run the app for the whole session and yield its base URL."""
    app = create_app(AppConfig(data_file=str(tasks_path)))
    server = make_server("127.0.0.1", 0, app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_port}"
    server.shutdown()
    thread.join(timeout=5)


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args, live_server):
    """Configure browser context."""
    return {
        **browser_context_args,
        "base_url": live_server,
        "viewport": {"width": 1280, "height": 720},
    }


@pytest.fixture
def sample_tasks():
    """The two tasks every test starts with."""
    return copy.deepcopy(SAMPLE_TASKS)


@pytest.fixture
def seed_tasks(tasks_path):
    """Write tasks to the database (the sample pair by default)."""

    def _seed(tasks=None, raw=None):
        content = raw if raw is not None else json.dumps(
            SAMPLE_TASKS if tasks is None else tasks, indent=2
        )
        tasks_path.write_text(content, encoding="utf-8")

    _seed()
    return _seed


@pytest.fixture
def read_tasks(tasks_path):
    """Read the database as the server left it."""

    def _read():
        try:
            return json.loads(tasks_path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return []

    return _read
