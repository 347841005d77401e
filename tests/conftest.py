"""Shared fixtures for Taskboard tests."""

import copy
import json

import pytest

from taskboard.errors import StorageError
from taskboard.store import MemoryStore


SAMPLE_TASKS = [
    {
        "id": "1234567890123",
        "title": "Test Task 1",
        "description": "Description 1",
        "status": "pending",
        "priority": "high",
        "dueDate": "2025-12-31",
    },
    {
        "id": "9876543210987",
        "title": "Test Task 2",
        "description": "Description 2",
        "status": "completed",
        "priority": "low",
        "dueDate": "2025-11-30",
    },
]


class FailingSaveStore(MemoryStore):
    """MemoryStore whose save_all raises a given StorageError."""

    def __init__(self, tasks, error: StorageError):
        super().__init__(tasks)
        self.error = error

    def save_all(self, tasks):
        raise self.error


@pytest.fixture
def sample_tasks():
    """Fresh copy of the two sample tasks."""
    return copy.deepcopy(SAMPLE_TASKS)


@pytest.fixture
def memory_store(sample_tasks):
    """In-memory store holding the sample tasks."""
    return MemoryStore(sample_tasks)


@pytest.fixture
def tasks_file(tmp_path, sample_tasks):
    """Task database file seeded with the sample tasks."""
    path = tmp_path / "data" / "tasks.json"
    path.parent.mkdir()
    path.write_text(json.dumps(sample_tasks, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def failing_store(sample_tasks):
    """Factory for a store holding the sample tasks whose saves fail."""

    def _make(error: StorageError) -> FailingSaveStore:
        return FailingSaveStore(sample_tasks, error)

    return _make
