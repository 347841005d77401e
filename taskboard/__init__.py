"""Taskboard - minimal task manager.

A small task-management application with:
- A flat JSON file as the task database
- An HTTP API (view, create and delete tasks)
- A browser UI served by the same app
- A command line for managing the database directly
"""

__version__ = "1.0.0"

from .models import Task, generate_task_id
from .errors import ErrorKind, TaskError, StorageError
from .store import TaskStore, JsonFileStore, MemoryStore
from .service import delete_task, list_tasks, create_task, validate_task_id

__all__ = [
    # Records
    "Task",
    "generate_task_id",
    # Errors
    "ErrorKind",
    "TaskError",
    "StorageError",
    # Persistence
    "TaskStore",
    "JsonFileStore",
    "MemoryStore",
    # Operations
    "delete_task",
    "list_tasks",
    "create_task",
    "validate_task_id",
]
