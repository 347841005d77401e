"""Task operations for Taskboard.

Each operation takes a TaskStore and returns ``(status_code, body)`` ready
to be sent as a JSON response. Classified failures are reported through the
same tuple, never raised. Operations do a single load and at most a single
save; nothing is retried.
"""

import logging
import re
from typing import Any, Optional, Tuple

from .errors import ErrorKind, StorageError, TaskError
from .models import Task, generate_task_id
from .store import TaskStore


logger = logging.getLogger(__name__)

TASK_ID_PATTERN = re.compile(r"[0-9]+")

Response = Tuple[int, Any]


def validate_task_id(raw: Optional[str]) -> str:
    """Check a task ID before any storage access.

    Args:
        raw: Identifier as received from the caller.

    Returns:
        The identifier, unchanged.

    Raises:
        TaskError: MISSING_TASK_ID if absent or empty,
            INVALID_TASK_ID_FORMAT if not entirely ASCII digits.
    """
    if raw is None or raw == "":
        raise TaskError(ErrorKind.MISSING_TASK_ID)

    task_id = str(raw)
    if not TASK_ID_PATTERN.fullmatch(task_id):
        raise TaskError(ErrorKind.INVALID_TASK_ID_FORMAT, providedId=task_id)

    return task_id


def _find_index(tasks: list, task_id: str) -> int:
    """Index of the first record whose id equals task_id exactly, or -1."""
    for i, task in enumerate(tasks):
        if isinstance(task, dict) and task.get("id") == task_id:
            return i
    return -1


def _error_response(error: TaskError, operation: str) -> Response:
    log = logger.warning if error.status < 500 else logger.error
    log("%s failed: %s (%s)", operation, error.kind.code, error.message)
    return error.status, error.to_body()


def delete_task(store: TaskStore, task_id: Optional[str]) -> Response:
    """Delete the first task whose id equals ``task_id``.

    Returns:
        (200, {message, deletedTask, remainingTasksCount}) on success,
        otherwise (status, {error, message, ...}) for one of the error kinds.
    """
    try:
        task_id = validate_task_id(task_id)
        tasks = store.load_all()

        index = _find_index(tasks, task_id)
        if index < 0:
            raise TaskError(
                ErrorKind.TASK_NOT_FOUND,
                ErrorKind.TASK_NOT_FOUND.message.format(task_id=task_id),
                taskId=task_id,
                availableTaskCount=len(tasks),
            )

        deleted = tasks.pop(index)
        store.save_all(tasks)
    except TaskError as e:
        return _error_response(e, "delete")

    logger.info("Deleted task %s (%d remaining)", task_id, len(tasks))
    return 200, {
        "message": "Task deleted successfully.",
        "deletedTask": deleted,
        "remainingTasksCount": len(tasks),
    }


def list_tasks(store: TaskStore) -> Response:
    """Return the whole collection. A missing database reads as empty."""
    try:
        tasks = store.load_all()
    except StorageError as e:
        if e.kind is ErrorKind.DATABASE_NOT_FOUND:
            return 200, []
        return _error_response(e, "list")

    return 200, tasks


def create_task(store: TaskStore, payload: Any) -> Response:
    """Append a new task built from ``payload`` and save the collection.

    The ID is always generated here; any ``id`` in the payload is ignored.
    """
    try:
        if not isinstance(payload, dict):
            raise TaskError(ErrorKind.INVALID_PAYLOAD)

        title = str(payload.get("title") or "").strip()
        if not title:
            raise TaskError(ErrorKind.MISSING_TITLE)

        try:
            tasks = store.load_all()
        except StorageError as e:
            if e.kind is not ErrorKind.DATABASE_NOT_FOUND:
                raise
            tasks = []

        task = Task(
            id=generate_task_id(),
            title=title,
            description=str(payload.get("description") or ""),
            status=str(payload.get("status") or "To Do"),
            priority=str(payload.get("priority") or "Medium"),
            due_date=str(payload.get("dueDate") or ""),
        )
        tasks.append(task.to_dict())

        try:
            store.save_all(tasks)
        except StorageError as e:
            if e.kind is ErrorKind.FILE_WRITE_ERROR:
                raise TaskError(
                    e.kind, "Error saving new task to database.", **e.extra
                ) from e
            raise
    except TaskError as e:
        return _error_response(e, "create")

    logger.info("Created task %s (%r)", task.id, task.title)
    return 201, {"message": "Task created successfully.", "task": task.to_dict()}
