"""Error kinds for Taskboard.

Every failure a task operation can report maps to one ErrorKind, which
fixes the HTTP status and the human-readable message sent to the client.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Machine-readable error codes with their status and message."""

    # Caller mistakes
    MISSING_TASK_ID = (400, "Task ID is required for deletion.")
    INVALID_TASK_ID_FORMAT = (400, "Invalid task ID format. Task ID must be numeric.")
    MISSING_TITLE = (400, "Task title is required.")
    INVALID_PAYLOAD = (400, "Request body must be a JSON object.")
    TASK_NOT_FOUND = (404, "Task with ID {task_id} not found.")

    # Read stage
    DATABASE_NOT_FOUND = (404, "Tasks database file not found.")
    FILE_ACCESS_DENIED = (500, "Permission denied accessing tasks database.")
    FILE_READ_ERROR = (500, "Error accessing tasks database.")
    INVALID_JSON = (500, "Database file is corrupted. Unable to parse tasks data.")
    INVALID_DATABASE_STRUCTURE = (
        500,
        "Invalid database structure. Expected an array of tasks.",
    )

    # Write stage
    FILE_WRITE_PERMISSION_DENIED = (500, "Permission denied writing to tasks database.")
    DISK_SPACE_ERROR = (500, "Insufficient disk space to save changes.")
    FILE_WRITE_ERROR = (500, "Error saving changes to database after deletion.")

    @property
    def code(self) -> str:
        return self.name

    @property
    def status(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


class TaskError(Exception):
    """A classified failure of a task operation.

    Extra keyword arguments are carried into the response body, e.g.
    ``TaskError(ErrorKind.TASK_NOT_FOUND, taskId="12", availableTaskCount=0)``.
    """

    def __init__(self, kind: ErrorKind, message: Optional[str] = None, **extra):
        self.kind = kind
        self.message = message or kind.message
        self.extra = extra
        super().__init__(self.message)

    @property
    def status(self) -> int:
        return self.kind.status

    def to_body(self) -> dict:
        body = {"error": self.kind.code, "message": self.message}
        body.update(self.extra)
        return body


class StorageError(TaskError):
    """Raised by a TaskStore when the collection cannot be read or written."""

    def __init__(self, kind: ErrorKind, details: Optional[str] = None):
        extra = {"details": details} if details is not None else {}
        super().__init__(kind, **extra)
        self.details = details
