"""Persistence for the task collection.

The collection is a single JSON array, read and written in full. Stores
expose two operations, load_all() and save_all(); any failure is raised as
a StorageError carrying the ErrorKind the caller reports.

No locking is done: a load/modify/save sequence assumes it is the only
writer for its duration.
"""

import errno
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from .errors import ErrorKind, StorageError


logger = logging.getLogger(__name__)

_PERMISSION_ERRNOS = (errno.EACCES, errno.EPERM)


class TaskStore(ABC):
    """Read-whole/write-whole access to the task collection."""

    @abstractmethod
    def load_all(self) -> List[dict]:
        """Return every task record in stored order."""

    @abstractmethod
    def save_all(self, tasks: List[dict]) -> None:
        """Replace the stored collection with ``tasks``."""


def _classify_read_error(exc: OSError) -> StorageError:
    if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
        return StorageError(ErrorKind.DATABASE_NOT_FOUND)
    if isinstance(exc, PermissionError) or exc.errno in _PERMISSION_ERRNOS:
        return StorageError(ErrorKind.FILE_ACCESS_DENIED)
    return StorageError(ErrorKind.FILE_READ_ERROR, details=str(exc))


def _classify_write_error(exc: OSError) -> StorageError:
    if isinstance(exc, PermissionError) or exc.errno in _PERMISSION_ERRNOS:
        return StorageError(ErrorKind.FILE_WRITE_PERMISSION_DENIED)
    if exc.errno == errno.ENOSPC:
        return StorageError(ErrorKind.DISK_SPACE_ERROR)
    return StorageError(ErrorKind.FILE_WRITE_ERROR, details=str(exc))


def decode_collection(content: str) -> List[dict]:
    """Decode stored text into a task list.

    Raises:
        StorageError: INVALID_JSON if the text is not JSON,
            INVALID_DATABASE_STRUCTURE if it is JSON but not an array.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise StorageError(ErrorKind.INVALID_JSON, details=str(e)) from e

    if not isinstance(data, list):
        raise StorageError(ErrorKind.INVALID_DATABASE_STRUCTURE)

    return data


class JsonFileStore(TaskStore):
    """Task collection stored as a UTF-8 JSON array file."""

    def __init__(self, path: str, indent: Optional[int] = 2):
        """Initialize with the collection file path.

        Args:
            path: Location of the JSON file.
            indent: Indentation used when writing (None for compact output).
        """
        self.path = Path(path)
        self.indent = indent

    def exists(self) -> bool:
        return self.path.exists()

    def initialize(self) -> bool:
        """Create an empty collection if none exists.

        Returns:
            True if a new file was written.
        """
        if self.exists():
            return False
        self.save_all([])
        logger.info("Created empty task database at %s", self.path)
        return True

    def load_all(self) -> List[dict]:
        try:
            with open(self.path, encoding="utf-8") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise StorageError(ErrorKind.INVALID_JSON, details=str(e)) from e
        except OSError as e:
            raise _classify_read_error(e) from e

        return decode_collection(content)

    def save_all(self, tasks: List[dict]) -> None:
        content = json.dumps(tasks, indent=self.indent, ensure_ascii=False)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise _classify_write_error(e) from e

    def __repr__(self) -> str:
        return f"JsonFileStore({str(self.path)!r})"


class MemoryStore(TaskStore):
    """In-process task collection.

    ``raw`` holds the stored text, so malformed content can be staged the
    same way a corrupted file would present it. ``None`` means no database.
    """

    def __init__(self, tasks: Optional[List[dict]] = None, raw: Optional[str] = None):
        if raw is None and tasks is not None:
            raw = json.dumps(tasks)
        self.raw = raw
        self.save_count = 0

    def load_all(self) -> List[dict]:
        if self.raw is None:
            raise StorageError(ErrorKind.DATABASE_NOT_FOUND)
        return decode_collection(self.raw)

    def save_all(self, tasks: List[dict]) -> None:
        self.raw = json.dumps(tasks)
        self.save_count += 1
