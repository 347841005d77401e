"""Task records for Taskboard.

Tasks are stored as plain JSON objects. The Task dataclass is a typed view
over one of those objects; nothing on the read path requires a record to
fit it, so unknown or missing fields never break deletion.
"""

import random
import time
from dataclasses import dataclass
from typing import Mapping


STATUSES = ["To Do", "In Progress", "Done"]
PRIORITIES = ["Low", "Medium", "High"]


def generate_task_id() -> str:
    """Generate a numeric task ID.

    Epoch milliseconds followed by a zero-padded 3-digit random suffix,
    e.g. "1735603200000042".
    """
    timestamp = int(time.time() * 1000)
    suffix = random.randint(0, 999)
    return f"{timestamp}{suffix:03d}"


def _text(value) -> str:
    """Stored fields are free-form JSON; read them back as strings."""
    return "" if value is None else str(value)


@dataclass
class Task:
    """A task in the collection."""

    id: str
    title: str
    description: str = ""
    status: str = "To Do"
    priority: str = "Medium"
    due_date: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "priority": self.priority,
            "dueDate": self.due_date,
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "Task":
        return cls(
            id=_text(data.get("id")),
            title=_text(data.get("title")),
            description=_text(data.get("description")),
            status=_text(data.get("status")),
            priority=_text(data.get("priority")),
            due_date=_text(data.get("dueDate")),
        )

    @property
    def label(self) -> str:
        """Title for display, falling back to the ID."""
        return self.title or f"Task {self.id}"
