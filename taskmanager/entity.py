"""Task entity and its identifier."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


class EmptyNameError(ValueError):
    """Raised when a task name is empty or only whitespace."""

    def __init__(self, message: str = "name cannot be empty") -> None:
        super().__init__(message)


class TaskID(int):
    """Identifier of a task; valid identifiers are positive."""

    def is_valid(self) -> bool:
        return self > 0


def _clean_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise EmptyNameError()
    return cleaned


@dataclass
class Task:
    """A single task with a name and a completion flag."""

    name: str
    id: TaskID = TaskID(0)
    completed: bool = False
    created_at: datetime = field(default_factory=datetime.now)

    def mark_completed(self) -> None:
        self.completed = True

    def update_name(self, new_name: str) -> None:
        """Rename the task; raises EmptyNameError for a blank name."""
        self.name = _clean_name(new_name)


def new_task(name: str) -> Task:
    """Create an unsaved, uncompleted task stamped with the current time."""
    return Task(name=_clean_name(name))