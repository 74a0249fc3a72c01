"""Plain task view handed out by the service layer."""

from __future__ import annotations

from dataclasses import dataclass

from taskmanager.entity import Task, TaskID


@dataclass(frozen=True)
class TaskDTO:
    """Read-only view of a task."""

    id: TaskID
    name: str
    completed: bool


def task_to_dto(task: Task) -> TaskDTO:
    return TaskDTO(id=task.id, name=task.name, completed=task.completed)