"""Task storage interface and an in-memory implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod

from taskmanager.entity import Task, TaskID


class TaskNotFoundError(LookupError):
    """Raised when a task with the requested id is not stored."""

    def __init__(self, message: str = "task doesnt exists") -> None:
        super().__init__(message)


class TaskRepository(ABC):
    """Storage for tasks."""

    @abstractmethod
    def save(self, task: Task) -> None:
        """Store a new task, assigning it an id."""

    @abstractmethod
    def update(self, task: Task) -> None:
        """Replace a stored task; raises TaskNotFoundError if absent."""

    @abstractmethod
    def delete(self, task_id: TaskID) -> None:
        """Remove a stored task; raises TaskNotFoundError if absent."""

    @abstractmethod
    def get_by_id(self, task_id: TaskID) -> Task:
        """Return a stored task; raises TaskNotFoundError if absent."""

    @abstractmethod
    def get_all(self) -> list[Task]:
        """Return every stored task."""


class InMemoryTaskRepository(TaskRepository):
    """Keeps tasks in a dictionary, assigning ids from 1 upwards."""

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id = 1

    def _require(self, task_id: TaskID) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError()
        return task

    def save(self, task: Task) -> None:
        task.id = TaskID(self._next_id)
        self._tasks[task.id] = task
        self._next_id += 1

    def update(self, task: Task) -> None:
        self._require(task.id)
        self._tasks[task.id] = task

    def delete(self, task_id: TaskID) -> None:
        self._require(task_id)
        self._tasks.pop(task_id)

    def get_by_id(self, task_id: TaskID) -> Task:
        return self._require(task_id)

    def get_all(self) -> list[Task]:
        return list(self._tasks.values())