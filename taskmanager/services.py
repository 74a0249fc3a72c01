"""Application service for managing tasks."""

from __future__ import annotations

from taskmanager.dto import TaskDTO, task_to_dto
from taskmanager.entity import TaskID, new_task
from taskmanager.repository import TaskRepository


class TaskService:
    """Creates, lists, completes and deletes tasks through a repository."""

    def __init__(self, repo: TaskRepository) -> None:
        self._repo = repo

    def get_tasks(self) -> list[TaskDTO]:
        return [task_to_dto(task) for task in self._repo.get_all()]

    def get_task_by_id(self, task_id: TaskID) -> TaskDTO:
        return task_to_dto(self._repo.get_by_id(task_id))

    def create_task(self, name: str) -> TaskID:
        task = new_task(name)
        self._repo.save(task)
        return task.id

    def mark_as_completed(self, task_id: TaskID) -> None:
        task = self._repo.get_by_id(task_id)
        task.mark_completed()
        self._repo.update(task)

    def delete_task(self, task_id: TaskID) -> None:
        self._repo.delete(task_id)