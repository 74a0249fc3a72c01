import pytest

from taskmanager.dto import TaskDTO, task_to_dto
from taskmanager.entity import EmptyNameError, TaskID, new_task
from taskmanager.repository import InMemoryTaskRepository, TaskNotFoundError
from taskmanager.services import TaskService


@pytest.fixture
def repo():
    return InMemoryTaskRepository()


@pytest.fixture
def service(repo):
    return TaskService(repo)


def test_get_tasks(repo, service):
    names = ["task 1", "task 2", "task 3"]
    for name in names:
        repo.save(new_task(name))
    want = [TaskDTO(id=TaskID(i), name=name, completed=False) for i, name in enumerate(names, 1)]
    assert sorted(service.get_tasks(), key=lambda d: d.id) == want


def test_get_task_by_id(repo, service):
    task = new_task("task")
    repo.save(task)
    assert service.get_task_by_id(task.id) == task_to_dto(task)


def test_create_task(service):
    task_id = service.create_task("task")
    assert service.get_task_by_id(task_id) == TaskDTO(id=task_id, name="task", completed=False)


def test_create_task_empty_name(service):
    with pytest.raises(EmptyNameError):
        service.create_task("   ")
    assert service.get_tasks() == []


def test_delete_task(service):
    task_id = service.create_task("task")
    service.delete_task(task_id)
    with pytest.raises(TaskNotFoundError):
        service.get_task_by_id(task_id)


def test_mark_as_completed(service):
    task_id = service.create_task("task")
    service.mark_as_completed(task_id)
    assert service.get_task_by_id(task_id).completed is True


@pytest.mark.parametrize(
    "operation",
    [
        pytest.param(lambda s: s.delete_task(TaskID(1)), id="delete"),
        pytest.param(lambda s: s.mark_as_completed(TaskID(5)), id="complete"),
        pytest.param(lambda s: s.get_task_by_id(TaskID(3)), id="get"),
    ],
)
def test_missing_task_raises(service, operation):
    with pytest.raises(TaskNotFoundError):
        operation(service)