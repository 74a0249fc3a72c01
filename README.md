# taskmanager

A small library for keeping a list of tasks: creating them, looking them up,
marking them as completed and deleting them.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from taskmanager.repository import InMemoryTaskRepository, TaskNotFoundError
from taskmanager.services import TaskService

service = TaskService(InMemoryTaskRepository())

task_id = service.create_task("write report")
service.mark_as_completed(task_id)

print(service.get_task_by_id(task_id))
# TaskDTO(id=1, name='write report', completed=True)

for task in service.get_tasks():
    print(task.id, task.name, task.completed)

service.delete_task(task_id)

try:
    service.get_task_by_id(task_id)
except TaskNotFoundError:
    print("gone")
```

`create_task` raises `EmptyNameError` (a `ValueError`) when the name is empty
or only whitespace. `get_task_by_id`, `mark_as_completed` and `delete_task`
raise `TaskNotFoundError` (a `LookupError`) for an id that is not stored.

### Building blocks

- `taskmanager.entity`: `Task` (a dataclass with `id`, `name`,
  `completed` and `created_at`, plus `mark_completed()` and
  `update_name(new_name)`), `TaskID` (an `int` whose `is_valid()` is true for
  positive values), `new_task(name)` and `EmptyNameError`. Names are stripped
  of surrounding whitespace.
- `taskmanager.repository`: the abstract `TaskRepository` interface
  (`save`, `update`, `delete`, `get_by_id`, `get_all`) and
  `InMemoryTaskRepository`, which hands out ids starting at 1.
  Missing tasks raise `TaskNotFoundError`.
- `taskmanager.dto`: `TaskDTO`, the frozen view of a task returned by the
  service, and `task_to_dto(task)`.
- `taskmanager.services`: `TaskService`, which ties the pieces together.

Any class that implements `TaskRepository` can be handed to `TaskService`.

## What it does not do

- Tasks are kept only in memory. Nothing is written to disk or to a
  database, so the list is lost when the process ends. For lasting storage,
  write your own `TaskRepository`.
- There is no command-line program. The package is used from Python code.