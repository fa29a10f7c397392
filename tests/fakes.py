"""In-memory stand-ins for the remote task service."""

import itertools

from taskbridge.core.tasks import NEEDS_ACTION, Task


class FakeTaskRepository:
    """
    Behaves like the default Google Tasks list.

    - Assigns ids and a needsAction status on insert
    - Records every call for assertions
    - Raises ``fail_with`` from any call when set
    """

    def __init__(self, tasks: list[Task] | None = None):
        self.tasks: dict[str, Task] = {t.id: t for t in tasks or []}
        self.calls: list[tuple] = []
        self.fail_with: Exception | None = None
        self._ids = itertools.count(1)

    def _record(self, *call) -> None:
        self.calls.append(call)
        if self.fail_with is not None:
            raise self.fail_with

    def list(self) -> list[Task]:
        self._record("list")
        return list(self.tasks.values())

    def insert(self, title: str, notes: str | None = None) -> Task:
        self._record("insert", title, notes)
        data = {"id": f"task{next(self._ids)}", "title": title, "status": NEEDS_ACTION}
        if notes is not None:
            data["notes"] = notes
        task = Task.from_api(data)
        self.tasks[task.id] = task
        return task

    def delete(self, task_id: str) -> None:
        self._record("delete", task_id)
        if task_id not in self.tasks:
            raise KeyError(f"Task not found: {task_id}")
        del self.tasks[task_id]

    def patch(self, task_id: str, status: str) -> Task:
        self._record("patch", task_id, status)
        if task_id not in self.tasks:
            raise KeyError(f"Task not found: {task_id}")
        task = self.tasks[task_id]
        task.status = status
        return task
