"""Task repository interface."""

from typing import Protocol

from taskbridge.core.tasks import Task


class TaskRepository(Protocol):
    """Interface for a single remote task list."""

    def list(self) -> list[Task]:
        """Fetch all tasks, in the order the backend returns them."""
        ...

    def insert(self, title: str, notes: str | None = None) -> Task:
        """Create a task. The backend assigns id and status."""
        ...

    def delete(self, task_id: str) -> None:
        """Delete a task."""
        ...

    def patch(self, task_id: str, status: str) -> Task:
        """Set a task's status and return the updated task."""
        ...
