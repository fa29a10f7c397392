"""Operation dispatch layer shared by the MCP server and the CLI.

Maps operation names and argument bags onto TaskRepository calls and turns
every failure into a TasksError.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from .core.arguments import CompleteTaskArgs, CreateTaskArgs, DeleteTaskArgs
from .core.errors import (
    InternalError,
    InvalidRequestError,
    MethodNotFoundError,
)
from .ports.task_repo import TaskRepository

logger = logging.getLogger(__name__)

DEFAULT_LIST_URI = "tasks://default"
DELETED_MESSAGE = "Task deleted successfully."


@dataclass(frozen=True)
class ToolSpec:
    """An operation in the catalog."""

    name: str
    description: str
    input_schema: dict = field(default_factory=dict)


@dataclass(frozen=True)
class ResourceSpec:
    """A readable resource."""

    uri: str
    name: str
    description: str
    mime_type: str = "application/json"


TOOLS = (
    ToolSpec(
        name="create_task",
        description="Create a new task in Google Tasks",
        input_schema={
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Title of the task"},
                "notes": {"type": "string", "description": "Notes for the task"},
            },
            "required": ["title"],
        },
    ),
    ToolSpec(
        name="list_tasks",
        description="List all tasks in the default task list",
        input_schema={"type": "object", "properties": {}},
    ),
    ToolSpec(
        name="delete_task",
        description="Delete a task from the default task list",
        input_schema={
            "type": "object",
            "properties": {
                "taskId": {"type": "string", "description": "ID of the task to delete"},
            },
            "required": ["taskId"],
        },
    ),
    ToolSpec(
        name="complete_task",
        description="Toggle the completion status of a task",
        input_schema={
            "type": "object",
            "properties": {
                "taskId": {
                    "type": "string",
                    "description": "ID of the task to toggle completion status",
                },
                "status": {
                    "type": "string",
                    "enum": ["needsAction", "completed"],
                    "description": "Status of task, needsAction or completed",
                },
            },
            "required": ["taskId", "status"],
        },
    ),
)

RESOURCES = (
    ResourceSpec(
        uri=DEFAULT_LIST_URI,
        name="Default Task List",
        description="Manage your Google Tasks",
    ),
)


def render(payload: Any) -> str:
    """Format a success payload as text for the transport."""
    if isinstance(payload, str):
        return payload
    return json.dumps(payload, indent=2)


class Dispatcher:
    """Routes named operations to a TaskRepository."""

    def __init__(self, repo: TaskRepository):
        self.repo = repo
        self._handlers: dict[str, Callable[[Any], Any]] = {
            "create_task": self._create_task,
            "list_tasks": self._list_tasks,
            "delete_task": self._delete_task,
            "complete_task": self._complete_task,
        }

    def list_tools(self) -> list[ToolSpec]:
        return list(TOOLS)

    def list_resources(self) -> list[ResourceSpec]:
        return list(RESOURCES)

    def call(self, name: str, arguments: Any = None) -> Any:
        """
        Invoke an operation by exact name.

        Returns a JSON-serializable payload: a task dict, a list of task
        dicts, or the delete confirmation string.
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise MethodNotFoundError(f"Unknown tool: {name}")
        logger.debug(f"Dispatching {name}")
        return handler(arguments)

    def read_resource(self, uri: str) -> str:
        """Read a resource as JSON text. Only the default list exists."""
        if uri != DEFAULT_LIST_URI:
            raise InvalidRequestError(f"Unknown resource: {uri}")
        return render(self._list_tasks(None))

    def _remote(self, operation: str, fn: Callable[..., Any], *args: Any) -> Any:
        try:
            return fn(*args)
        except Exception as e:
            logger.warning(f"{operation} failed: {e}")
            raise InternalError("Tasks API error", cause=e) from e

    def _list_tasks(self, arguments: Any) -> list[dict]:
        tasks = self._remote("list_tasks", self.repo.list)
        return [t.to_dict() for t in tasks]

    def _create_task(self, arguments: Any) -> dict:
        args = CreateTaskArgs.parse(arguments)
        task = self._remote("create_task", self.repo.insert, args.title, args.notes)
        return task.to_dict()

    def _delete_task(self, arguments: Any) -> str:
        args = DeleteTaskArgs.parse(arguments)
        self._remote("delete_task", self.repo.delete, args.task_id)
        return DELETED_MESSAGE

    def _complete_task(self, arguments: Any) -> dict:
        args = CompleteTaskArgs.parse(arguments)
        task = self._remote("complete_task", self.repo.patch, args.task_id, args.status)
        return task.to_dict()
