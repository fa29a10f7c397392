"""Typed argument structs for each operation.

Callers send loosely-typed argument bags. Each operation parses the bag into
its own struct and rejects it before anything touches the remote service.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from .errors import InvalidParamsError
from .tasks import STATUSES

# Fields any argument bag may carry; each must be a string when present.
SHARED_FIELDS = ("title", "notes", "taskId", "status")


def _require_mapping(operation: str, arguments: Any) -> Mapping:
    if arguments is None or not isinstance(arguments, Mapping):
        raise InvalidParamsError(
            f"Invalid arguments for {operation}: expected an object"
        )
    for name in SHARED_FIELDS:
        _optional_string(operation, arguments, name)
    return arguments


def _optional_string(operation: str, arguments: Mapping, name: str) -> str | None:
    """Return a string field, or None when absent. JSON null counts as absent."""
    value = arguments.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidParamsError(
            f"Invalid arguments for {operation}: '{name}' must be a string"
        )
    return value


def _required_string(operation: str, arguments: Mapping, name: str) -> str:
    value = _optional_string(operation, arguments, name)
    if not value:
        raise InvalidParamsError(f"Invalid parameters: {name} required")
    return value


@dataclass(frozen=True)
class CreateTaskArgs:
    title: str
    notes: str | None = None

    @classmethod
    def parse(cls, arguments: Any) -> "CreateTaskArgs":
        args = _require_mapping("create_task", arguments)
        return cls(
            title=_required_string("create_task", args, "title"),
            notes=_optional_string("create_task", args, "notes"),
        )


@dataclass(frozen=True)
class DeleteTaskArgs:
    task_id: str

    @classmethod
    def parse(cls, arguments: Any) -> "DeleteTaskArgs":
        args = _require_mapping("delete_task", arguments)
        return cls(task_id=_required_string("delete_task", args, "taskId"))


@dataclass(frozen=True)
class CompleteTaskArgs:
    task_id: str
    status: str

    @classmethod
    def parse(cls, arguments: Any) -> "CompleteTaskArgs":
        args = _require_mapping("complete_task", arguments)
        task_id = _required_string("complete_task", args, "taskId")
        status = _required_string("complete_task", args, "status")
        if status not in STATUSES:
            raise InvalidParamsError(
                f"Invalid parameters: status must be one of {', '.join(STATUSES)}"
            )
        return cls(task_id=task_id, status=status)
