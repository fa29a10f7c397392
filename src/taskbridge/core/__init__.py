"""Functional core - task model, argument validation, errors. No I/O."""

from .tasks import Task, NEEDS_ACTION, COMPLETED, STATUSES
from .arguments import CreateTaskArgs, DeleteTaskArgs, CompleteTaskArgs
from .errors import (
    TasksError,
    InvalidRequestError,
    InvalidParamsError,
    MethodNotFoundError,
    InternalError,
)

__all__ = [
    # Tasks
    "Task",
    "NEEDS_ACTION",
    "COMPLETED",
    "STATUSES",
    # Arguments
    "CreateTaskArgs",
    "DeleteTaskArgs",
    "CompleteTaskArgs",
    # Errors
    "TasksError",
    "InvalidRequestError",
    "InvalidParamsError",
    "MethodNotFoundError",
    "InternalError",
]
