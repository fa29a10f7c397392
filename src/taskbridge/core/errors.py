"""Error taxonomy surfaced to callers.

Each error carries a kind and the JSON-RPC code it maps to on the wire.
"""


class TasksError(Exception):
    """Base class for every error a caller can see."""

    kind = "internal-error"
    code = -32603

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class InvalidRequestError(TasksError):
    """Raised when an unknown resource is addressed."""

    kind = "invalid-request"
    code = -32600


class MethodNotFoundError(TasksError):
    """Raised when an operation name is not in the catalog."""

    kind = "method-not-found"
    code = -32601


class InvalidParamsError(TasksError):
    """Raised when an argument bag fails validation."""

    kind = "invalid-params"
    code = -32602


class InternalError(TasksError):
    """Raised when the remote service call fails."""

    kind = "internal-error"
    code = -32603
