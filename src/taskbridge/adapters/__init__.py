"""Adapters - I/O implementations of ports."""

from .google_tasks import GoogleTasksAdapter, AuthenticationError

__all__ = [
    "GoogleTasksAdapter",
    "AuthenticationError",
]
