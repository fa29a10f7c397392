"""Google Tasks API adapter."""

import logging

from taskbridge.config import Config
from taskbridge.core.tasks import Task

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/tasks"]
API_VERSION = "v1"
DEFAULT_TASKLIST = "@default"


class AuthenticationError(Exception):
    """Raised when no usable credentials are configured."""

    pass


class GoogleTasksAdapter:
    """
    Google Tasks API adapter for the default task list.

    Implements TaskRepository protocol. Every call goes straight to the API;
    no caching, no retries, errors propagate to the caller.
    """

    def __init__(self, config: Config, tasklist: str = DEFAULT_TASKLIST):
        self.config = config
        self.tasklist = tasklist
        self._service = None

    def _get_credentials(self):
        """Build OAuth credentials from config, refreshing once if no access token."""
        from google.auth.transport.requests import Request
        from google.oauth2.credentials import Credentials

        if not self.config.refresh_token and not self.config.access_token:
            raise AuthenticationError(
                "Missing Google credentials. Set REFRESH_TOKEN or ACCESS_TOKEN."
            )

        creds = Credentials(
            token=self.config.access_token or None,
            refresh_token=self.config.refresh_token or None,
            token_uri=self.config.token_uri,
            client_id=self.config.client_id or None,
            client_secret=self.config.client_secret or None,
            scopes=SCOPES,
        )

        if not creds.token and creds.refresh_token:
            logger.debug("No access token configured, refreshing")
            creds.refresh(Request())

        return creds

    def _build_service(self):
        """Build the Google Tasks API service once and reuse it."""
        if self._service is None:
            from googleapiclient.discovery import build

            creds = self._get_credentials()
            self._service = build(
                "tasks", API_VERSION, credentials=creds, cache_discovery=False
            )
        return self._service

    def list(self) -> list[Task]:
        """Fetch tasks in the order the API returns them."""
        service = self._build_service()
        result = service.tasks().list(tasklist=self.tasklist).execute()
        items = result.get("items", [])
        logger.debug(f"Fetched {len(items)} tasks from {self.tasklist}")
        return [Task.from_api(item) for item in items]

    def insert(self, title: str, notes: str | None = None) -> Task:
        """Create a task. Google assigns the id and a needsAction status."""
        body = {"title": title}
        if notes is not None:
            body["notes"] = notes
        service = self._build_service()
        result = service.tasks().insert(tasklist=self.tasklist, body=body).execute()
        logger.info(f"Created task {result.get('id')}")
        return Task.from_api(result)

    def delete(self, task_id: str) -> None:
        service = self._build_service()
        service.tasks().delete(tasklist=self.tasklist, task=task_id).execute()
        logger.info(f"Deleted task {task_id}")

    def patch(self, task_id: str, status: str) -> Task:
        """Partial update - only the status field is sent."""
        service = self._build_service()
        result = (
            service.tasks()
            .patch(tasklist=self.tasklist, task=task_id, body={"status": status})
            .execute()
        )
        logger.info(f"Set task {task_id} status to {status}")
        return Task.from_api(result)
