"""Tests for Google Tasks adapter."""

from unittest.mock import patch, MagicMock

import pytest

from taskbridge.adapters.google_tasks import AuthenticationError, GoogleTasksAdapter
from taskbridge.config import Config


@pytest.fixture
def config():
    return Config(
        client_id="client-id",
        client_secret="client-secret",
        refresh_token="refresh-token",
        access_token="access-token",
    )


@pytest.fixture
def service():
    return MagicMock()


@pytest.fixture
def adapter(config, service):
    adapter = GoogleTasksAdapter(config)
    with patch.object(GoogleTasksAdapter, "_build_service", return_value=service):
        yield adapter


class TestGoogleTasksAdapter:
    """Tests for GoogleTasksAdapter."""

    def test_default_tasklist(self, config):
        assert GoogleTasksAdapter(config).tasklist == "@default"

    def test_list_preserves_remote_order(self, adapter, service):
        service.tasks().list().execute.return_value = {
            "items": [
                {"id": "b", "title": "Second", "status": "needsAction"},
                {"id": "a", "title": "First", "status": "completed"},
            ]
        }

        tasks = adapter.list()

        assert [t.id for t in tasks] == ["b", "a"]
        assert tasks[1].is_completed
        service.tasks().list.assert_called_with(tasklist="@default")

    def test_list_without_items(self, adapter, service):
        service.tasks().list().execute.return_value = {"kind": "tasks#tasks"}
        assert adapter.list() == []

    def test_insert(self, adapter, service):
        service.tasks().insert().execute.return_value = {
            "id": "abc123",
            "title": "Buy milk",
            "status": "needsAction",
        }

        task = adapter.insert("Buy milk")

        assert task.id == "abc123"
        assert task.status == "needsAction"
        service.tasks().insert.assert_called_with(
            tasklist="@default", body={"title": "Buy milk"}
        )

    def test_insert_with_notes(self, adapter, service):
        service.tasks().insert().execute.return_value = {
            "id": "abc123",
            "title": "Buy milk",
            "notes": "2%",
        }

        task = adapter.insert("Buy milk", notes="2%")

        assert task.notes == "2%"
        service.tasks().insert.assert_called_with(
            tasklist="@default", body={"title": "Buy milk", "notes": "2%"}
        )

    def test_delete(self, adapter, service):
        service.tasks().delete().execute.return_value = ""
        assert adapter.delete("abc123") is None
        service.tasks().delete.assert_called_with(tasklist="@default", task="abc123")

    def test_patch_sends_only_status(self, adapter, service):
        service.tasks().patch().execute.return_value = {
            "id": "abc123",
            "title": "Buy milk",
            "status": "completed",
            "completed": "2025-01-15T10:00:00.000Z",
        }

        task = adapter.patch("abc123", "completed")

        assert task.status == "completed"
        assert task.to_dict()["completed"] == "2025-01-15T10:00:00.000Z"
        service.tasks().patch.assert_called_with(
            tasklist="@default", task="abc123", body={"status": "completed"}
        )

    def test_api_error_propagates(self, adapter, service):
        service.tasks().list().execute.side_effect = Exception("API error")
        with pytest.raises(Exception, match="API error"):
            adapter.list()


class TestBuildService:
    @patch("googleapiclient.discovery.build")
    def test_service_built_once(self, mock_build, config):
        adapter = GoogleTasksAdapter(config)

        first = adapter._build_service()
        second = adapter._build_service()

        assert first is second
        mock_build.assert_called_once()
        args, kwargs = mock_build.call_args
        assert args == ("tasks", "v1")
        assert kwargs["credentials"].token == "access-token"

    def test_missing_credentials(self):
        adapter = GoogleTasksAdapter(Config(client_id="id", client_secret="secret"))
        with pytest.raises(AuthenticationError):
            adapter._build_service()

    @patch("google.oauth2.credentials.Credentials.refresh")
    def test_refreshes_without_access_token(self, mock_refresh, config):
        adapter = GoogleTasksAdapter(
            Config(client_id="id", client_secret="secret", refresh_token="refresh")
        )
        creds = adapter._get_credentials()
        mock_refresh.assert_called_once()
        assert creds.refresh_token == "refresh"

    @patch("google.oauth2.credentials.Credentials.refresh")
    def test_no_refresh_with_access_token(self, mock_refresh, config):
        creds = GoogleTasksAdapter(config)._get_credentials()
        mock_refresh.assert_not_called()
        assert creds.token == "access-token"
        assert creds.client_id == "client-id"
