"""Tests for client construction."""

import json
from unittest.mock import patch

import pytest

from frame_restyle.client import create_client
from frame_restyle.dispatcher import RegenerationDispatcher
from frame_restyle.errors import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("API_KEY", "GOOGLE_APPLICATION_CREDENTIALS", "GCP_LOCATION"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def credentials_file(tmp_path):
    path = tmp_path / "service-account.json"
    path.write_text(json.dumps({"type": "service_account", "project_id": "frames-project"}))
    return str(path)


class TestCreateClient:
    """Tests for create_client."""

    def test_missing_credentials(self, clean_env):
        with pytest.raises(ConfigurationError, match="API_KEY"):
            create_client()

    def test_dispatcher_from_env_without_credentials(self, clean_env):
        with pytest.raises(ConfigurationError):
            RegenerationDispatcher.from_env()

    @patch("frame_restyle.client.genai.Client")
    def test_explicit_api_key(self, mock_client, clean_env):
        create_client(api_key="explicit-key")

        mock_client.assert_called_once_with(api_key="explicit-key")

    @patch("frame_restyle.client.genai.Client")
    def test_api_key_from_env(self, mock_client, clean_env):
        clean_env.setenv("API_KEY", "env-key")

        create_client()

        mock_client.assert_called_once_with(api_key="env-key")

    @patch("frame_restyle.client.service_account.Credentials.from_service_account_file")
    @patch("frame_restyle.client.genai.Client")
    def test_service_account(self, mock_client, mock_creds, clean_env, credentials_file):
        create_client(credentials_path=credentials_file, location="us-central1")

        kwargs = mock_client.call_args.kwargs
        assert kwargs["vertexai"] is True
        assert kwargs["project"] == "frames-project"
        assert kwargs["location"] == "us-central1"
        assert kwargs["credentials"] is mock_creds.return_value

    @patch("frame_restyle.client.service_account.Credentials.from_service_account_file")
    @patch("frame_restyle.client.genai.Client")
    def test_service_account_from_env(self, mock_client, mock_creds, clean_env, credentials_file):
        clean_env.setenv("GOOGLE_APPLICATION_CREDENTIALS", credentials_file)
        clean_env.setenv("GCP_LOCATION", "europe-west4")

        create_client()

        assert mock_client.call_args.kwargs["location"] == "europe-west4"

    def test_credentials_without_project(self, clean_env, tmp_path):
        path = tmp_path / "no-project.json"
        path.write_text(json.dumps({"type": "service_account"}))

        with pytest.raises(ConfigurationError, match="project_id"):
            create_client(credentials_path=str(path))

    def test_malformed_service_account(self, clean_env, tmp_path):
        """A file with a project id but no signing fields is unusable."""
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"type": "service_account", "project_id": "frames-project"}))

        with pytest.raises(ConfigurationError, match="Unusable service account"):
            create_client(credentials_path=str(path))

    def test_unreadable_credentials(self, clean_env, tmp_path):
        with pytest.raises(ConfigurationError):
            create_client(credentials_path=str(tmp_path / "missing.json"))
