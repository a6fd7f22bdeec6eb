"""Construction of the Google GenAI client shared by both backends."""

import json
import logging
import os
from typing import Optional

from google import genai
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account

from frame_restyle.errors import ConfigurationError

logger = logging.getLogger(__name__)

API_KEY_ENV = "API_KEY"
CREDENTIALS_ENV = "GOOGLE_APPLICATION_CREDENTIALS"
LOCATION_ENV = "GCP_LOCATION"

_SCOPES = ["https://www.googleapis.com/auth/cloud-platform"]


def _vertex_client(credentials_path: str, location: str, project_id: Optional[str]) -> genai.Client:
    try:
        with open(credentials_path, "r") as f:
            creds_data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Could not read credentials file {credentials_path}: {e}") from e

    project_id = project_id or creds_data.get("project_id")
    if not project_id:
        raise ConfigurationError("project_id not found in credentials file and not provided")

    try:
        credentials = service_account.Credentials.from_service_account_file(
            credentials_path,
            scopes=_SCOPES,
        )
    except (GoogleAuthError, ValueError) as e:
        raise ConfigurationError(f"Unusable service account file {credentials_path}: {e}") from e

    logger.debug("Using Vertex AI client for project %s in %s", project_id, location)
    return genai.Client(
        vertexai=True,
        project=project_id,
        location=location,
        credentials=credentials,
    )


def create_client(
    api_key: Optional[str] = None,
    credentials_path: Optional[str] = None,
    location: Optional[str] = None,
    project_id: Optional[str] = None,
) -> genai.Client:
    """Create the GenAI client used for every regeneration call.

    Explicit arguments win over the environment. Resolution order:
    ``api_key``, ``credentials_path``, ``$API_KEY``, then
    ``$GOOGLE_APPLICATION_CREDENTIALS``.

    Args:
        api_key: Gemini Developer API key.
        credentials_path: Path to a service account JSON file (Vertex AI).
        location: Google Cloud region for Vertex AI. Defaults to
            ``$GCP_LOCATION`` or "global".
        project_id: Google Cloud project ID. If not provided, read from the
            credentials file.

    Returns:
        A configured ``genai.Client``.

    Raises:
        ConfigurationError: If no usable credential is available.
    """
    location = location or os.environ.get(LOCATION_ENV, "global")

    if api_key:
        return genai.Client(api_key=api_key)
    if credentials_path:
        return _vertex_client(credentials_path, location, project_id)

    env_key = os.environ.get(API_KEY_ENV)
    if env_key:
        return genai.Client(api_key=env_key)

    env_credentials = os.environ.get(CREDENTIALS_ENV)
    if env_credentials:
        return _vertex_client(env_credentials, location, project_id)

    raise ConfigurationError(
        f"Gemini API key is not set. Please configure the {API_KEY_ENV} environment variable."
    )
