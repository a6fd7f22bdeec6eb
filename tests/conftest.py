"""Shared fixtures: a fake GenAI client and response builders."""

import base64
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types

SOURCE_FRAME = base64.b64encode(b"source-frame-bytes").decode("utf-8")
GENERATED_BYTES = b"generated-image-bytes"
GENERATED_B64 = base64.b64encode(GENERATED_BYTES).decode("utf-8")


def content_response(parts=None, finish_reason=None, block_reason=None) -> types.GenerateContentResponse:
    """Build a generate_content response with a single candidate."""
    candidate = types.Candidate(
        content=types.Content(role="model", parts=parts or []),
        finish_reason=finish_reason,
    )
    feedback = None
    if block_reason is not None:
        feedback = types.GenerateContentResponsePromptFeedback(block_reason=block_reason)
    return types.GenerateContentResponse(candidates=[candidate], prompt_feedback=feedback)


def image_part(data: bytes = GENERATED_BYTES, mime_type: str = "image/png") -> types.Part:
    return types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))


def images_response(image_bytes=GENERATED_BYTES, rai_filtered_reason=None) -> types.GenerateImagesResponse:
    """Build a generate_images response with one slot."""
    if image_bytes is None:
        slot = types.GeneratedImage(rai_filtered_reason=rai_filtered_reason)
    else:
        slot = types.GeneratedImage(image=types.Image(image_bytes=image_bytes, mime_type="image/jpeg"))
    return types.GenerateImagesResponse(generated_images=[slot])


@pytest.fixture
def fake_client():
    """MagicMock standing in for genai.Client with sync and async surfaces."""
    client = MagicMock()
    client.models.generate_content.return_value = content_response(parts=[image_part()])
    client.models.generate_images.return_value = images_response()
    client.aio.models.generate_content = AsyncMock(return_value=content_response(parts=[image_part()]))
    client.aio.models.generate_images = AsyncMock(return_value=images_response())
    return client
