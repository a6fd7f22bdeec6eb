"""Shared types and the base generator for both regeneration backends."""

import base64
import binascii
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from google import genai

from frame_restyle.styles import StyleInput


class RegenerationModel(str, Enum):
    """Backends a frame can be regenerated with."""

    GEMINI = "gemini"  # image-conditioned
    IMAGEN = "imagen"  # text-conditioned


@dataclass
class RegenerationRequest:
    """A single regeneration call.

    Attributes:
        model: Backend to use. Plain strings are coerced to RegenerationModel.
        style: ArtStyle or opaque style label.
        aspect_ratio: Source frame width divided by height.
        image_data: Base64-encoded source frame (required for Gemini).
        text_prompt: Description of the frame (required for Imagen).
    """

    model: RegenerationModel
    style: StyleInput
    aspect_ratio: float
    image_data: Optional[str] = None
    text_prompt: Optional[str] = None

    def __post_init__(self):
        self.model = RegenerationModel(self.model)


@dataclass
class RegenerationResult:
    """Result of a regeneration or edit.

    Attributes:
        image: The produced image, base64-encoded.
        prompt: The prompt text that was sent, or an edit record.
        mime_type: MIME type of the image (e.g., "image/png").
    """

    image: str
    prompt: str
    mime_type: str = "image/jpeg"

    def to_bytes(self) -> bytes:
        """Decode the image to raw bytes."""
        return base64.b64decode(self.image)

    def to_data_uri(self) -> str:
        """Convert the image to a data URI.

        Useful for embedding directly in HTML/CSS.
        """
        return f"data:{self.mime_type};base64,{self.image}"

    def to_pil(self) -> "PIL.Image.Image":
        """Convert the image to a PIL Image object.

        Raises:
            ImportError: If Pillow is not installed.
        """
        try:
            from PIL import Image
        except ImportError:
            raise ImportError("Pillow is required for PIL conversion. Install with: pip install pillow")

        from io import BytesIO

        return Image.open(BytesIO(self.to_bytes()))

    def save(self, path: str) -> str:
        """Write the decoded image to ``path`` and return the path."""
        with open(path, "wb") as f:
            f.write(self.to_bytes())
        return path


def decode_image_data(image_data: str) -> bytes:
    """Decode a base64 frame, accepting an optional data URI prefix.

    Raises:
        ValueError: If the payload is not valid base64.
    """
    if image_data.startswith("data:") and "," in image_data:
        image_data = image_data.split(",", 1)[1]
    try:
        return base64.b64decode(image_data, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Image data is not valid base64: {e}") from e


class BaseGenerator(ABC):
    """Base class for a single GenAI backend.

    Subclasses name the remote operation they use and turn its response into
    a RegenerationResult. The client is injected so one handle can be shared
    across generators and replaced in tests.
    """

    MODEL_ID: str = ""
    OPERATION: str = ""

    def __init__(self, client: genai.Client, model_id: Optional[str] = None):
        """Initialize the generator.

        Args:
            client: A configured ``genai.Client`` (see ``create_client``).
            model_id: Override for the backend model ID.
        """
        self._client = client
        self.model_id = model_id or self.MODEL_ID

    @property
    @abstractmethod
    def backend(self) -> RegenerationModel:
        """Return the backend this generator talks to."""
        pass

    def _call(self, request: dict[str, Any]) -> Any:
        operation = getattr(self._client.models, self.OPERATION)
        return operation(model=self.model_id, **request)

    async def _call_async(self, request: dict[str, Any]) -> Any:
        operation = getattr(self._client.aio.models, self.OPERATION)
        return await operation(model=self.model_id, **request)

    @staticmethod
    def _build_result(image_bytes: bytes, prompt: str, mime_type: Optional[str], default_mime_type: str) -> RegenerationResult:
        return RegenerationResult(
            image=base64.b64encode(image_bytes).decode("utf-8"),
            prompt=prompt,
            mime_type=mime_type or default_mime_type,
        )


def reason_name(reason: Any) -> Optional[str]:
    """Return the plain name of a provider enum or string reason."""
    if reason is None:
        return None
    return str(getattr(reason, "value", reason))
