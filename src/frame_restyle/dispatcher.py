"""Public entry point for regenerating and editing frames."""

import logging
from contextlib import contextmanager
from typing import Optional

from google import genai

from frame_restyle.base import RegenerationModel, RegenerationRequest, RegenerationResult
from frame_restyle.client import create_client
from frame_restyle.errors import BlockedError, MissingInputError, normalize_error
from frame_restyle.image_to_image import ImageToImageGenerator
from frame_restyle.text_to_image import TextToImageGenerator

logger = logging.getLogger(__name__)


class RegenerationDispatcher:
    """Route regeneration requests to the right backend.

    Every failure leaves this class as a RegenerationError subclass: missing
    input is rejected before any network call, blocked responses keep the
    provider's reason, and transport errors are reclassified once here.

    Example:
        ```python
        from frame_restyle import ArtStyle, RegenerationDispatcher, RegenerationRequest

        dispatcher = RegenerationDispatcher.from_env()
        result = dispatcher.dispatch(
            RegenerationRequest(
                model="imagen",
                style=ArtStyle.ANIME,
                aspect_ratio=16 / 9,
                text_prompt="A lighthouse on a cliff at dusk",
            )
        )
        result.save("frame_001.jpg")
        ```
    """

    def __init__(
        self,
        client: genai.Client,
        gemini_model_id: Optional[str] = None,
        imagen_model_id: Optional[str] = None,
    ):
        """Initialize the dispatcher.

        Args:
            client: A configured ``genai.Client`` shared by both backends.
            gemini_model_id: Override for the image-conditioned model ID.
            imagen_model_id: Override for the text-conditioned model ID.
        """
        self._image_generator = ImageToImageGenerator(client, gemini_model_id)
        self._text_generator = TextToImageGenerator(client, imagen_model_id)

    @classmethod
    def from_env(cls, **kwargs) -> "RegenerationDispatcher":
        """Build a dispatcher with a client configured from the environment.

        Raises:
            ConfigurationError: If no credential is configured.
        """
        return cls(create_client(), **kwargs)

    def dispatch(self, request: RegenerationRequest) -> RegenerationResult:
        """Regenerate one frame with the backend named in ``request``.

        Raises:
            MissingInputError: If the backend's required input is absent.
            BlockedError: If the provider withheld the image.
            RateLimitedError: On quota or rate exhaustion.
            InvalidCredentialsError: If the credential was rejected.
            UnknownFailureError: For any other failure.
        """
        self._validate(request)
        logger.debug("Regenerating frame with %s in style %r", request.model.value, request.style)

        if request.model == RegenerationModel.IMAGEN:
            with _classified_errors(self._text_generator.backend.value):
                return self._text_generator.regenerate(request.text_prompt, request.style, request.aspect_ratio)
        with _classified_errors(self._image_generator.backend.value):
            return self._image_generator.regenerate(request.image_data, request.style)

    async def dispatch_async(self, request: RegenerationRequest) -> RegenerationResult:
        """Async version of dispatch()."""
        self._validate(request)
        logger.debug("Regenerating frame with %s in style %r", request.model.value, request.style)

        if request.model == RegenerationModel.IMAGEN:
            with _classified_errors(self._text_generator.backend.value):
                return await self._text_generator.regenerate_async(
                    request.text_prompt, request.style, request.aspect_ratio
                )
        with _classified_errors(self._image_generator.backend.value):
            return await self._image_generator.regenerate_async(request.image_data, request.style)

    def edit_image(self, image_data: str, prompt: str) -> RegenerationResult:
        """Edit a frame with a free-form prompt using the Gemini backend.

        Style text is never added to ``prompt``. Errors are classified the
        same way as dispatch().

        Raises:
            MissingInputError: If image_data or prompt is empty.
        """
        self._validate_edit(image_data, prompt)
        with _classified_errors(self._image_generator.backend.value, action="edit"):
            return self._image_generator.edit(image_data, prompt)

    async def edit_image_async(self, image_data: str, prompt: str) -> RegenerationResult:
        """Async version of edit_image()."""
        self._validate_edit(image_data, prompt)
        with _classified_errors(self._image_generator.backend.value, action="edit"):
            return await self._image_generator.edit_async(image_data, prompt)

    @staticmethod
    def _validate(request: RegenerationRequest) -> None:
        if request.model == RegenerationModel.IMAGEN and not request.text_prompt:
            raise MissingInputError("A text prompt is required for the Imagen model.")
        if request.model == RegenerationModel.GEMINI and not request.image_data:
            raise MissingInputError("Base64 image data is required for the Gemini model.")

    @staticmethod
    def _validate_edit(image_data: str, prompt: str) -> None:
        if not image_data:
            raise MissingInputError("Base64 image data is required for editing.")
        if not prompt or not prompt.strip():
            raise MissingInputError("An edit prompt is required.")


@contextmanager
def _classified_errors(model: str, action: str = "regenerate"):
    """Reclassify anything raised inside the block into the public taxonomy."""
    try:
        yield
    except BlockedError:
        raise
    except Exception as e:
        logger.error("Error calling %s API for %s: %s", model, action, e)
        raise normalize_error(e, model, action=action) from e
