"""Text-conditioned regeneration with Imagen."""

import logging

from google.genai import types

from frame_restyle.aspect_ratio import nearest_supported_ratio
from frame_restyle.base import (
    BaseGenerator,
    RegenerationModel,
    RegenerationResult,
    reason_name,
)
from frame_restyle.errors import BlockedError, NoImageProducedError
from frame_restyle.styles import StyleInput, style_suffix

logger = logging.getLogger(__name__)

OUTPUT_MIME_TYPE = "image/jpeg"


def build_prompt(base_prompt: str, style: StyleInput) -> str:
    """Append the style suffix to the frame description.

    The description always comes first; Imagen weights earlier segments more.
    """
    return f"{base_prompt}{style_suffix(style)}"


class TextToImageGenerator(BaseGenerator):
    """Generator that synthesizes a new frame from its text description."""

    MODEL_ID = "imagen-4.0-generate-001"
    OPERATION = "generate_images"

    @property
    def backend(self) -> RegenerationModel:
        return RegenerationModel.IMAGEN

    def regenerate(self, base_prompt: str, style: StyleInput, aspect_ratio: float) -> RegenerationResult:
        """Generate a frame from a description in the given style.

        Args:
            base_prompt: Description of the frame content.
            style: ArtStyle or style label.
            aspect_ratio: Source frame width divided by height. Mapped to the
                nearest supported ratio.

        Returns:
            RegenerationResult paired with the final prompt.

        Raises:
            ValueError: If aspect_ratio is not a finite positive number.
            BlockedError: If the provider withheld the image.
            NoImageProducedError: If the response had no image for another reason.
        """
        prompt = build_prompt(base_prompt, style)
        response = self._call(self._prepare_request(prompt, aspect_ratio))
        return self._process_response(response, prompt)

    async def regenerate_async(self, base_prompt: str, style: StyleInput, aspect_ratio: float) -> RegenerationResult:
        """Async version of regenerate()."""
        prompt = build_prompt(base_prompt, style)
        response = await self._call_async(self._prepare_request(prompt, aspect_ratio))
        return self._process_response(response, prompt)

    def _prepare_request(self, prompt: str, aspect_ratio: float) -> dict:
        ratio = nearest_supported_ratio(aspect_ratio)

        cfg = types.GenerateImagesConfig(
            number_of_images=1,
            output_mime_type=OUTPUT_MIME_TYPE,
            aspect_ratio=ratio.value,
            include_rai_reason=True,
        )

        logger.debug("Sending text-conditioned request to %s at %s", self.model_id, ratio.value)
        return {"prompt": prompt, "config": cfg}

    def _process_response(self, response, prompt: str) -> RegenerationResult:
        generated = response.generated_images[0] if response.generated_images else None

        if generated is not None and generated.image and generated.image.image_bytes:
            return self._build_result(
                generated.image.image_bytes,
                prompt,
                generated.image.mime_type,
                default_mime_type=OUTPUT_MIME_TYPE,
            )

        reason = _block_reason(response, generated)
        if reason:
            raise BlockedError(reason, action="generation", hint="Please try a different frame.")

        raise NoImageProducedError("No image was generated by Imagen.")


def _block_reason(response, generated):
    # Older responses carry prompt feedback; current ones flag the slot itself.
    feedback = getattr(response, "prompt_feedback", None)
    if feedback is not None and getattr(feedback, "block_reason", None):
        return reason_name(feedback.block_reason)
    if generated is not None and generated.rai_filtered_reason:
        return generated.rai_filtered_reason
    return None
