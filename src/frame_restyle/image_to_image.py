"""Image-conditioned regeneration with a Gemini image model."""

import logging

from google.genai import types

from frame_restyle.base import (
    BaseGenerator,
    RegenerationModel,
    RegenerationResult,
    decode_image_data,
    reason_name,
)
from frame_restyle.errors import BlockedError, NoImageProducedError
from frame_restyle.styles import StyleInput, instructional_prompt

logger = logging.getLogger(__name__)

# Candidate finish reasons that mean the provider withheld the image.
BLOCKING_FINISH_REASONS = frozenset({
    "SAFETY",
    "RECITATION",
    "BLOCKLIST",
    "PROHIBITED_CONTENT",
    "SPII",
    "IMAGE_SAFETY",
})

SOURCE_MIME_TYPE = "image/jpeg"


class ImageToImageGenerator(BaseGenerator):
    """Generator that restyles or edits an existing frame.

    The source frame is sent together with a text instruction and the model
    is asked for a mixed image and text response. The first inline image in
    the first candidate is the result.
    """

    MODEL_ID = "gemini-2.5-flash-image"
    OPERATION = "generate_content"

    @property
    def backend(self) -> RegenerationModel:
        return RegenerationModel.GEMINI

    def regenerate(self, image_data: str, style: StyleInput) -> RegenerationResult:
        """Regenerate a frame in the given style.

        Args:
            image_data: Base64-encoded source frame.
            style: ArtStyle or style label.

        Returns:
            RegenerationResult paired with the instruction that was sent.

        Raises:
            BlockedError: If the provider withheld the image.
            NoImageProducedError: If the response had no image for another reason.
        """
        prompt = instructional_prompt(style)
        response = self._call(self._prepare_request(image_data, prompt))
        return self._process_response(response, prompt)

    async def regenerate_async(self, image_data: str, style: StyleInput) -> RegenerationResult:
        """Async version of regenerate()."""
        prompt = instructional_prompt(style)
        response = await self._call_async(self._prepare_request(image_data, prompt))
        return self._process_response(response, prompt)

    def edit(self, image_data: str, prompt: str) -> RegenerationResult:
        """Edit a frame following a free-form prompt.

        No style text is added to ``prompt``. The returned prompt is an edit
        record rather than the raw prompt.
        """
        response = self._call(self._prepare_request(image_data, prompt))
        return self._process_response(response, _edit_record(prompt), action="editing")

    async def edit_async(self, image_data: str, prompt: str) -> RegenerationResult:
        """Async version of edit()."""
        response = await self._call_async(self._prepare_request(image_data, prompt))
        return self._process_response(response, _edit_record(prompt), action="editing")

    def _prepare_request(self, image_data: str, prompt: str) -> dict:
        image_part = types.Part.from_bytes(data=decode_image_data(image_data), mime_type=SOURCE_MIME_TYPE)

        cfg = types.GenerateContentConfig(
            response_modalities=[types.Modality.IMAGE, types.Modality.TEXT],
        )

        logger.debug("Sending image-conditioned request to %s", self.model_id)
        return {"contents": [image_part, prompt], "config": cfg}

    def _process_response(self, response, prompt: str, action: str = "regeneration") -> RegenerationResult:
        candidate = response.candidates[0] if response.candidates else None

        if candidate is not None and candidate.content and candidate.content.parts:
            for part in candidate.content.parts:
                if part.inline_data and part.inline_data.data:
                    return self._build_result(
                        part.inline_data.data,
                        prompt,
                        part.inline_data.mime_type,
                        default_mime_type="image/png",
                    )

        reason = _block_reason(response, candidate)
        if reason:
            if action == "editing":
                raise BlockedError(reason, action=action, hint="Please modify your prompt and try again.")
            raise BlockedError(reason, action=action)

        if action == "editing":
            raise NoImageProducedError("No image was generated in the API response for editing.")
        raise NoImageProducedError("No image was generated by Gemini.")


def _edit_record(prompt: str) -> str:
    return f'Edited with user prompt: "{prompt}"'


def _block_reason(response, candidate):
    """Return the candidate-level or response-level block reason, if any."""
    if candidate is not None:
        finish_reason = reason_name(candidate.finish_reason)
        if finish_reason in BLOCKING_FINISH_REASONS:
            return finish_reason

    feedback = response.prompt_feedback
    if feedback is not None and feedback.block_reason:
        return reason_name(feedback.block_reason)
    return None
