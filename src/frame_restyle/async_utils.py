"""Async utilities for regenerating many frames in parallel."""

import asyncio
from dataclasses import dataclass
from typing import Optional

from .base import RegenerationRequest, RegenerationResult
from .dispatcher import RegenerationDispatcher
from .errors import RegenerationError


@dataclass
class FrameRequest:
    """A single frame to regenerate in a batch.

    Attributes:
        request: The regeneration request for this frame.
        frame_id: Optional identifier for tracking this frame.
    """

    request: RegenerationRequest
    frame_id: Optional[str] = None


@dataclass
class BatchResult:
    """Result of a batch regeneration.

    Attributes:
        results: (frame_id, result) pairs for frames that succeeded.
        errors: (frame_id, error) pairs for frames that failed. Errors are
            already classified by the dispatcher.
    """

    results: list[tuple[Optional[str], RegenerationResult]]
    errors: list[tuple[Optional[str], RegenerationError]]

    @property
    def total_requests(self) -> int:
        return len(self.results) + len(self.errors)

    @property
    def successful(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> int:
        return len(self.errors)


async def regenerate_frames_async(
    dispatcher: RegenerationDispatcher,
    frames: list[FrameRequest],
    max_concurrent: int = 5,
) -> BatchResult:
    """Regenerate multiple frames concurrently.

    Each frame is one dispatch. Failures are collected rather than raised and
    nothing is retried; back off and resubmit failed frames (for example
    after a RateLimitedError) from the caller.

    Args:
        dispatcher: The dispatcher to send every frame through.
        frames: Frames to regenerate.
        max_concurrent: Maximum number of requests in flight (default 5).

    Returns:
        BatchResult with successes and failures in input order.

    Example:
        ```python
        frames = [
            FrameRequest(
                RegenerationRequest(model="gemini", style=ArtStyle.CLAYMATION, aspect_ratio=1.0, image_data=b64),
                frame_id=f"frame_{i}",
            )
            for i, b64 in enumerate(encoded_frames)
        ]
        batch = asyncio.run(regenerate_frames_async(dispatcher, frames))
        for frame_id, error in batch.errors:
            print(f"{frame_id}: {error}")
        ```
    """
    semaphore = asyncio.Semaphore(max_concurrent)

    async def process_frame(frame: FrameRequest):
        async with semaphore:
            try:
                return (frame.frame_id, await dispatcher.dispatch_async(frame.request))
            except RegenerationError as e:
                return (frame.frame_id, e)

    outcomes = await asyncio.gather(*(process_frame(frame) for frame in frames))

    results = []
    errors = []
    for frame_id, outcome in outcomes:
        if isinstance(outcome, RegenerationError):
            errors.append((frame_id, outcome))
        else:
            results.append((frame_id, outcome))

    return BatchResult(results=results, errors=errors)
