"""Tests for batch frame regeneration."""

import asyncio

from conftest import SOURCE_FRAME
from frame_restyle.async_utils import BatchResult, FrameRequest, regenerate_frames_async
from frame_restyle.base import RegenerationRequest
from frame_restyle.dispatcher import RegenerationDispatcher
from frame_restyle.errors import MissingInputError, RateLimitedError
from frame_restyle.styles import ArtStyle


def frame(frame_id, **kwargs) -> FrameRequest:
    fields = {"model": "gemini", "style": ArtStyle.ANIME, "aspect_ratio": 1.0, "image_data": SOURCE_FRAME}
    fields.update(kwargs)
    return FrameRequest(RegenerationRequest(**fields), frame_id=frame_id)


class TestBatchResult:
    """Tests for BatchResult counters."""

    def test_counts(self):
        batch = BatchResult(results=[("a", object())], errors=[("b", RateLimitedError())])

        assert batch.total_requests == 2
        assert batch.successful == 1
        assert batch.failed == 1


class TestRegenerateFrames:
    """Tests for regenerate_frames_async."""

    def test_all_frames_succeed(self, fake_client):
        dispatcher = RegenerationDispatcher(fake_client)
        frames = [frame(f"frame_{i}") for i in range(4)]

        batch = asyncio.run(regenerate_frames_async(dispatcher, frames, max_concurrent=2))

        assert batch.successful == 4
        assert [frame_id for frame_id, _ in batch.results] == ["frame_0", "frame_1", "frame_2", "frame_3"]
        assert fake_client.aio.models.generate_content.await_count == 4

    def test_failures_are_collected(self, fake_client):
        dispatcher = RegenerationDispatcher(fake_client)
        frames = [frame("ok"), frame("missing", image_data=None)]

        batch = asyncio.run(regenerate_frames_async(dispatcher, frames))

        assert batch.successful == 1
        assert batch.failed == 1
        frame_id, error = batch.errors[0]
        assert frame_id == "missing"
        assert isinstance(error, MissingInputError)

    def test_rate_limit_is_not_retried(self, fake_client):
        fake_client.aio.models.generate_content.side_effect = RuntimeError("429 Too Many Requests")
        dispatcher = RegenerationDispatcher(fake_client)

        batch = asyncio.run(regenerate_frames_async(dispatcher, [frame("a"), frame("b")]))

        assert batch.failed == 2
        assert all(isinstance(error, RateLimitedError) for _, error in batch.errors)
        assert fake_client.aio.models.generate_content.await_count == 2

    def test_empty_batch(self, fake_client):
        batch = asyncio.run(regenerate_frames_async(RegenerationDispatcher(fake_client), []))

        assert batch.total_requests == 0
