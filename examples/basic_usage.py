"""Basic usage examples for frame-restyle."""

import asyncio
import base64

from frame_restyle import (
    ArtStyle,
    BlockedError,
    FrameRequest,
    RateLimitedError,
    RegenerationDispatcher,
    RegenerationRequest,
    regenerate_frames_async,
)


def load_frame(path: str) -> str:
    with open(path, "rb") as f:
        return base64.b64encode(f.read()).decode("utf-8")


def gemini_restyle_example():
    """Example: Restyle an existing frame with the image-conditioned backend."""

    # Reads API_KEY (or GOOGLE_APPLICATION_CREDENTIALS) from the environment
    dispatcher = RegenerationDispatcher.from_env()

    request = RegenerationRequest(
        model="gemini",
        style=ArtStyle.CLAYMATION,
        aspect_ratio=16 / 9,
        image_data=load_frame("./frames/frame_000.jpg"),
    )

    try:
        result = dispatcher.dispatch(request)
    except BlockedError as e:
        print(f"Blocked ({e.reason}): {e}")
        return

    result.save("./output/frame_000_claymation.png")
    print(f"Prompt used: {result.prompt}")


def imagen_generation_example():
    """Example: Synthesize a frame from its description with Imagen."""

    dispatcher = RegenerationDispatcher.from_env()

    request = RegenerationRequest(
        model="imagen",
        style=ArtStyle.NEON_PUNK,
        aspect_ratio=1920 / 1080,
        text_prompt="A cyclist crossing a bridge at night, city lights in the background",
    )

    result = dispatcher.dispatch(request)
    result.save("./output/bridge_neon.jpg")
    print(f"Prompt used: {result.prompt}")


def edit_example():
    """Example: Apply a free-form edit to a frame."""

    dispatcher = RegenerationDispatcher.from_env()

    result = dispatcher.edit_image(
        load_frame("./frames/frame_000.jpg"),
        "Add falling snow and make the sky overcast",
    )
    result.save("./output/frame_000_snow.png")
    print(result.prompt)


def batch_frames_example():
    """Example: Regenerate every frame of a clip concurrently."""

    dispatcher = RegenerationDispatcher.from_env()

    frames = [
        FrameRequest(
            RegenerationRequest(
                model="gemini",
                style=ArtStyle.ANIME,
                aspect_ratio=16 / 9,
                image_data=load_frame(f"./frames/frame_{i:03d}.jpg"),
            ),
            frame_id=f"frame_{i:03d}",
        )
        for i in range(8)
    ]

    batch = asyncio.run(regenerate_frames_async(dispatcher, frames, max_concurrent=3))

    for frame_id, result in batch.results:
        result.save(f"./output/{frame_id}_anime.png")

    for frame_id, error in batch.errors:
        if isinstance(error, RateLimitedError):
            print(f"{frame_id}: rate limited, resubmit later")
        else:
            print(f"{frame_id}: {error}")

    print(f"{batch.successful}/{batch.total_requests} frames regenerated")


if __name__ == "__main__":
    # Run the example you want to test
    # gemini_restyle_example()
    # imagen_generation_example()
    # edit_example()
    # batch_frames_example()
    print("Uncomment the example you want to run!")
