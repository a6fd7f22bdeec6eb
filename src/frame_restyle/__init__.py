"""Frame regeneration in artistic styles using Google Gemini and Imagen."""

from frame_restyle.aspect_ratio import AspectRatio, nearest_supported_ratio
from frame_restyle.base import (
    BaseGenerator,
    RegenerationModel,
    RegenerationRequest,
    RegenerationResult,
)
from frame_restyle.client import create_client
from frame_restyle.dispatcher import RegenerationDispatcher
from frame_restyle.errors import (
    BlockedError,
    ConfigurationError,
    InvalidCredentialsError,
    MissingInputError,
    NoImageProducedError,
    RateLimitedError,
    RegenerationError,
    UnknownFailureError,
)
from frame_restyle.image_to_image import ImageToImageGenerator
from frame_restyle.styles import (
    ArtStyle,
    available_styles,
    instructional_prompt,
    style_suffix,
)
from frame_restyle.text_to_image import TextToImageGenerator
from frame_restyle.async_utils import (
    BatchResult,
    FrameRequest,
    regenerate_frames_async,
)

__version__ = "0.1.0"

__all__ = [
    # Entry point
    "RegenerationDispatcher",
    "create_client",
    # Generators
    "BaseGenerator",
    "ImageToImageGenerator",
    "TextToImageGenerator",
    # Styles and ratios
    "ArtStyle",
    "available_styles",
    "instructional_prompt",
    "style_suffix",
    "AspectRatio",
    "nearest_supported_ratio",
    # Requests and results
    "RegenerationModel",
    "RegenerationRequest",
    "RegenerationResult",
    # Errors
    "RegenerationError",
    "ConfigurationError",
    "MissingInputError",
    "BlockedError",
    "RateLimitedError",
    "InvalidCredentialsError",
    "UnknownFailureError",
    "NoImageProducedError",
    # Async utilities
    "FrameRequest",
    "BatchResult",
    "regenerate_frames_async",
]
