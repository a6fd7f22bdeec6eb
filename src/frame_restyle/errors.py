"""Error taxonomy for frame regeneration and the shared normalization routine."""

from typing import Optional


# Substrings the provider uses when a key is rejected.
_INVALID_KEY_MARKERS = ("API key not valid", "API_KEY_INVALID")

# Substrings the provider uses for quota or rate exhaustion.
_RATE_LIMIT_MARKERS = ("429", "RESOURCE_EXHAUSTED")


class RegenerationError(Exception):
    """Base class for every error raised by frame_restyle.

    The message of each subclass is written for direct display to a user.
    """


class ConfigurationError(RegenerationError):
    """Credentials are missing or unusable when the client is constructed."""


class MissingInputError(RegenerationError):
    """The input required by the selected backend was not supplied."""


class BlockedError(RegenerationError):
    """The remote service declined to produce content.

    Attributes:
        reason: The provider's stated reason (e.g. "SAFETY", "RECITATION").
    """

    def __init__(self, reason: str, action: str = "regeneration", hint: str = "Please try a different style or frame."):
        self.reason = reason
        super().__init__(f"Image {action} was blocked. Reason: {reason}. {hint}")


class RateLimitedError(RegenerationError):
    """The service rejected the call for rate or quota reasons."""

    def __init__(self, message: str = "API rate limit or quota exceeded. Please try again later."):
        super().__init__(message)


class InvalidCredentialsError(RegenerationError):
    """The service rejected the configured credential."""

    def __init__(self, message: str = "Your Gemini API key is not valid. Please check your configuration."):
        super().__init__(message)


class UnknownFailureError(RegenerationError):
    """Any other failure, annotated with the backend that was in use."""

    def __init__(self, model: str, detail: str = "", action: str = "regenerate"):
        self.model = model
        self.detail = detail
        message = f"Failed to {action} image with {model}."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


class NoImageProducedError(RegenerationError):
    """The response carried neither an image nor a block reason."""


def _provider_code(error: Exception) -> Optional[int]:
    code = getattr(error, "code", None)
    return code if isinstance(code, int) else None


def _is_invalid_credentials(error: Exception, message: str) -> bool:
    if any(marker in message for marker in _INVALID_KEY_MARKERS):
        return True
    return _provider_code(error) == 401 or getattr(error, "status", None) == "UNAUTHENTICATED"


def _is_rate_limited(error: Exception, message: str) -> bool:
    if any(marker in message for marker in _RATE_LIMIT_MARKERS):
        return True
    return _provider_code(error) == 429


def normalize_error(error: Exception, model: str, action: str = "regenerate") -> RegenerationError:
    """Reclassify an adapter-level exception into the public taxonomy.

    Blocked errors pass through unchanged so the provider's reason survives.
    Credential and rate-limit failures map to their own categories and
    everything else collapses into UnknownFailureError naming ``model``.

    Args:
        error: The exception raised while talking to the backend.
        model: Backend label embedded in UnknownFailureError messages.
        action: Verb used in the UnknownFailureError message.

    Returns:
        The exception the caller should raise.
    """
    if isinstance(error, BlockedError):
        return error

    message = str(error)
    if _is_invalid_credentials(error, message):
        return InvalidCredentialsError()
    if _is_rate_limited(error, message):
        return RateLimitedError()

    return UnknownFailureError(model, detail=message, action=action)
