"""Tests for error classification."""

from frame_restyle.errors import (
    BlockedError,
    InvalidCredentialsError,
    RateLimitedError,
    UnknownFailureError,
    normalize_error,
)


class ProviderError(Exception):
    """Exception carrying a code and status like the SDK's APIError."""

    def __init__(self, code, status, message):
        self.code = code
        self.status = status
        super().__init__(message)


class TestNormalizeError:
    """Tests for normalize_error."""

    def test_blocked_passes_through_unchanged(self):
        blocked = BlockedError("SAFETY")

        assert normalize_error(blocked, "gemini") is blocked

    def test_invalid_key_message(self):
        error = RuntimeError("400 INVALID_ARGUMENT. API key not valid. Please pass a valid API key.")

        assert isinstance(normalize_error(error, "gemini"), InvalidCredentialsError)

    def test_unauthenticated_status(self):
        error = ProviderError(401, "UNAUTHENTICATED", "Request had invalid authentication credentials.")

        assert isinstance(normalize_error(error, "imagen"), InvalidCredentialsError)

    def test_rate_limit_message(self):
        assert isinstance(normalize_error(RuntimeError("429 Too Many Requests"), "gemini"), RateLimitedError)
        assert isinstance(normalize_error(RuntimeError("RESOURCE_EXHAUSTED"), "imagen"), RateLimitedError)

    def test_rate_limit_code(self):
        error = ProviderError(429, "TOO_MANY", "slow down")

        assert isinstance(normalize_error(error, "imagen"), RateLimitedError)

    def test_unknown_names_backend(self):
        normalized = normalize_error(RuntimeError("connection reset"), "imagen")

        assert isinstance(normalized, UnknownFailureError)
        assert normalized.model == "imagen"
        assert "imagen" in str(normalized)
        assert "connection reset" in str(normalized)

    def test_unknown_edit_action(self):
        normalized = normalize_error(RuntimeError("boom"), "gemini", action="edit")

        assert str(normalized).startswith("Failed to edit image with gemini.")


class TestMessages:
    """User-facing messages suggest a corrective action."""

    def test_blocked_message(self):
        error = BlockedError("RECITATION")

        assert error.reason == "RECITATION"
        assert "RECITATION" in str(error)
        assert "different style" in str(error)

    def test_invalid_credentials_message(self):
        assert "check your configuration" in str(InvalidCredentialsError())

    def test_rate_limited_message(self):
        assert "try again later" in str(RateLimitedError())
