"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

import pickle

import pytest

from fivetran_client.core import (
    ApiError,
    ErrorKind,
    FivetranError,
    InvalidSignatureError,
    MissingSignatureError,
    NotFoundError,
    RateLimitError,
    ServerError,
    SignatureStatus,
    UnauthorizedError,
    UnknownApiError,
    WebhookSignatureError,
)


class TestApiErrorFromStatus:
    """Test status code classification."""

    @pytest.mark.parametrize(
        "status,error_cls,kind",
        [
            (401, UnauthorizedError, ErrorKind.UNAUTHORIZED),
            (404, NotFoundError, ErrorKind.NOT_FOUND),
            (429, RateLimitError, ErrorKind.RATE_LIMITED),
            (500, ServerError, ErrorKind.SERVER_ERROR),
            (503, ServerError, ErrorKind.SERVER_ERROR),
            (400, UnknownApiError, ErrorKind.UNKNOWN),
            (403, UnknownApiError, ErrorKind.UNKNOWN),
            (None, UnknownApiError, ErrorKind.UNKNOWN),
        ],
    )
    def test_classification(self, status, error_cls, kind):
        error = ApiError.from_status(status, "boom")
        assert type(error) is error_cls
        assert error.kind is kind
        assert error.status_code == status
        assert error.message == "boom"

    def test_default_message_per_kind(self):
        assert ApiError.from_status(404).message == "Not found"
        assert ApiError.from_status(502).message == "Server error"
        assert ApiError.from_status(418).message == "Request failed"

    def test_retry_after_kept_for_rate_limits_only(self):
        """Test retry hints survive only on 429."""
        assert ApiError.from_status(429, retry_after=30).retry_after == 30
        assert ApiError.from_status(503, retry_after=30).retry_after is None

    def test_rate_limit_without_hint(self):
        assert ApiError.from_status(429).retry_after is None


class TestApiError:
    """Test ApiError invariants."""

    def test_hierarchy(self):
        error = RateLimitError("rate limit", status_code=429, retry_after=120)
        assert isinstance(error, ApiError)
        assert isinstance(error, FivetranError)
        assert str(error) == "rate limit"

    def test_retry_after_rejected_for_other_kinds(self):
        with pytest.raises(ValueError):
            ServerError("oops", status_code=500, retry_after=5)

    def test_negative_retry_after_rejected(self):
        with pytest.raises(ValueError):
            RateLimitError("slow", retry_after=-1)

    def test_immutable(self):
        error = NotFoundError("gone", status_code=404)
        with pytest.raises(AttributeError):
            error.kind = ErrorKind.UNKNOWN
        with pytest.raises(AttributeError):
            error.status_code = 500

    def test_explicit_kind(self):
        error = ApiError("throttled", kind=ErrorKind.RATE_LIMITED, retry_after=3)
        assert error.kind is ErrorKind.RATE_LIMITED
        assert error.retry_after == 3

    def test_picklable(self):
        error = RateLimitError("slow", status_code=429, retry_after=7)
        restored = pickle.loads(pickle.dumps(error))
        assert restored.kind is ErrorKind.RATE_LIMITED
        assert restored.retry_after == 7
        assert restored.status_code == 429

    def test_kind_transience(self):
        assert ErrorKind.RATE_LIMITED.is_transient
        assert ErrorKind.SERVER_ERROR.is_transient
        assert not ErrorKind.NOT_FOUND.is_transient


class TestWebhookSignatureError:
    """Test signature failure exceptions."""

    def test_raise_for_missing(self):
        with pytest.raises(MissingSignatureError) as exc_info:
            WebhookSignatureError.raise_for(SignatureStatus.MISSING_SIGNATURE)
        assert exc_info.value.status is SignatureStatus.MISSING_SIGNATURE

    def test_raise_for_invalid(self):
        with pytest.raises(InvalidSignatureError) as exc_info:
            WebhookSignatureError.raise_for(SignatureStatus.INVALID_SIGNATURE)
        assert isinstance(exc_info.value, FivetranError)
