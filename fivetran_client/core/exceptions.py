"""Custom exception hierarchy."""

from __future__ import annotations

from typing import NoReturn

from .enums import ErrorKind, SignatureStatus

_DEFAULT_MESSAGES = {
    ErrorKind.UNAUTHORIZED: "Unauthorized",
    ErrorKind.NOT_FOUND: "Not found",
    ErrorKind.RATE_LIMITED: "Rate limited",
    ErrorKind.SERVER_ERROR: "Server error",
    ErrorKind.UNKNOWN: "Request failed",
}


class FivetranError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(FivetranError):
    """Client, policy or webhook configuration is invalid."""

    pass


class ApiError(FivetranError):
    """Classified failure of an API call.

    Every failed HTTP response or transport failure is turned into exactly one
    ``ApiError`` whose ``kind`` tells the caller how to react. Instances are
    immutable once constructed.

    Attributes:
        kind: Error category
        message: Human-readable message, for logs only
        status_code: HTTP status of the response, None for transport failures
        retry_after: Seconds the server asked us to wait (rate limits only)
    """

    default_kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind | None = None,
        status_code: int | None = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message)
        resolved = kind if kind is not None else type(self).default_kind
        if retry_after is not None:
            if resolved is not ErrorKind.RATE_LIMITED:
                raise ValueError("retry_after is only meaningful for rate limited errors")
            if retry_after < 0:
                raise ValueError("retry_after must be non-negative")
        self._kind = resolved
        self._message = message
        self._status_code = status_code
        self._retry_after = retry_after

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @property
    def retry_after(self) -> int | None:
        return self._retry_after

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r}, "
            f"status_code={self.status_code!r}, retry_after={self.retry_after!r})"
        )

    @classmethod
    def from_status(
        cls,
        status_code: int | None,
        message: str | None = None,
        *,
        retry_after: int | None = None,
    ) -> ApiError:
        """Build the error subclass matching an HTTP status code.

        Args:
            status_code: HTTP status, or None for transport-level failures
            message: Message from the response body, if any
            retry_after: Parsed Retry-After hint (kept for 429 only)

        Returns:
            The classified error
        """
        if status_code == 401:
            kind = ErrorKind.UNAUTHORIZED
        elif status_code == 404:
            kind = ErrorKind.NOT_FOUND
        elif status_code == 429:
            kind = ErrorKind.RATE_LIMITED
        elif status_code is not None and status_code >= 500:
            kind = ErrorKind.SERVER_ERROR
        else:
            kind = ErrorKind.UNKNOWN

        error_cls = _ERRORS_BY_KIND[kind]
        return error_cls(
            message or _DEFAULT_MESSAGES[kind],
            status_code=status_code,
            retry_after=retry_after if kind is ErrorKind.RATE_LIMITED else None,
        )


class UnauthorizedError(ApiError):
    """Invalid or missing API credentials (HTTP 401)."""

    default_kind = ErrorKind.UNAUTHORIZED


class NotFoundError(ApiError):
    """Requested resource does not exist (HTTP 404)."""

    default_kind = ErrorKind.NOT_FOUND


class RateLimitError(ApiError):
    """API rate limit exceeded (HTTP 429); see ``retry_after``."""

    default_kind = ErrorKind.RATE_LIMITED


class ServerError(ApiError):
    """Server-side failure (HTTP 5xx)."""

    default_kind = ErrorKind.SERVER_ERROR


class UnknownApiError(ApiError):
    """Unexpected status code or transport failure."""

    default_kind = ErrorKind.UNKNOWN


_ERRORS_BY_KIND: dict[ErrorKind, type[ApiError]] = {
    ErrorKind.UNAUTHORIZED: UnauthorizedError,
    ErrorKind.NOT_FOUND: NotFoundError,
    ErrorKind.RATE_LIMITED: RateLimitError,
    ErrorKind.SERVER_ERROR: ServerError,
    ErrorKind.UNKNOWN: UnknownApiError,
}


class WebhookSignatureError(FivetranError):
    """Inbound webhook failed signature verification."""

    status: SignatureStatus = SignatureStatus.INVALID_SIGNATURE

    @classmethod
    def raise_for(cls, status: SignatureStatus) -> NoReturn:
        if status is SignatureStatus.MISSING_SIGNATURE:
            raise MissingSignatureError("Missing signature header")
        raise InvalidSignatureError("Invalid signature")


class MissingSignatureError(WebhookSignatureError):
    """No signature accompanied the webhook request."""

    status = SignatureStatus.MISSING_SIGNATURE


class InvalidSignatureError(WebhookSignatureError):
    """Signature did not match the payload."""

    status = SignatureStatus.INVALID_SIGNATURE
