"""Core components."""

from .enums import ErrorKind, SignatureStatus
from .exceptions import (
    ApiError,
    ConfigurationError,
    FivetranError,
    InvalidSignatureError,
    MissingSignatureError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    UnknownApiError,
    WebhookSignatureError,
)

__all__ = [
    "ErrorKind",
    "SignatureStatus",
    "FivetranError",
    "ConfigurationError",
    "ApiError",
    "UnauthorizedError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "UnknownApiError",
    "WebhookSignatureError",
    "MissingSignatureError",
    "InvalidSignatureError",
]
