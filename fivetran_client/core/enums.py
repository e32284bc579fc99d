"""Core enumerations shared across the client.

Architecture:
    This module defines the closed sets of values the rest of the library
    branches on. Callers match on these enums instead of comparing error
    messages or raw status codes.

Key Types:
    - ErrorKind: Category of a failed API call
    - SignatureStatus: Outcome of an inbound webhook signature check
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed API call.

    The HTTP layer maps every non-2xx response and every transport failure
    onto exactly one of these kinds.
    """

    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    UNKNOWN = "unknown"

    @property
    def is_transient(self) -> bool:
        """Whether failures of this kind usually clear up on their own."""
        return self in (ErrorKind.RATE_LIMITED, ErrorKind.SERVER_ERROR)


class SignatureStatus(str, Enum):
    """Outcome of verifying a webhook signature."""

    VALID = "valid"
    MISSING_SIGNATURE = "missing_signature"
    INVALID_SIGNATURE = "invalid_signature"

    @property
    def ok(self) -> bool:
        return self is SignatureStatus.VALID
