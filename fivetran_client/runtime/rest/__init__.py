"""REST runtime abstractions."""

from .http import HTTPClient, classify_response, parse_retry_after
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "classify_response",
    "parse_retry_after",
]
