"""Runtime components: pagination, retries and the REST transport."""

from .pagination import FetchPage, Page, Paginator, paginate
from .rest import HTTPClient, RESTTransport, classify_response, parse_retry_after
from .retry import (
    RetryPolicy,
    calculate_delay,
    default_retry_predicate,
    log_retry,
    retrying,
    with_retry,
)

__all__ = [
    "Page",
    "Paginator",
    "FetchPage",
    "paginate",
    "RetryPolicy",
    "calculate_delay",
    "default_retry_predicate",
    "log_retry",
    "retrying",
    "with_retry",
    "HTTPClient",
    "RESTTransport",
    "classify_response",
    "parse_retry_after",
]
