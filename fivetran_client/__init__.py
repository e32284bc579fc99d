"""fivetran-client - async client for the Fivetran REST API."""

from .api import FivetranClient
from .core import (
    ApiError,
    ConfigurationError,
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
from .models import (
    Column,
    Connector,
    Destination,
    Group,
    LogEntry,
    Schema,
    SchemaConfig,
    SyncStatus,
    Table,
    Webhook,
    WebhookEvent,
)
from .runtime import (
    Page,
    Paginator,
    RetryPolicy,
    calculate_delay,
    default_retry_predicate,
    paginate,
    retrying,
    with_retry,
)
from .sync_logs import LogQuery, query_example
from .webhooks import compute_signature, signature_header, verify, verify_or_raise

__version__ = "0.1.0"

__all__ = [
    # Client
    "FivetranClient",
    # Models
    "Group",
    "Connector",
    "Destination",
    "Webhook",
    "WebhookEvent",
    "SyncStatus",
    "SchemaConfig",
    "Schema",
    "Table",
    "Column",
    "LogEntry",
    # Sync logs
    "LogQuery",
    "query_example",
    # Pagination
    "Page",
    "Paginator",
    "paginate",
    # Retry
    "RetryPolicy",
    "calculate_delay",
    "default_retry_predicate",
    "retrying",
    "with_retry",
    # Webhook signatures
    "compute_signature",
    "verify",
    "verify_or_raise",
    "signature_header",
    # Errors
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
