"""Inbound webhook verification and handling."""

from .handler import (
    WebhookOutcome,
    create_webhook_app,
    process_webhook,
    resolve_secret,
    webhook_handler,
)
from .signature import compute_signature, signature_header, verify, verify_or_raise

__all__ = [
    "compute_signature",
    "verify",
    "verify_or_raise",
    "signature_header",
    "WebhookOutcome",
    "process_webhook",
    "resolve_secret",
    "webhook_handler",
    "create_webhook_app",
]
