"""Structured logging for pagination, retries and HTTP calls.

This module provides telemetry hooks for runtime operations, emitting
structured logs with an event name as the message and details in ``extra``.
Secrets, signatures and request bodies are never passed through here.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    page_index: int,
    items: int,
    has_next: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a page returned by a cursor-paginated endpoint.

    Args:
        page_index: Zero-based index of the page within the traversal
        items: Number of items on the page
        has_next: Whether the page carried a next cursor
        latency_ms: Fetch latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "page_index": page_index,
            "items": items,
            "has_next": has_next,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(*, page_index: int, error_type: str, error_message: str) -> None:
    """Log a failed page fetch.

    Args:
        page_index: Zero-based index of the page that failed
        error_type: Exception class name
        error_message: Exception message
    """
    logger.error(
        "page_error",
        extra={
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_retry_scheduled(
    *,
    kind: str,
    attempt: int,
    delay_ms: int,
    status_code: int | None = None,
    error_message: str | None = None,
) -> None:
    """Log a retry about to be taken.

    Args:
        kind: Error kind that triggered the retry
        attempt: 1-based number of the attempt that failed
        delay_ms: Wait before the next attempt, in milliseconds
        status_code: HTTP status of the failure (optional)
        error_message: Error message (optional)
    """
    logger.warning(
        "retry_scheduled",
        extra={
            "kind": kind,
            "attempt": attempt,
            "delay_ms": delay_ms,
            "status_code": status_code,
            "error_message": error_message,
        },
    )


def log_retry_gave_up(*, kind: str, attempts: int, retryable: bool) -> None:
    """Log the final failure of a retried operation.

    Args:
        kind: Error kind of the final failure
        attempts: Number of attempts made
        retryable: Whether the error was retryable (False means short-circuit)
    """
    logger.info(
        "retry_gave_up",
        extra={"kind": kind, "attempts": attempts, "retryable": retryable},
    )


def log_request_failed(
    *,
    method: str,
    url: str,
    kind: str,
    status_code: int | None,
) -> None:
    """Log an HTTP request that was classified as a failure."""
    logger.info(
        "request_failed",
        extra={"method": method, "url": url, "kind": kind, "status_code": status_code},
    )


def log_webhook_rejected(*, reason: str, status: int) -> None:
    """Log an inbound webhook that was rejected."""
    logger.warning("webhook_rejected", extra={"reason": reason, "status": status})
