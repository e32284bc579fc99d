"""Retry with exponential backoff for transient API failures.

``with_retry`` runs an async operation and retries it when it fails with a
retryable ``ApiError``. By default rate limits and 5xx responses are retried;
authentication failures, missing resources and unclassified errors are
raised immediately.

Delays grow as ``base_delay_ms * 2 ** (attempt - 1)`` capped at
``max_delay_ms``. A rate-limited response carrying a ``Retry-After`` hint uses
that hint instead (still capped). Optional jitter adds up to a quarter of the
capped delay on top, so the final wait may slightly exceed the cap.

Usage:
    policy = RetryPolicy(max_attempts=5, jitter=True)
    groups = await with_retry(lambda: client.groups.list(), policy)
"""

from __future__ import annotations

import asyncio
import functools
import inspect
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from ..config import DEFAULT_BASE_DELAY_MS, DEFAULT_MAX_ATTEMPTS, DEFAULT_MAX_DELAY_MS
from ..core import ApiError, ConfigurationError, ErrorKind
from .telemetry import log_retry_gave_up, log_retry_scheduled

T = TypeVar("T")

RetryPredicate = Callable[[ApiError], bool]
RetryObserver = Callable[[ApiError, int, int], Any]


def default_retry_predicate(error: ApiError) -> bool:
    """Retry rate limits and server errors only."""
    return error.kind in (ErrorKind.RATE_LIMITED, ErrorKind.SERVER_ERROR)


def log_retry(error: ApiError, attempt: int, delay_ms: int) -> None:
    """Default ``on_retry`` observer: one structured log line per retry."""
    log_retry_scheduled(
        kind=error.kind.value,
        attempt=attempt,
        delay_ms=delay_ms,
        status_code=error.status_code,
        error_message=error.message,
    )


@dataclass(frozen=True)
class RetryPolicy:
    """Declarative retry configuration.

    The policy holds no per-call state and can be shared between calls and
    tasks.

    Attributes:
        max_attempts: Total attempts including the first one (>= 1)
        base_delay_ms: Delay before the first retry
        max_delay_ms: Cap applied before jitter (>= base_delay_ms)
        jitter: Add up to 25% random jitter on top of the capped delay
        retry_if: Predicate deciding whether an error is worth retrying
        on_retry: Observer called as ``on_retry(error, attempt, delay_ms)``
            before each wait; may be sync or async, its result is ignored
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    base_delay_ms: int = DEFAULT_BASE_DELAY_MS
    max_delay_ms: int = DEFAULT_MAX_DELAY_MS
    jitter: bool = False
    retry_if: RetryPredicate = default_retry_predicate
    on_retry: RetryObserver = log_retry

    def __post_init__(self) -> None:
        """Validate retry policy configuration."""
        if self.max_attempts < 1:
            raise ConfigurationError("max_attempts must be at least 1")
        if self.base_delay_ms < 0:
            raise ConfigurationError("base_delay_ms must be non-negative")
        if self.max_delay_ms < self.base_delay_ms:
            raise ConfigurationError("max_delay_ms must be >= base_delay_ms")

    def is_retryable(self, error: ApiError) -> bool:
        return bool(self.retry_if(error))


def calculate_delay(error: ApiError, attempt: int, policy: RetryPolicy) -> int:
    """Calculate the wait before the next attempt.

    Args:
        error: Error that ended the failed attempt
        attempt: 1-based number of the failed attempt
        policy: Retry policy supplying base, cap and jitter

    Returns:
        Delay in milliseconds
    """
    if attempt < 1:
        raise ValueError("attempt is 1-based")

    if error.kind is ErrorKind.RATE_LIMITED and error.retry_after:
        delay = min(error.retry_after * 1000, policy.max_delay_ms)
    else:
        delay = min(policy.base_delay_ms * 2 ** (attempt - 1), policy.max_delay_ms)

    if policy.jitter:
        delay += random.randint(1, max(delay // 4, 1))
    return delay


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
) -> T:
    """Run ``operation`` with automatic retry and exponential backoff.

    Attempts run strictly one after another; the only wait is the backoff
    sleep between them. The operation is assumed safe to repeat.

    Args:
        operation: Zero-argument coroutine function
        policy: Retry policy (defaults to ``RetryPolicy()``)

    Returns:
        Result of the first successful attempt

    Raises:
        ApiError: The last error, unchanged, once attempts run out or the
            error is not retryable
    """
    policy = policy or RetryPolicy()
    attempt = 1
    while True:
        try:
            return await operation()
        except ApiError as error:
            if attempt >= policy.max_attempts:
                log_retry_gave_up(
                    kind=error.kind.value,
                    attempts=attempt,
                    retryable=policy.is_retryable(error),
                )
                raise
            if not policy.is_retryable(error):
                log_retry_gave_up(kind=error.kind.value, attempts=attempt, retryable=False)
                raise

            delay_ms = calculate_delay(error, attempt, policy)
            result = policy.on_retry(error, attempt, delay_ms)
            if inspect.isawaitable(result):
                await result
            await asyncio.sleep(delay_ms / 1000.0)
            attempt += 1


def retrying(
    func: Callable[..., Awaitable[T]],
    policy: RetryPolicy | None = None,
) -> Callable[..., Awaitable[T]]:
    """Wrap an async callable so every call goes through ``with_retry``.

    Handy for giving a paginator a retrying page fetcher:

        paginate(retrying(fetch_page, policy))
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        return await with_retry(lambda: func(*args, **kwargs), policy)

    return wrapper
