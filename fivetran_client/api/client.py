"""High-level API client."""

from __future__ import annotations

import os
from collections.abc import Awaitable, Callable
from typing import TypeVar

from ..config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ENV_API_KEY, ENV_API_SECRET, ENV_BASE_URL
from ..core import ConfigurationError
from ..runtime import RetryPolicy, with_retry
from ..runtime.rest import RESTTransport
from .connectors import Connectors
from .destinations import Destinations
from .groups import Groups
from .webhooks import Webhooks

T = TypeVar("T")


class FivetranClient:
    """Entry point for the REST API.

    Resource endpoints hang off the client as attributes:

        async with FivetranClient(api_key="...", api_secret="...") as client:
            async for group in client.groups.stream():
                print(group.name)

    When ``retry_policy`` is given, ``stream()`` retries each page fetch
    under it and ``with_retry`` uses it by default. Single calls are never
    retried implicitly.
    """

    def __init__(
        self,
        *,
        api_key: str,
        api_secret: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: API key
            api_secret: API secret
            base_url: API base URL (override for testing against a mock server)
            timeout: Total per-request timeout in seconds
            retry_policy: Optional policy applied to paginated streams
        """
        if not api_key or not api_secret:
            raise ConfigurationError("api_key and api_secret are required")
        self._transport = RESTTransport(api_key, api_secret, base_url=base_url, timeout=timeout)
        self.retry_policy = retry_policy
        self.groups = Groups(self._transport, retry_policy)
        self.connectors = Connectors(self._transport, retry_policy)
        self.destinations = Destinations(self._transport, retry_policy)
        self.webhooks = Webhooks(self._transport, retry_policy)

    @classmethod
    def from_env(cls, *, retry_policy: RetryPolicy | None = None) -> FivetranClient:
        """Build a client from FIVETRAN_API_KEY / FIVETRAN_API_SECRET / FIVETRAN_BASE_URL."""
        api_key = os.environ.get(ENV_API_KEY)
        api_secret = os.environ.get(ENV_API_SECRET)
        if not api_key or not api_secret:
            raise ConfigurationError(f"{ENV_API_KEY} and {ENV_API_SECRET} must be set")
        return cls(
            api_key=api_key,
            api_secret=api_secret,
            base_url=os.environ.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
            retry_policy=retry_policy,
        )

    @property
    def transport(self) -> RESTTransport:
        return self._transport

    async def with_retry(
        self,
        operation: Callable[[], Awaitable[T]],
        policy: RetryPolicy | None = None,
    ) -> T:
        """Run ``operation`` under ``policy``, falling back to the client's policy."""
        return await with_retry(operation, policy or self.retry_policy)

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> FivetranClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
