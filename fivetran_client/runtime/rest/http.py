"""HTTP client helper with response classification."""

from __future__ import annotations

import asyncio
import inspect
import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

import aiohttp

from ...config import DEFAULT_TIMEOUT, RETRY_AFTER_HEADER
from ...core import ApiError, UnknownApiError
from ..telemetry import log_request_failed

logger = logging.getLogger(__name__)

ResponseHook = Callable[[aiohttp.ClientResponse], Any]


def parse_retry_after(value: str | None) -> int | None:
    """Parse a Retry-After header value as whole seconds.

    Returns None when the header is missing, negative or not an integer
    (HTTP-date values are not interpreted).
    """
    if value is None:
        return None
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def _header(headers: Mapping[str, str] | None, name: str) -> str | None:
    if not headers:
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def classify_response(
    status: int,
    body: Any,
    headers: Mapping[str, str] | None = None,
) -> ApiError:
    """Map a non-2xx response onto a classified ``ApiError``.

    Args:
        status: HTTP status code
        body: Decoded response body (a dict carrying ``message`` when the API
            explains itself, anything else otherwise)
        headers: Response headers, looked up case-insensitively

    Returns:
        401 -> UnauthorizedError, 404 -> NotFoundError, 429 -> RateLimitError
        (with ``retry_after`` when the header is usable), 5xx -> ServerError,
        anything else -> UnknownApiError. The status is always preserved.
    """
    message = None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        message = body["message"]

    retry_after = None
    if status == 429:
        retry_after = parse_retry_after(_header(headers, RETRY_AFTER_HEADER))

    return ApiError.from_status(status, message, retry_after=retry_after)


def _decode_body(raw: bytes) -> Any:
    if not raw:
        return {}
    return json.loads(raw)


class HTTPClient:
    """Async HTTP client wrapper.

    Every non-2xx response is raised as an ``ApiError``; connection failures,
    timeouts and undecodable success bodies become ``UnknownApiError`` with no
    status code.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        auth: aiohttp.BasicAuth | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._headers = dict(headers or {})
        self._auth = auth
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers=self._headers,
                auth=self._auth,
            )
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a callable observing every response (sync or async)."""
        self._response_hooks.append(hook)

    def build_url(self, url: str) -> str:
        if self.base_url and not url.startswith("http"):
            if not url.startswith("/"):
                url = f"/{url}"
            return f"{self.base_url}{url}"
        return url

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request."""
        return await self.request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST request with a JSON body."""
        return await self.request("POST", url, json=json, headers=headers)

    async def patch(
        self,
        url: str,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """PATCH request with a JSON body."""
        return await self.request("PATCH", url, json=json, headers=headers)

    async def delete(self, url: str, headers: dict[str, str] | None = None) -> Any:
        """DELETE request."""
        return await self.request("DELETE", url, headers=headers)

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Issue a request and return the decoded JSON body.

        Raises:
            ApiError: For non-2xx responses and transport failures
        """
        full_url = self.build_url(url)
        try:
            async with self.session.request(
                method, full_url, params=params, json=json, headers=headers
            ) as response:
                await self._run_response_hooks(response)
                status = response.status
                response_headers = response.headers
                raw = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log_request_failed(method=method, url=full_url, kind="unknown", status_code=None)
            raise UnknownApiError(f"{type(e).__name__}: {e}") from e

        if 200 <= status < 300:
            try:
                return _decode_body(raw)
            except ValueError as e:
                log_request_failed(method=method, url=full_url, kind="unknown", status_code=None)
                raise UnknownApiError(f"Invalid JSON response: {e}") from e

        try:
            body = _decode_body(raw)
        except ValueError:
            body = None
        error = classify_response(status, body, response_headers)
        log_request_failed(
            method=method, url=full_url, kind=error.kind.value, status_code=status
        )
        raise error

    async def _run_response_hooks(self, response: aiohttp.ClientResponse) -> None:
        for hook in self._response_hooks:
            try:
                result = hook(response)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("Response hook failed")

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
