"""Authenticated REST transport for the API."""

from __future__ import annotations

from typing import Any

import aiohttp

from ...config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .http import HTTPClient, ResponseHook


class RESTTransport:
    """Thin wrapper around HTTPClient carrying API credentials.

    Requests authenticate with HTTP Basic auth built from the API key and
    secret and exchange JSON bodies.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._http = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json", "Content-Type": "application/json"},
            auth=aiohttp.BasicAuth(api_key, api_secret),
        )

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.get(path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.post(path, json=json_body, headers=headers)

    async def patch(
        self,
        path: str,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.patch(path, json=json_body, headers=headers)

    async def delete(self, path: str, headers: dict[str, str] | None = None) -> Any:
        return await self._http.delete(path, headers=headers)

    async def close(self) -> None:
        await self._http.close()
