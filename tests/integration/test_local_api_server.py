"""End-to-end tests of the client against a local aiohttp server.

The server imitates the REST API envelope, cursor pagination and rate
limiting, so these run without network access.
"""

from __future__ import annotations

import base64
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from aiohttp import test_utils, web

from fivetran_client import FivetranClient, RetryPolicy
from fivetran_client.core import NotFoundError, RateLimitError, UnauthorizedError

GROUPS = [{"id": f"g{i}", "name": f"Group {i}"} for i in range(1, 6)]
EXPECTED_AUTH = "Basic " + base64.b64encode(b"key:secret").decode()


def build_app(state: dict) -> web.Application:
    async def list_groups(request: web.Request) -> web.Response:
        state["requests"].append(dict(request.query))
        if request.headers.get("Authorization") != EXPECTED_AUTH:
            return web.json_response({"code": "AuthFailed", "message": "Bad key"}, status=401)
        if state["throttle"] > 0:
            state["throttle"] -= 1
            return web.json_response(
                {"code": "TooManyRequests", "message": "Slow down"},
                status=429,
                headers={"Retry-After": "1"},
            )
        limit = int(request.query.get("limit", 2))
        start = int(request.query.get("cursor", 0))
        items = GROUPS[start : start + limit]
        end = start + limit
        next_cursor = str(end) if end < len(GROUPS) else None
        return web.json_response(
            {"code": "Success", "data": {"items": items, "next_cursor": next_cursor}}
        )

    async def get_group(request: web.Request) -> web.Response:
        group_id = request.match_info["group_id"]
        for group in GROUPS:
            if group["id"] == group_id:
                return web.json_response({"code": "Success", "data": group})
        return web.json_response({"code": "NotFound_Group", "message": "No group"}, status=404)

    app = web.Application()
    app.router.add_get("/v1/groups", list_groups)
    app.router.add_get("/v1/groups/{group_id}", get_group)
    return app


@pytest.fixture
def state():
    return {"requests": [], "throttle": 0}


@pytest_asyncio.fixture
async def server(state):
    async with test_utils.TestServer(build_app(state)) as test_server:
        yield test_server


def make_client(server, api_key: str = "key", **kwargs) -> FivetranClient:
    return FivetranClient(
        api_key=api_key,
        api_secret="secret",
        base_url=str(server.make_url("/v1")),
        **kwargs,
    )


class TestLocalApiServer:
    """Exercise the full request path over real HTTP."""

    @pytest.mark.asyncio
    async def test_stream_walks_all_pages(self, server, state):
        async with make_client(server) as client:
            groups = [group.id async for group in client.groups.stream(limit=2)]

        assert groups == ["g1", "g2", "g3", "g4", "g5"]
        assert state["requests"] == [
            {"limit": "2"},
            {"cursor": "2", "limit": "2"},
            {"cursor": "4", "limit": "2"},
        ]

    @pytest.mark.asyncio
    async def test_take_stops_fetching(self, server, state):
        async with make_client(server) as client:
            groups = await client.groups.stream(limit=2).take(3)

        assert [g.id for g in groups] == ["g1", "g2", "g3"]
        assert len(state["requests"]) == 2

    @pytest.mark.asyncio
    async def test_bad_credentials(self, server):
        async with make_client(server, api_key="wrong") as client:
            with pytest.raises(UnauthorizedError) as exc_info:
                await client.groups.list()

        assert exc_info.value.message == "Bad key"
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_not_found(self, server):
        async with make_client(server) as client:
            with pytest.raises(NotFoundError):
                await client.groups.get("g404")

    @pytest.mark.asyncio
    async def test_rate_limit_carries_retry_after(self, server, state):
        state["throttle"] = 1
        async with make_client(server) as client:
            with pytest.raises(RateLimitError) as exc_info:
                await client.groups.list()

        assert exc_info.value.retry_after == 1

    @pytest.mark.asyncio
    async def test_rate_limit_retried_under_policy(self, server, state, monkeypatch):
        sleep = AsyncMock()
        monkeypatch.setattr("fivetran_client.runtime.retry.asyncio.sleep", sleep)
        state["throttle"] = 2
        policy = RetryPolicy(max_attempts=3, on_retry=MagicMock())

        async with make_client(server, retry_policy=policy) as client:
            groups = await client.groups.stream(limit=5).collect()

        assert len(groups) == 5
        assert [c.args[0] for c in sleep.await_args_list] == [1.0, 1.0]
