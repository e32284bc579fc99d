"""Group endpoints."""

from __future__ import annotations

from typing import Any

from ..models import Group
from ..runtime import Page, Paginator
from .base import Resource, pagination_params, parse_page, parse_resource, unwrap_data


class Groups(Resource):
    """Manage groups."""

    async def list(self, *, cursor: str | None = None, limit: int | None = None) -> Page[Group]:
        """Fetch one page of groups."""
        body = await self._transport.get("/groups", params=pagination_params(cursor, limit))
        return parse_page(body, Group)

    def stream(self, *, limit: int | None = None) -> Paginator[Group]:
        """Lazily iterate every group across all pages."""

        async def fetch_page(cursor: str | None) -> Page[Group]:
            return await self.list(cursor=cursor, limit=limit)

        return self._stream(fetch_page)

    async def get(self, group_id: str) -> Group:
        body = await self._transport.get(f"/groups/{group_id}")
        return parse_resource(Group, unwrap_data(body))

    async def create(self, params: dict[str, Any]) -> Group:
        body = await self._transport.post("/groups", json_body=params)
        return parse_resource(Group, unwrap_data(body))

    async def update(self, group_id: str, params: dict[str, Any]) -> Group:
        body = await self._transport.patch(f"/groups/{group_id}", json_body=params)
        return parse_resource(Group, unwrap_data(body))

    async def delete(self, group_id: str) -> None:
        await self._transport.delete(f"/groups/{group_id}")
