"""Webhook subscription endpoints."""

from __future__ import annotations

from typing import Any

from ..models import Webhook
from ..runtime import Page, Paginator
from .base import Resource, pagination_params, parse_page, parse_resource, unwrap_data


class Webhooks(Resource):
    """Manage account- and group-level webhook subscriptions."""

    async def list(self, *, cursor: str | None = None, limit: int | None = None) -> Page[Webhook]:
        body = await self._transport.get("/webhooks", params=pagination_params(cursor, limit))
        return parse_page(body, Webhook)

    def stream(self, *, limit: int | None = None) -> Paginator[Webhook]:
        async def fetch_page(cursor: str | None) -> Page[Webhook]:
            return await self.list(cursor=cursor, limit=limit)

        return self._stream(fetch_page)

    async def get(self, webhook_id: str) -> Webhook:
        body = await self._transport.get(f"/webhooks/{webhook_id}")
        return parse_resource(Webhook, unwrap_data(body))

    async def create_account(self, params: dict[str, Any]) -> Webhook:
        """Create a webhook receiving events for every connector in the account."""
        body = await self._transport.post("/webhooks/account", json_body=params)
        return parse_resource(Webhook, unwrap_data(body))

    async def create_group(self, group_id: str, params: dict[str, Any]) -> Webhook:
        """Create a webhook receiving events for one group's connectors."""
        body = await self._transport.post(f"/webhooks/group/{group_id}", json_body=params)
        return parse_resource(Webhook, unwrap_data(body))

    async def update(self, webhook_id: str, params: dict[str, Any]) -> Webhook:
        body = await self._transport.patch(f"/webhooks/{webhook_id}", json_body=params)
        return parse_resource(Webhook, unwrap_data(body))

    async def delete(self, webhook_id: str) -> None:
        await self._transport.delete(f"/webhooks/{webhook_id}")

    async def test(self, webhook_id: str, *, event: str | None = None) -> dict[str, Any]:
        """Ask the API to send a test event to the webhook URL."""
        payload = {"event": event} if event else {}
        body = await self._transport.post(f"/webhooks/{webhook_id}/test", json_body=payload)
        if isinstance(body, dict) and "data" in body:
            return body["data"]
        return body
