"""Connector endpoints."""

from __future__ import annotations

from typing import Any

from ..models import Connector, SchemaConfig, SyncStatus
from ..runtime import Page, Paginator
from .base import Resource, pagination_params, parse_page, parse_resource, unwrap_data


class Connectors(Resource):
    """Manage connectors and their syncs."""

    async def list(
        self,
        group_id: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> Page[Connector]:
        """Fetch one page of the connectors in a group."""
        body = await self._transport.get(
            f"/groups/{group_id}/connectors", params=pagination_params(cursor, limit)
        )
        return parse_page(body, Connector)

    def stream(self, group_id: str, *, limit: int | None = None) -> Paginator[Connector]:
        """Lazily iterate every connector in a group."""

        async def fetch_page(cursor: str | None) -> Page[Connector]:
            return await self.list(group_id, cursor=cursor, limit=limit)

        return self._stream(fetch_page)

    async def get(self, connector_id: str) -> Connector:
        body = await self._transport.get(f"/connectors/{connector_id}")
        return parse_resource(Connector, unwrap_data(body))

    async def create(self, params: dict[str, Any]) -> Connector:
        body = await self._transport.post("/connectors", json_body=params)
        return parse_resource(Connector, unwrap_data(body))

    async def update(self, connector_id: str, params: dict[str, Any]) -> Connector:
        body = await self._transport.patch(f"/connectors/{connector_id}", json_body=params)
        return parse_resource(Connector, unwrap_data(body))

    async def delete(self, connector_id: str) -> None:
        await self._transport.delete(f"/connectors/{connector_id}")

    async def sync(self, connector_id: str) -> dict[str, Any]:
        """Trigger an incremental sync."""
        body = await self._transport.post(f"/connectors/{connector_id}/sync")
        return unwrap_data(body)

    async def resync(self, connector_id: str, *, confirm: bool = False) -> dict[str, Any]:
        """Trigger a historical resync, re-importing all source data.

        Destructive, so ``confirm=True`` is required.
        """
        if confirm is not True:
            raise ValueError(
                "resync is a destructive operation that re-imports all data; "
                "pass confirm=True to proceed"
            )
        body = await self._transport.post(f"/connectors/{connector_id}/resync")
        return unwrap_data(body)

    async def get_state(self, connector_id: str) -> dict[str, Any]:
        body = await self._transport.get(f"/connectors/{connector_id}/state")
        return unwrap_data(body)

    async def pause(self, connector_id: str) -> Connector:
        return await self.update(connector_id, {"paused": True})

    async def resume(self, connector_id: str) -> Connector:
        return await self.update(connector_id, {"paused": False})

    async def get_sync_status(self, connector_id: str) -> SyncStatus:
        """Fetch the connector and summarize its sync progress."""
        return SyncStatus.from_connector(await self.get(connector_id))

    async def get_schema_config(self, connector_id: str) -> SchemaConfig:
        body = await self._transport.get(f"/connectors/{connector_id}/schemas")
        return parse_resource(SchemaConfig, unwrap_data(body))

    async def update_schema_config(
        self, connector_id: str, params: dict[str, Any]
    ) -> SchemaConfig:
        """Enable or disable schemas, tables or columns, or change handling of new ones."""
        body = await self._transport.patch(
            f"/connectors/{connector_id}/schemas", json_body=params
        )
        return parse_resource(SchemaConfig, unwrap_data(body))
