"""Destination endpoints."""

from __future__ import annotations

from typing import Any

from ..models import Destination
from .base import Resource, parse_resource, unwrap_data


class Destinations(Resource):
    """Manage destinations. Each group has exactly one."""

    async def get(self, destination_id: str) -> Destination:
        body = await self._transport.get(f"/destinations/{destination_id}")
        return parse_resource(Destination, unwrap_data(body))

    async def create(self, params: dict[str, Any]) -> Destination:
        body = await self._transport.post("/destinations", json_body=params)
        return parse_resource(Destination, unwrap_data(body))

    async def update(self, destination_id: str, params: dict[str, Any]) -> Destination:
        body = await self._transport.patch(f"/destinations/{destination_id}", json_body=params)
        return parse_resource(Destination, unwrap_data(body))

    async def delete(self, destination_id: str) -> None:
        await self._transport.delete(f"/destinations/{destination_id}")

    async def test(self, destination_id: str) -> dict[str, Any]:
        """Run the setup tests for a destination."""
        body = await self._transport.post(f"/destinations/{destination_id}/test")
        return unwrap_data(body)
