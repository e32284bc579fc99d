"""Connector sync status summary."""

from __future__ import annotations

from datetime import datetime

from .base import ApiModel
from .connector import Connector


class SyncStatus(ApiModel):
    """Sync progress of one connector, extracted from its status object.

    ``sync_state`` is one of "scheduled", "syncing", "paused" or
    "rescheduled"; ``update_state`` is "on_schedule" or "delayed".
    """

    sync_state: str | None = None
    succeeded_at: datetime | None = None
    failed_at: datetime | None = None
    is_historical_sync: bool | None = None
    update_state: str | None = None

    @classmethod
    def from_connector(cls, connector: Connector) -> SyncStatus:
        status = connector.status or {}
        return cls(
            sync_state=connector.sync_state,
            succeeded_at=connector.succeeded_at,
            failed_at=connector.failed_at,
            is_historical_sync=status.get("is_historical_sync"),
            update_state=status.get("update_state"),
        )

    @property
    def is_syncing(self) -> bool:
        return self.sync_state == "syncing"

    @property
    def is_paused(self) -> bool:
        return self.sync_state == "paused"

    @property
    def is_scheduled(self) -> bool:
        return self.sync_state == "scheduled"
