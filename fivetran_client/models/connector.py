"""Connector data model."""

from datetime import datetime
from typing import Any

from pydantic import Field

from .base import ApiModel


class Connector(ApiModel):
    """A connector syncing one source into a group's destination.

    ``status`` carries the raw status object, e.g.
    ``{"setup_state": "connected", "sync_state": "scheduled"}``.
    """

    id: str | None = None
    group_id: str | None = None
    service: str | None = None
    service_version: int | None = None
    schema_name: str | None = Field(default=None, alias="schema")
    paused: bool | None = None
    pause_after_trial: bool | None = None
    sync_frequency: int | None = None
    status: dict[str, Any] | None = None
    setup_state: str | None = None
    created_at: datetime | None = None
    succeeded_at: datetime | None = None
    failed_at: datetime | None = None
    config: dict[str, Any] | None = None

    @property
    def sync_state(self) -> str | None:
        """Current sync state ("scheduled", "syncing", "paused", "rescheduled")."""
        if not self.status:
            return None
        return self.status.get("sync_state")

    @property
    def is_syncing(self) -> bool:
        return self.sync_state == "syncing"

    @property
    def is_paused(self) -> bool:
        return self.paused is True
