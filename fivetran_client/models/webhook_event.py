"""Inbound webhook event model."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from .base import ApiModel

_KNOWN_FIELDS = frozenset(
    {
        "event",
        "created",
        "connector_id",
        "connector_type",
        "connector_name",
        "sync_id",
        "group_id",
        "destination_group_id",
        "status",
        "data",
    }
)


class WebhookEvent(ApiModel):
    """Event delivered to a webhook endpoint.

    Fields not listed here are preserved in ``extra`` so payload additions
    stay visible to handlers. ``destination_group_id`` falls back to the
    legacy ``group_id`` when absent.
    """

    event: str | None = None
    created: datetime | None = None
    connector_id: str | None = None
    connector_type: str | None = None
    connector_name: str | None = None
    sync_id: str | None = None
    group_id: str | None = None
    destination_group_id: str | None = None
    status: str | None = None
    data: dict[str, Any] | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def split_known_fields(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        known = {k: v for k, v in values.items() if k in _KNOWN_FIELDS}
        extra = {k: v for k, v in values.items() if k not in _KNOWN_FIELDS}
        if isinstance(extra.get("extra"), dict):
            extra.update(extra.pop("extra"))
        known["extra"] = extra
        if known.get("destination_group_id") is None:
            known["destination_group_id"] = known.get("group_id")
        return known

    @property
    def is_sync_start(self) -> bool:
        return self.event == "sync_start"

    @property
    def is_sync_end(self) -> bool:
        return self.event == "sync_end"

    @property
    def is_successful(self) -> bool:
        return self.status == "SUCCESSFUL"

    @property
    def is_failed(self) -> bool:
        return self.status == "FAILED"
