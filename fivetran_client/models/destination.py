"""Destination data model."""

from typing import Any

from .base import ApiModel


class Destination(ApiModel):
    """The warehouse a group loads data into."""

    id: str | None = None
    group_id: str | None = None
    service: str | None = None
    region: str | None = None
    time_zone_offset: str | int | None = None
    setup_status: str | None = None
    config: dict[str, Any] | None = None
