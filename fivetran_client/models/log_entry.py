"""Rows of the platform connector's LOG table."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from .base import ApiModel

SCHEMA_CHANGE_EVENTS = frozenset({"create_table", "alter_table", "drop_table", "create_schema"})


class LogEntry(ApiModel):
    """One sync log event as queried from the destination warehouse.

    There is no REST endpoint for sync logs; the platform connector writes
    them to a ``log`` table in the warehouse. Build entries from the rows of
    such a query with ``from_row``/``from_rows``. ``message_data`` is kept as
    the raw (usually JSON) string.
    """

    id: str | None = None
    time_stamp: datetime | None = None
    connector_id: str | None = None
    event: str | None = None
    message_event: str | None = None
    message_data: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> LogEntry:
        return cls.model_validate(dict(row))

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, Any]]) -> list[LogEntry]:
        return [cls.from_row(row) for row in rows]

    @property
    def is_sync_start(self) -> bool:
        return self.event == "sync_start"

    @property
    def is_sync_end(self) -> bool:
        return self.event == "sync_end"

    @property
    def is_schema_change(self) -> bool:
        return self.event in SCHEMA_CHANGE_EVENTS
