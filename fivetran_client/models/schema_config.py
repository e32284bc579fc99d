"""Connector schema configuration: schemas, tables and columns."""

from __future__ import annotations

from typing import Any

from .base import ApiModel


class Column(ApiModel):
    """A synced column; ``hashed`` columns are one-way hashed in the destination."""

    name_in_destination: str | None = None
    enabled: bool | None = None
    hashed: bool | None = None
    is_primary_key: bool | None = None
    type: str | None = None
    enabled_patch_settings: dict[str, Any] | None = None


class Table(ApiModel):
    """A synced table.

    ``sync_mode`` is "SOFT_DELETE" (deleted rows flagged), "HISTORY" (every
    change kept as a new row) or "LIVE" (deletes are hard deletes).
    """

    name_in_destination: str | None = None
    enabled: bool | None = None
    sync_mode: str | None = None
    supports_columns_config: bool | None = None
    enabled_patch_settings: dict[str, Any] | None = None
    columns: dict[str, Column] | None = None

    @property
    def primary_keys(self) -> list[str]:
        """Source names of the primary key columns."""
        return [name for name, col in (self.columns or {}).items() if col.is_primary_key]

    @property
    def hashed_columns(self) -> list[str]:
        return [name for name, col in (self.columns or {}).items() if col.hashed]


class Schema(ApiModel):
    """A source schema (or database) and its tables."""

    name_in_destination: str | None = None
    enabled: bool | None = None
    tables: dict[str, Table] | None = None

    @property
    def enabled_tables(self) -> dict[str, Table]:
        return {name: table for name, table in (self.tables or {}).items() if table.enabled}


class SchemaConfig(ApiModel):
    """Which schemas, tables and columns a connector syncs.

    ``schema_change_handling`` is "ALLOW_ALL", "ALLOW_COLUMNS" or "BLOCK_ALL"
    and decides whether newly discovered objects are included.
    """

    enable_new_by_default: bool | None = None
    schema_change_handling: str | None = None
    schemas: dict[str, Schema] | None = None

    @property
    def enabled_schemas(self) -> dict[str, Schema]:
        return {name: schema for name, schema in (self.schemas or {}).items() if schema.enabled}
