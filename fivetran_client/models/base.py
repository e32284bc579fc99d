"""Shared base for API resource models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp, returning None when it cannot be read."""
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


class ApiModel(BaseModel):
    """Immutable model built from an API payload.

    Unknown fields are ignored so new API fields never break parsing, and
    timestamp fields degrade to None instead of failing validation.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @field_validator(
        "created_at",
        "succeeded_at",
        "failed_at",
        "created",
        "time_stamp",
        mode="before",
        check_fields=False,
    )
    @classmethod
    def parse_timestamps(cls, value: Any) -> datetime | None:
        return parse_timestamp(value)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ApiModel:
        """Build the model from a decoded ``data`` object."""
        return cls.model_validate(data)
