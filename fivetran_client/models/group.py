"""Group data model."""

from datetime import datetime

from .base import ApiModel


class Group(ApiModel):
    """A group of connectors sharing one destination."""

    id: str | None = None
    name: str | None = None
    created_at: datetime | None = None
