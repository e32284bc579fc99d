"""Webhook subscription data model."""

from datetime import datetime

from .base import ApiModel


class Webhook(ApiModel):
    """A webhook subscription at account or group level."""

    id: str | None = None
    type: str | None = None
    group_id: str | None = None
    url: str | None = None
    events: list[str] | None = None
    active: bool | None = None
    secret: str | None = None
    created_at: datetime | None = None

    @property
    def is_account_level(self) -> bool:
        return self.type == "account"

    @property
    def is_group_level(self) -> bool:
        return self.type == "group"
