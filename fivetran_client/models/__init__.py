"""Data models for API resources, webhook events and sync logs.

Architecture:
    All models are Pydantic v2, immutable (frozen=True) and tolerant of
    unknown fields, so additions to the API never break parsing.

Model Categories:
    - Resources: Group, Connector, Destination, Webhook
    - Connector details: SyncStatus, SchemaConfig, Schema, Table, Column
    - Events: WebhookEvent, LogEntry
"""

from .base import ApiModel, parse_timestamp
from .connector import Connector
from .destination import Destination
from .group import Group
from .log_entry import LogEntry
from .schema_config import Column, Schema, SchemaConfig, Table
from .sync_status import SyncStatus
from .webhook import Webhook
from .webhook_event import WebhookEvent

__all__ = [
    "ApiModel",
    "Column",
    "Connector",
    "Destination",
    "Group",
    "LogEntry",
    "Schema",
    "SchemaConfig",
    "SyncStatus",
    "Table",
    "Webhook",
    "WebhookEvent",
    "parse_timestamp",
]
