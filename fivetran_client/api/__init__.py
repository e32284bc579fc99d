"""Resource endpoints and the high-level client."""

from .client import FivetranClient
from .connectors import Connectors
from .destinations import Destinations
from .groups import Groups
from .webhooks import Webhooks

__all__ = [
    "FivetranClient",
    "Groups",
    "Connectors",
    "Destinations",
    "Webhooks",
]
