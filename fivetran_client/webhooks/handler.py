"""aiohttp adapter for receiving webhook deliveries.

The handler reads the raw body before any parsing, verifies its signature,
decodes it into a ``WebhookEvent`` and hands the event to a callback.
Rejected requests get a JSON error body:

    * 400 - missing body or missing signature header
    * 401 - signature does not match
    * 422 - body is not a JSON object (after a valid signature)

Example:
    async def on_event(event: WebhookEvent) -> None:
        if event.is_sync_end:
            ...

    app = web.Application()
    app.router.add_post("/webhooks/fivetran", webhook_handler(("env", "WEBHOOK_SECRET"), on_event))
"""

from __future__ import annotations

import inspect
import json
import logging
import os
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Union

from aiohttp import web
from pydantic import ValidationError

from ..core import ConfigurationError, SignatureStatus
from ..models import WebhookEvent
from ..runtime.telemetry import log_webhook_rejected
from .signature import signature_header, verify

logger = logging.getLogger(__name__)

SecretSource = Union[str, bytes, tuple[str, str], Callable[[], Union[str, bytes]]]
EventCallback = Callable[[WebhookEvent], Union[Awaitable[Any], Any]]

_REJECTIONS = {
    "missing_body": (400, "Missing request body"),
    SignatureStatus.MISSING_SIGNATURE.value: (400, "Missing signature header"),
    SignatureStatus.INVALID_SIGNATURE.value: (401, "Invalid signature"),
    "invalid_json": (422, "Invalid JSON payload"),
}


@dataclass(frozen=True)
class WebhookOutcome:
    """Result of processing one delivery.

    Attributes:
        status: HTTP status to answer with
        reason: Rejection reason key, None on success
        event: Parsed event, set only on success
    """

    status: int
    reason: str | None = None
    event: WebhookEvent | None = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @property
    def message(self) -> str | None:
        if self.reason is None:
            return None
        return _REJECTIONS[self.reason][1]

    @classmethod
    def rejected(cls, reason: str) -> WebhookOutcome:
        return cls(status=_REJECTIONS[reason][0], reason=reason)


def resolve_secret(source: SecretSource) -> bytes | str:
    """Resolve a configured webhook secret.

    Args:
        source: The secret itself, ``("env", NAME)`` to read an environment
            variable, or a zero-argument callable returning the secret

    Raises:
        ConfigurationError: When the secret is empty or cannot be resolved
    """
    if isinstance(source, tuple):
        scheme, name = source
        if scheme != "env":
            raise ConfigurationError(f"Unsupported secret source: {scheme!r}")
        secret = os.environ.get(name)
        if not secret:
            raise ConfigurationError(f"Environment variable {name} not set for webhook secret")
        return secret
    secret = source() if callable(source) else source
    if not isinstance(secret, (str, bytes)) or not secret:
        raise ConfigurationError("Webhook secret must be a non-empty string or bytes")
    return secret


def process_webhook(
    body: bytes | None,
    signature: str | None,
    secret: bytes | str,
) -> WebhookOutcome:
    """Verify and decode one delivery without touching any HTTP objects."""
    if not body:
        return WebhookOutcome.rejected("missing_body")

    status = verify(body, signature, secret)
    if not status.ok:
        return WebhookOutcome.rejected(status.value)

    try:
        payload = json.loads(body)
    except ValueError:
        return WebhookOutcome.rejected("invalid_json")
    if not isinstance(payload, dict):
        return WebhookOutcome.rejected("invalid_json")

    try:
        event = WebhookEvent.from_api(payload)
    except ValidationError:
        return WebhookOutcome.rejected("invalid_json")
    return WebhookOutcome(status=200, event=event)


def webhook_handler(
    secret: SecretSource,
    on_event: EventCallback | None = None,
) -> Callable[[web.Request], Awaitable[web.Response]]:
    """Build an aiohttp request handler for webhook deliveries.

    Static secrets are validated immediately; environment and callable
    sources are resolved on every request so rotated secrets are picked up.

    Args:
        secret: Secret or secret source (see ``resolve_secret``)
        on_event: Callback receiving each verified event (sync or async)
    """
    if isinstance(secret, (str, bytes)):
        resolve_secret(secret)

    async def handle(request: web.Request) -> web.Response:
        body = await request.read()
        outcome = process_webhook(
            body,
            request.headers.get(signature_header()),
            resolve_secret(secret),
        )
        if not outcome.ok:
            log_webhook_rejected(reason=outcome.reason or "", status=outcome.status)
            return web.json_response({"error": outcome.message}, status=outcome.status)

        if on_event is not None:
            result = on_event(outcome.event)
            if inspect.isawaitable(result):
                await result
        return web.json_response({"status": "ok"})

    return handle


def create_webhook_app(
    secret: SecretSource,
    on_event: EventCallback | None = None,
    *,
    path: str = "/webhooks/fivetran",
) -> web.Application:
    """Create an aiohttp application serving the webhook handler at ``path``."""
    app = web.Application()
    app.router.add_post(path, webhook_handler(secret, on_event))
    logger.info("webhook_app_created", extra={"path": path})
    return app
