"""Unit tests for the aiohttp webhook adapter."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiohttp import test_utils
from multidict import CIMultiDict

from fivetran_client.core import ConfigurationError
from fivetran_client.models import WebhookEvent
from fivetran_client.webhooks import (
    WebhookOutcome,
    compute_signature,
    create_webhook_app,
    process_webhook,
    resolve_secret,
    webhook_handler,
)

SECRET = "my_webhook_secret"
BODY = b'{"event":"sync_end","connector_id":"abc123","created":"2024-01-01T00:00:00Z"}'


def mock_request(body: bytes, headers: dict[str, str] | None = None) -> MagicMock:
    request = MagicMock()
    request.read = AsyncMock(return_value=body)
    request.headers = CIMultiDict(headers or {})
    return request


def signed(body: bytes, secret: str = SECRET) -> dict[str, str]:
    return {"X-Fivetran-Signature-256": compute_signature(body, secret)}


class TestProcessWebhook:
    """Test delivery verification and decoding."""

    def test_valid_delivery(self):
        outcome = process_webhook(BODY, compute_signature(BODY, SECRET), SECRET)

        assert outcome.ok
        assert outcome.status == 200
        assert isinstance(outcome.event, WebhookEvent)
        assert outcome.event.connector_id == "abc123"
        assert outcome.event.is_sync_end

    @pytest.mark.parametrize("body", [b"", None])
    def test_missing_body(self, body):
        outcome = process_webhook(body, "ABC", SECRET)
        assert (outcome.status, outcome.reason) == (400, "missing_body")

    def test_missing_signature(self):
        outcome = process_webhook(BODY, None, SECRET)
        assert (outcome.status, outcome.reason) == (400, "missing_signature")
        assert outcome.message == "Missing signature header"

    def test_invalid_signature(self):
        outcome = process_webhook(BODY, compute_signature(BODY, "wrong"), SECRET)
        assert (outcome.status, outcome.reason) == (401, "invalid_signature")
        assert outcome.event is None

    def test_signature_checked_before_json(self):
        """Test an unsigned garbage body is rejected as unauthorized, not unparseable."""
        outcome = process_webhook(b"not json", "00" * 32, SECRET)
        assert outcome.status == 401

    @pytest.mark.parametrize("body", [b"not json", b"[1, 2]", b'{"event": 5}'])
    def test_invalid_json_after_valid_signature(self, body):
        outcome = process_webhook(body, compute_signature(body, SECRET), SECRET)
        assert (outcome.status, outcome.reason) == (422, "invalid_json")

    def test_success_outcome_has_no_message(self):
        assert WebhookOutcome(status=200).message is None


class TestResolveSecret:
    """Test secret source resolution."""

    def test_literal(self):
        assert resolve_secret("s3cret") == "s3cret"
        assert resolve_secret(b"s3cret") == b"s3cret"

    def test_env(self, monkeypatch):
        monkeypatch.setenv("HOOK_SECRET", "from-env")
        assert resolve_secret(("env", "HOOK_SECRET")) == "from-env"

    def test_env_missing(self, monkeypatch):
        monkeypatch.delenv("HOOK_SECRET", raising=False)
        with pytest.raises(ConfigurationError):
            resolve_secret(("env", "HOOK_SECRET"))

    def test_unknown_scheme(self):
        with pytest.raises(ConfigurationError):
            resolve_secret(("vault", "path/to/secret"))

    def test_callable(self):
        assert resolve_secret(lambda: "rotated") == "rotated"

    @pytest.mark.parametrize("source", ["", b"", lambda: ""])
    def test_empty_rejected(self, source):
        with pytest.raises(ConfigurationError):
            resolve_secret(source)


class TestWebhookHandler:
    """Test the aiohttp request handler."""

    def test_empty_static_secret_fails_fast(self):
        with pytest.raises(ConfigurationError):
            webhook_handler("")

    @pytest.mark.asyncio
    async def test_accepts_signed_delivery(self):
        on_event = AsyncMock()
        handle = webhook_handler(SECRET, on_event)

        response = await handle(mock_request(BODY, signed(BODY)))

        assert response.status == 200
        assert json.loads(response.body) == {"status": "ok"}
        event = on_event.await_args.args[0]
        assert event.connector_id == "abc123"

    @pytest.mark.asyncio
    async def test_header_lookup_is_case_insensitive(self):
        handle = webhook_handler(SECRET)
        headers = {"x-fivetran-signature-256": compute_signature(BODY, SECRET).lower()}

        response = await handle(mock_request(BODY, headers))

        assert response.status == 200

    @pytest.mark.asyncio
    async def test_sync_callback(self):
        received = []
        handle = webhook_handler(SECRET, received.append)

        await handle(mock_request(BODY, signed(BODY)))

        assert len(received) == 1

    @pytest.mark.asyncio
    async def test_rejected_delivery_skips_callback(self):
        on_event = AsyncMock()
        handle = webhook_handler(SECRET, on_event)

        response = await handle(mock_request(BODY, signed(BODY, "other")))

        assert response.status == 401
        assert json.loads(response.body) == {"error": "Invalid signature"}
        on_event.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_header(self):
        response = await webhook_handler(SECRET)(mock_request(BODY))

        assert response.status == 400
        assert json.loads(response.body) == {"error": "Missing signature header"}

    @pytest.mark.asyncio
    async def test_env_secret_resolved_per_request(self, monkeypatch):
        monkeypatch.setenv("HOOK_SECRET", "first")
        handle = webhook_handler(("env", "HOOK_SECRET"))
        assert (await handle(mock_request(BODY, signed(BODY, "first")))).status == 200

        monkeypatch.setenv("HOOK_SECRET", "second")
        assert (await handle(mock_request(BODY, signed(BODY, "first")))).status == 401


class TestWebhookApp:
    """Test the application end to end over a local server."""

    @pytest.mark.asyncio
    async def test_post_delivery(self):
        events: list[WebhookEvent] = []
        app = create_webhook_app(SECRET, events.append, path="/hooks")

        async with test_utils.TestClient(test_utils.TestServer(app)) as client:
            ok = await client.post("/hooks", data=BODY, headers=signed(BODY))
            bad = await client.post("/hooks", data=BODY)

            assert ok.status == 200
            assert bad.status == 400
            assert await bad.json() == {"error": "Missing signature header"}

        assert [event.connector_id for event in events] == ["abc123"]
