#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging

from aiohttp import web

from fivetran_client.models import WebhookEvent
from fivetran_client.webhooks import create_webhook_app


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Receive and verify webhook deliveries")
    p.add_argument("--host", default="0.0.0.0")
    p.add_argument("--port", type=int, default=8080)
    p.add_argument("--path", default="/webhooks/fivetran")
    p.add_argument("--secret-env", default="FIVETRAN_WEBHOOK_SECRET")
    return p.parse_args()


async def on_event(event: WebhookEvent) -> None:
    print(
        f"{event.created.isoformat() if event.created else '-':32} | "
        f"{event.event or '':12} | {event.connector_id or '':24} | {event.status or ''}"
    )


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)
    app = create_webhook_app(("env", args.secret_env), on_event, path=args.path)
    web.run_app(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
