#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from fivetran_client import FivetranClient, RetryPolicy


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Trigger a connector sync")
    p.add_argument("connector_id")
    p.add_argument("--resync", action="store_true", help="Historical resync (re-imports all data)")
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with FivetranClient.from_env(retry_policy=RetryPolicy()) as client:
        if args.resync:
            result = await client.with_retry(
                lambda: client.connectors.resync(args.connector_id, confirm=True)
            )
        else:
            result = await client.with_retry(lambda: client.connectors.sync(args.connector_id))
        connector = await client.connectors.get(args.connector_id)
        print(f"Connector  : {connector.id} ({connector.service})")
        print(f"Sync state : {connector.sync_state}")
        print(f"Response   : {result}")


if __name__ == "__main__":
    asyncio.run(main())
