#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from fivetran_client import FivetranClient, RetryPolicy


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List groups and their connectors via REST")
    p.add_argument("limit", nargs="?", type=int, default=10, help="Groups to show")
    p.add_argument("--page-size", type=int, default=100)
    p.add_argument("--connectors", action="store_true", help="Also list each group's connectors")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    policy = RetryPolicy(max_attempts=5, jitter=True)

    async with FivetranClient.from_env(retry_policy=policy) as client:
        groups = await client.groups.stream(limit=args.page_size).take(args.limit)
        print("=" * 65)
        print(f"{'Group ID':25} | {'Name':35}")
        print("-" * 65)
        for group in groups:
            print(f"{group.id or '':25} | {group.name or '':35}")
            if args.connectors and group.id:
                async for connector in client.connectors.stream(group.id, limit=args.page_size):
                    state = connector.sync_state or "-"
                    print(f"    {connector.id or '':21} | {connector.service or '':20} | {state}")
        print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
