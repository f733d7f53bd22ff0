#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
from contextlib import aclosing

from pr0gramm import ItemFlags, ItemsFilter, Pr0grammAPI


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream pr0gramm items older than a given id")
    p.add_argument("start", type=int, help="Item id to start below")
    p.add_argument("limit", nargs="?", type=int, default=50)
    p.add_argument("--promoted", action="store_true")
    p.add_argument("--tags", nargs="*", default=None)
    p.add_argument("--newer", action="store_true", help="Walk towards newer items instead")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    options = ItemsFilter(flags=ItemFlags.SFW, promoted=args.promoted, tags=args.tags)

    async with Pr0grammAPI.create_with_cookies() as api:
        stream = (
            api.items.walk_stream_newer(options, args.start)
            if args.newer
            else api.items.walk_stream_older(options, args.start)
        )
        print(f"{'Id':>10} | {'Up':>6} | {'Down':>6} | User")
        print("-" * 50)
        count = 0
        async with aclosing(stream) as items:
            async for item in items:
                print(f"{item.id:>10} | {item.up:>6} | {item.down:>6} | {item.user or ''}")
                count += 1
                if count >= args.limit:
                    break


if __name__ == "__main__":
    asyncio.run(main())
