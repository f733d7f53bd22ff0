#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import getpass

from pr0gramm import Pr0grammAPI, Unauthenticated, Vote


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Log in and up-vote an item")
    p.add_argument("name")
    p.add_argument("item_id", type=int)
    p.add_argument("vote", nargs="?", default="UP", choices=[v.name for v in Vote])
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    password = getpass.getpass(f"Password for {args.name}: ")

    async with Pr0grammAPI.create_with_cookies() as api:
        result = await api.user.login(args.name, password)
        if not result.get("success"):
            print(f"Login failed: {result.get('error') or result}")
            return
        try:
            print(await api.items.vote(args.item_id, Vote[args.vote]))
        except Unauthenticated as e:
            print(f"Session cookie missing after login: {e}")


if __name__ == "__main__":
    asyncio.run(main())
