#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from beatsaver import BeatSaverAsync, ClientConfig, RateLimitError
from beatsaver.core import BackendKind, MapSort


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List BeatSaver maps with an async backend")
    p.add_argument("sort", nargs="?", default="LATEST", choices=[s.name for s in MapSort])
    p.add_argument("limit", nargs="?", type=int, default=20)
    p.add_argument("backend", nargs="?", default="AIOHTTP", choices=["AIOHTTP", "HTTPX"])
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(message)s")

    config = ClientConfig(backend=BackendKind[args.backend])
    async with BeatSaverAsync(config=config) as client:
        maps = client.maps_sorted(MapSort[args.sort])
        print("=" * 80)
        print(f"{'Key':>6} | {'Name':40} | {'Mapper':16} | {'Rating':>6}")
        print("-" * 80)
        shown = 0
        while shown < args.limit:
            try:
                beatmap = await maps.__anext__()
            except RateLimitError as e:
                print(f"... {e.info}")
                await asyncio.sleep(e.retry_after)
                continue
            except StopAsyncIteration:
                break
            print(
                f"{beatmap.key:>6} | {beatmap.name[:40]:40} | {beatmap.metadata.level_author[:16]:16} | {beatmap.stats.rating:>6.2f}"
            )
            shown += 1
        print("=" * 80)


if __name__ == "__main__":
    asyncio.run(main())
