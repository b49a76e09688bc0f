#!/usr/bin/env python3
from __future__ import annotations

import argparse
from pathlib import Path

from beatsaver import BeatSaverSync, MapId, NotFoundError


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Show (and optionally download) a BeatSaver map")
    p.add_argument("map", nargs="?", default="2144", help="Map key or 40 character hash")
    p.add_argument("--download", type=Path, help="Write the zipped map to this path")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    with BeatSaverSync() as client:
        try:
            beatmap = client.map(MapId.parse(args.map))
        except NotFoundError:
            print(f"No map found for {args.map}")
            return

        meta = beatmap.metadata
        print("=" * 65)
        print(f"Key        : {beatmap.key}")
        print(f"Name       : {beatmap.name}")
        print(f"Song       : {meta.song_name} {meta.song_sub_name}".rstrip())
        print(f"Mapper     : {meta.level_author} (uploaded by {beatmap.uploader})")
        print(f"BPM        : {meta.bpm:g}")
        print(f"Votes      : +{beatmap.stats.upvotes} / -{beatmap.stats.downvotes}")
        for characteristic in meta.characteristics:
            levels = [
                name
                for name in ("easy", "normal", "hard", "expert", "expert_plus")
                if getattr(characteristic.difficulties, name) is not None
            ]
            print(f"{characteristic.name:11}: {', '.join(levels)}")
        print("=" * 65)

        if args.download:
            args.download.write_bytes(client.download(beatmap))
            print(f"Saved to {args.download}")


if __name__ == "__main__":
    main()
