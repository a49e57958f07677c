"""`loom-tooling rm-rf` and `loom-tooling unzip`."""

from __future__ import annotations

import argparse
import sys
import zipfile
from pathlib import Path

from loom_tooling.fs import rm_rf_persistent, unzip_file
from loom_tooling.fs.remove import REMOVE_TIME_LIMIT


def run_rm_rf_argv(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(prog="loom-tooling rm-rf")
    ap.add_argument("path", type=Path)
    ap.add_argument(
        "--timeout",
        type=float,
        default=REMOVE_TIME_LIMIT,
        help=f"Seconds to keep retrying a locked file (default: {REMOVE_TIME_LIMIT})",
    )
    args = ap.parse_args(argv)
    try:
        rm_rf_persistent(args.path, time_limit=args.timeout)
    except OSError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    print(f"✅ Removed {args.path}")
    return 0


def run_unzip_argv(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(prog="loom-tooling unzip")
    ap.add_argument("archive", type=Path)
    ap.add_argument("destination", type=Path)
    args = ap.parse_args(argv)
    if not args.archive.is_file():
        print(f"❌ Archive not found: {args.archive}", file=sys.stderr)
        return 1
    try:
        count = unzip_file(args.archive, args.destination)
    except zipfile.BadZipFile as e:
        print(f"❌ {args.archive}: {e}", file=sys.stderr)
        return 1
    print(f"📦 Extracted {args.archive.name} -> {args.destination} ({count} entries)")
    return 0
