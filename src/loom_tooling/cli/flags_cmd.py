"""`loom-tooling flags` - print build path and flags for one target/toolchain combination."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loom_tooling.arch import ARCHS, arch_info
from loom_tooling.config import BuildContext, load_build_config
from loom_tooling.errors import ConfigurationError
from loom_tooling.targets import BuildType, LoomTarget, LuaJITTarget
from loom_tooling.toolchains import make_toolchain

TARGETS = ("luajit", "loom")


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="loom-tooling flags", description="Resolve build path and flags for a target"
    )
    ap.add_argument("target", choices=TARGETS)
    ap.add_argument("--arch", default="x86_64", help=f"{', '.join(ARCHS)} (default: x86_64)")
    ap.add_argument(
        "--build-type",
        default=BuildType.RELEASE.value,
        choices=[b.value for b in BuildType],
        help="Build type (default: Release)",
    )
    ap.add_argument("--toolchain", required=True, help="linux, osx, ios, windows, android")
    ap.add_argument(
        "--config", type=Path, default=None, help="Build config YAML (default: <root>/loom.yml)"
    )
    ap.add_argument(
        "--root", type=Path, default=Path.cwd(), help="SDK root (default: cwd)"
    )
    return ap


def run_flags_argv(argv: list[str] | None = None) -> int:
    """Parse argv and print '<build path>\\n<flags>'. Returns 0 or 1."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []
    args = _parser().parse_args(argv)
    root = args.root.resolve()
    try:
        if args.config is not None:
            config = load_build_config(args.config, required=True)
        else:
            config = load_build_config(root / "loom.yml")
        arch_info(args.arch)
        ctx = BuildContext.create(root, config=config)
        toolchain = make_toolchain(args.toolchain)
        luajit = LuaJITTarget(args.arch, BuildType(args.build_type), ctx)
        if args.target == "luajit":
            target = luajit
        else:
            target = LoomTarget(args.arch, BuildType(args.build_type), ctx, dependencies=(luajit,))
        build_path = target.build_path(toolchain)
        flags = target.flags(toolchain)
    except ConfigurationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    print(build_path)
    print(flags)
    return 0
