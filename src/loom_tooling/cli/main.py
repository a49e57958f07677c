"""Main CLI entry point for loom-tooling."""

import sys

from loom_tooling import preflight
from loom_tooling.cli import flags_cmd, fs_cmd


def _usage() -> None:
    print("Usage: loom-tooling <command> [args...]", file=sys.stderr)
    print("Commands:", file=sys.stderr)
    print("  check-versions        - Verify Python and CMake versions", file=sys.stderr)
    print(
        "  flags <luajit|loom>   - Print build path and flags for a target/toolchain",
        file=sys.stderr,
    )
    print("  rm-rf <path>          - Delete a tree, retrying locked files", file=sys.stderr)
    print("  unzip <zip> <dest>    - Extract an archive keeping relative paths", file=sys.stderr)


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        _usage()
        sys.exit(1)

    command = sys.argv[1]
    rest = sys.argv[2:]

    if command == "check-versions":
        sys.exit(preflight.run())
    elif command == "flags":
        sys.exit(flags_cmd.run_flags_argv(rest))
    elif command == "rm-rf":
        sys.exit(fs_cmd.run_rm_rf_argv(rest))
    elif command == "unzip":
        sys.exit(fs_cmd.run_unzip_argv(rest))
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
