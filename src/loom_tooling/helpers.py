"""Shared helpers for loom_tooling (version, path)."""

from __future__ import annotations

import re
from pathlib import Path

# --- Version ---

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)(?:\.(\d+))?(?:-([\w.-]+))?$")


def parse_version(v: str) -> tuple[int, int, int, str | None]:
    """Parse X.Y[.Z][-pre] (leading 'v' allowed). Raises ValueError on invalid format."""
    m = _VERSION_RE.match(v.strip().lstrip("v"))
    if not m:
        msg = "Invalid version format: " + str(v)
        raise ValueError(msg)
    return (int(m.group(1)), int(m.group(2)), int(m.group(3) or 0), m.group(4))


def compare_versions(v1: str, v2: str) -> int:
    """Positive if v1 > v2, negative if v1 < v2, zero if equal. A prerelease sorts before its release."""
    major1, minor1, patch1, pre1 = parse_version(v1)
    major2, minor2, patch2, pre2 = parse_version(v2)

    if major1 != major2:
        return major1 - major2
    if minor1 != minor2:
        return minor1 - minor2
    if patch1 != patch2:
        return patch1 - patch2

    if pre1 is None and pre2 is not None:
        return 1
    if pre1 is not None and pre2 is None:
        return -1
    if pre1 is None and pre2 is None:
        return 0

    # rc.N (and CMake's rcN) order numerically.
    rc_match1 = re.match(r"^rc\.?(\d+)$", pre1)
    rc_match2 = re.match(r"^rc\.?(\d+)$", pre2)
    if rc_match1 and rc_match2:
        return int(rc_match1.group(1)) - int(rc_match2.group(1))

    if pre1 < pre2:
        return -1
    if pre1 > pre2:
        return 1
    return 0


def version_outdated(current: str, required: str) -> bool:
    return compare_versions(current, required) < 0


# --- Path ---


def pretty_path(path: Path, root: Path) -> Path:
    """path relative to the SDK root (unchanged if it lies outside)."""
    path = Path(path)
    try:
        return path.relative_to(root)
    except ValueError:
        return path
