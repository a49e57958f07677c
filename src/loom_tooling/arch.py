"""Architecture registry: arch id -> properties."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loom_tooling.errors import UnsupportedArchitectureError

ARCHS: dict[str, dict[str, Any]] = {
    "x86": {"is64Bit": False},
    "x86_64": {"is64Bit": True},
    "armv7": {"is64Bit": False},
    "arm64": {"is64Bit": True},
}


def arch_info(arch: str, archs: Mapping[str, Mapping[str, Any]] = ARCHS) -> Mapping[str, Any]:
    """Return registry entry for arch. Raises UnsupportedArchitectureError if unregistered."""
    try:
        return archs[arch]
    except KeyError:
        msg = f"Unsupported architecture: {arch}. Use {', '.join(sorted(archs))}."
        raise UnsupportedArchitectureError(msg) from None


def is_64bit(arch: str, archs: Mapping[str, Mapping[str, Any]] = ARCHS) -> bool:
    return bool(arch_info(arch, archs)["is64Bit"])
