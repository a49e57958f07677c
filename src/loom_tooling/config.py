"""Build configuration switches and the context threaded through every Target.

Config YAML format (all keys optional, values 0/1):
- USE_LUA_JIT: build the player against LuaJIT
- ENABLE_LUA_GC_PROFILE: compile LuaJIT and the player with GC profiling
- BUILD_ADMOB / BUILD_FACEBOOK: feature toggles for the player
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from loom_tooling.arch import ARCHS
from loom_tooling.errors import ConfigurationError
from loom_tooling.host import HostInfo, detect_host

log = logging.getLogger(__name__)

DEFAULT_BUILD_CONFIG: dict[str, int] = {
    "USE_LUA_JIT": 1,
    "ENABLE_LUA_GC_PROFILE": 0,
    "BUILD_ADMOB": 0,
    "BUILD_FACEBOOK": 0,
}


def resolve_build_config(overrides: Mapping[str, Any] | None) -> dict[str, int]:
    """Return config dict with defaults filled. Unknown keys are ignored."""
    out = dict(DEFAULT_BUILD_CONFIG)
    if not overrides:
        return out
    for k, v in overrides.items():
        if k not in out:
            log.debug("Ignoring unknown build config key %s", k)
            continue
        try:
            out[k] = int(v)
        except (TypeError, ValueError) as e:
            msg = f"Build config {k} must be 0 or 1, got {v!r}"
            raise ConfigurationError(msg) from e
    return out


def load_build_config(path: Path, *, required: bool = False) -> dict[str, int]:
    """Load config overrides from YAML. Missing file -> defaults, unless required."""
    if not path.is_file():
        if required:
            msg = f"Build config not found: {path}"
            raise ConfigurationError(msg)
        return resolve_build_config(None)
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        msg = f"Invalid build config {path}: {e}"
        raise ConfigurationError(msg) from e
    if not isinstance(data, dict):
        msg = f"Build config must be a mapping: {path}"
        raise ConfigurationError(msg)
    return resolve_build_config(data)


@dataclass(frozen=True)
class BuildContext:
    """Everything a Target reads besides its own arch and build type."""

    root: Path
    config: Mapping[str, int] = field(default_factory=lambda: dict(DEFAULT_BUILD_CONFIG))
    host: HostInfo = field(default_factory=detect_host)
    archs: Mapping[str, Mapping[str, Any]] = field(default_factory=lambda: ARCHS)

    def __hash__(self) -> int:
        # Hash the dict fields by value; archs is covered by equality only.
        return hash((self.root, tuple(sorted(self.config.items())), self.host))

    @classmethod
    def create(
        cls,
        root: Path,
        config: Mapping[str, Any] | None = None,
        host: HostInfo | None = None,
    ) -> BuildContext:
        return cls(
            root=Path(root),
            config=resolve_build_config(config),
            host=host or detect_host(),
        )

    @property
    def build_root(self) -> Path:
        return self.root / "build"

    @property
    def vendor_root(self) -> Path:
        return self.root / "loom" / "vendor"

    def switch(self, name: str) -> int:
        return int(self.config.get(name, DEFAULT_BUILD_CONFIG.get(name, 0)))
