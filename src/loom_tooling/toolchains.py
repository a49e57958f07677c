"""Toolchain descriptors.

A toolchain is tagged by category (make-style or batch-style). Batch toolchains
carry a platform variant (windows or android) that decides how script arguments
are shaped. Targets branch on these tags, never on concrete classes.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import PureWindowsPath
from typing import TYPE_CHECKING

from loom_tooling.errors import MissingToolchainError, UnsupportedPlatformError

if TYPE_CHECKING:
    from loom_tooling.targets.base import Target

log = logging.getLogger(__name__)

MAKE = "make"
BATCH = "batch"

WINDOWS = "windows"
ANDROID = "android"

# Newest first. Env var -> (version, display name).
VS_COMNTOOLS: list[tuple[str, str, str]] = [
    ("VS140COMNTOOLS", "14.0", "Visual Studio 2015"),
    ("VS120COMNTOOLS", "12.0", "Visual Studio 2013"),
    ("VS110COMNTOOLS", "11.0", "Visual Studio 2012"),
    ("VS100COMNTOOLS", "10.0", "Visual Studio 2010"),
]

ANDROID_ARCH_NAMES: dict[str, str] = {
    "armv7": "armeabi-v7a",
    "arm64": "arm64-v8a",
    "x86": "x86",
    "x86_64": "x86_64",
}

WINDOWS_ARCH_NAMES: dict[str, str] = {
    "x86": "x86",
    "x86_64": "x64",
}

MAKE_TOOLCHAINS = ("linux", "osx", "ios")


def find_vs_install(env: Mapping[str, str] | None = None) -> dict[str, str] | None:
    """Locate the newest Visual Studio install from VS*COMNTOOLS. Returns {name, version, install} or None."""
    if env is None:
        env = os.environ
    for var, version, name in VS_COMNTOOLS:
        tools = env.get(var)
        if not tools:
            continue
        # <install>\Common7\Tools\
        tools_path = PureWindowsPath(tools)
        if len(tools_path.parents) < 2:
            log.debug("Ignoring malformed %s=%s", var, tools)
            continue
        return {"name": name, "version": version, "install": str(tools_path.parents[1])}
    return None


@dataclass(frozen=True)
class WindowsPlatform:
    vs_install: Mapping[str, str] | None = None
    kind: str = field(default=WINDOWS, init=False)

    def require_vs_install(self) -> Mapping[str, str]:
        if not self.vs_install:
            msg = "Missing or unsupported Visual Studio version"
            raise MissingToolchainError(
                msg, hint="Install Visual Studio 2010-2015 and make sure VS*COMNTOOLS is set."
            )
        return self.vs_install

    def vcvarsall(self) -> PureWindowsPath:
        return PureWindowsPath(self.require_vs_install()["install"]) / "VC" / "vcvarsall.bat"


@dataclass(frozen=True)
class AndroidPlatform:
    path_sep: str = "\\"
    kind: str = field(default=ANDROID, init=False)

    def native_path(self, path: object) -> str:
        return str(path).replace("/", self.path_sep)


PlatformVariant = WindowsPlatform | AndroidPlatform


@dataclass(frozen=True)
class Toolchain:
    name: str
    category: str
    platform: PlatformVariant | None = None
    arch_names: Mapping[str, str] = field(default_factory=dict)

    def arch_name(self, target: Target) -> str:
        """Toolchain's own spelling of target.arch (identity when unmapped)."""
        return self.arch_names.get(target.arch, target.arch)


def make_toolchain(name: str, env: Mapping[str, str] | None = None) -> Toolchain:
    """Build the toolchain descriptor for a platform name: linux, osx, ios, windows, android."""
    if name in MAKE_TOOLCHAINS:
        return Toolchain(name=name, category=MAKE)
    if name == WINDOWS:
        return Toolchain(
            name=name,
            category=BATCH,
            platform=WindowsPlatform(vs_install=find_vs_install(env)),
            arch_names=WINDOWS_ARCH_NAMES,
        )
    if name == ANDROID:
        return Toolchain(
            name=name,
            category=BATCH,
            platform=AndroidPlatform(),
            arch_names=ANDROID_ARCH_NAMES,
        )
    supported = ", ".join([*MAKE_TOOLCHAINS, WINDOWS, ANDROID])
    msg = f"Unsupported platform: {name}. Use {supported}."
    raise UnsupportedPlatformError(msg)
