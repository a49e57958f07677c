"""Dependency targets: libraries whose artifacts another target links against."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from loom_tooling.targets.base import Target

if TYPE_CHECKING:
    from loom_tooling.toolchains import Toolchain


class DependencyTarget(Target):
    """Exposes the artifact paths a dependent target injects as CMake variables."""

    # CMake variables the dependent target passes bin_path / include_path through.
    lib_var: str = ""
    include_var: str = ""

    def bin_path(self, toolchain: Toolchain) -> Path:
        raise NotImplementedError

    def include_path(self, toolchain: Toolchain) -> Path:
        raise NotImplementedError
