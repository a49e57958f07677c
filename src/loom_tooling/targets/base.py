"""Target: a buildable unit for one (arch, build type) pair."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from loom_tooling.arch import is_64bit
from loom_tooling.config import BuildContext
from loom_tooling.errors import UnsupportedArchitectureError, UnsupportedPlatformError

if TYPE_CHECKING:
    from loom_tooling.toolchains import Toolchain


class BuildType(str, Enum):
    DEBUG = "Debug"
    RELEASE = "Release"
    REL_WITH_DEB_INFO = "RelWithDebInfo"
    MIN_SIZE_REL = "MinSizeRel"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Target:
    """Abstract target. Subclasses supply name and source_path, and usually flags."""

    arch: str
    build_type: BuildType
    context: BuildContext

    def __post_init__(self) -> None:
        # Accept plain strings ("Debug") as well as BuildType members.
        object.__setattr__(self, "build_type", BuildType(self.build_type))

    @property
    def name(self) -> str:
        raise NotImplementedError

    @property
    def source_path(self) -> Path:
        raise NotImplementedError

    @property
    def is_64bit(self) -> bool:
        return is_64bit(self.arch, self.context.archs)

    @property
    def build_root(self) -> Path:
        return self.context.build_root

    def build_name(self, toolchain: Toolchain, build_type: BuildType | None = None) -> str:
        """<name>-<toolchain>-<toolchain arch>/<build type>.

        Target and toolchain names may not contain '-' or '/', and arch names may not
        contain '/', so the directory name can be split back into its parts.
        """
        bt = BuildType(build_type) if build_type is not None else self.build_type
        if "-" in toolchain.name or "/" in toolchain.name:
            msg = f"Toolchain name must not contain '-' or '/': {toolchain.name}"
            raise UnsupportedPlatformError(msg)
        arch_name = toolchain.arch_name(self)
        if "/" in arch_name:
            msg = f"Toolchain arch name must not contain '/': {arch_name}"
            raise UnsupportedArchitectureError(msg)
        return f"{self.name}-{toolchain.name}-{arch_name}/{bt}"

    def build_path(self, toolchain: Toolchain, build_type: BuildType | None = None) -> Path:
        return self.build_root / self.build_name(toolchain, build_type)

    def flags(self, toolchain: Toolchain) -> str:
        return ""
