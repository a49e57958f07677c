"""LoomSDK native player target."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from loom_tooling.errors import ConfigurationError, UnsupportedPlatformError
from loom_tooling.targets.base import BuildType, Target
from loom_tooling.targets.dependency import DependencyTarget
from loom_tooling.toolchains import Toolchain

APP_BUNDLE = "LoomPlayer.app"
APP_BINARY = "Contents/MacOS/LoomPlayer"


@dataclass(frozen=True)
class LoomTarget(Target):
    """The player. Links against its dependencies' artifacts; their own flags are built separately."""

    dependencies: Sequence[DependencyTarget] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.dependencies:
            msg = "LoomTarget needs at least one dependency target"
            raise ConfigurationError(msg)
        object.__setattr__(self, "dependencies", tuple(self.dependencies))

    @property
    def name(self) -> str:
        return "loom"

    @property
    def source_path(self) -> Path:
        return self.context.root

    def _app_dir(self, toolchain: Toolchain) -> Path:
        if toolchain.name != "osx":
            msg = f"Unsupported platform: {toolchain.name}"
            raise UnsupportedPlatformError(msg)
        return self.build_path(toolchain) / "application" / str(self.build_type) / APP_BUNDLE

    def bin_path(self, toolchain: Toolchain) -> Path:
        return self._app_dir(toolchain) / APP_BINARY

    def app_path(self, toolchain: Toolchain) -> Path:
        return self._app_dir(toolchain)

    def flags(self, toolchain: Toolchain) -> str:
        ctx = self.context
        defines = [
            f"-DLOOM_BUILD_JIT={ctx.switch('USE_LUA_JIT')}",
            f"-DLOOM_BUILD_64BIT={1 if self.is_64bit else 0}",
            f"-DLUA_GC_PROFILE_ENABLED={ctx.switch('ENABLE_LUA_GC_PROFILE')}",
            f"-DLOOM_BUILD_NUMCORES={ctx.host.num_cores}",
            f"-DLOOM_IS_DEBUG={1 if self.build_type == BuildType.DEBUG else 0}",
            f"-DLOOM_BUILD_ADMOB={ctx.switch('BUILD_ADMOB')}",
            f"-DLOOM_BUILD_FACEBOOK={ctx.switch('BUILD_FACEBOOK')}",
        ]
        for dep in self.dependencies:
            defines.append(f'-D{dep.lib_var}="{dep.bin_path(toolchain)}"')
            defines.append(f'-D{dep.include_var}="{dep.include_path(toolchain)}"')
        return " ".join(defines)
