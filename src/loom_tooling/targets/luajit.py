"""LuaJIT dependency target.

Built from source with make-style toolchains and with msvcbuild.bat on Windows.
Android ships precompiled libraries under loom/vendor/luajit-prebuilt, laid out
exactly like the build tree, so the batch script only copies them into place.
"""

from __future__ import annotations

from pathlib import Path

from loom_tooling.errors import UnsupportedArchitectureError, UnsupportedPlatformError
from loom_tooling.targets.base import BuildType
from loom_tooling.targets.dependency import DependencyTarget
from loom_tooling.toolchains import ANDROID, BATCH, MAKE, WINDOWS, Toolchain

GC_PROFILE_SWITCH = "ENABLE_LUA_GC_PROFILE"
GC_PROFILE_DEFINE = "LUA_GC_PROFILE_ENABLED"

# toolchain name -> static library file name
LIB_NAMES: dict[str, str] = {
    "windows": "lua51.lib",
    "linux": "libluajit-5.1.a",
    "osx": "libluajit-5.1.a",
    "ios": "libluajit-5.1.a",
    "android": "libluajit-5.1.a",
}

# arch -> vcvarsall.bat argument
VCVARSALL_ARCHS: dict[str, str] = {
    "x86": "x86",
    "x86_64": "x86_amd64",
}

PREBUILT_BUILD_TYPES = (BuildType.RELEASE, BuildType.DEBUG)


class LuaJITTarget(DependencyTarget):
    lib_var = "LUAJIT_LIB"
    include_var = "LUAJIT_INCLUDE_DIR"

    @property
    def name(self) -> str:
        return "luajit"

    @property
    def source_path(self) -> Path:
        return self.context.vendor_root / "luajit"

    @property
    def prebuilt_root(self) -> Path:
        return self.context.vendor_root / "luajit-prebuilt"

    def _bin_path_for(self, toolchain: Toolchain, build_type: BuildType) -> Path:
        lib_name = LIB_NAMES.get(toolchain.name)
        if lib_name is None:
            msg = f"Unsupported platform for {self.name}: {toolchain.name}"
            raise UnsupportedPlatformError(msg)
        return self.build_path(toolchain, build_type) / "lib" / lib_name

    def bin_path(self, toolchain: Toolchain) -> Path:
        return self._bin_path_for(toolchain, self.build_type)

    def include_path(self, toolchain: Toolchain) -> Path:
        return self.source_path / "src"

    def prebuilt_bin_path(self, toolchain: Toolchain) -> Path:
        """Prebuilt library for this config; unsupported build types fall back to Release."""
        build_type = self.build_type if self.build_type in PREBUILT_BUILD_TYPES else BuildType.RELEASE
        rel = self._bin_path_for(toolchain, build_type).relative_to(self.build_root)
        return self.prebuilt_root / rel

    def flags(self, toolchain: Toolchain) -> str:
        if toolchain.category == MAKE:
            return self._make_flags()
        if toolchain.category == BATCH and toolchain.platform is not None:
            if toolchain.platform.kind == WINDOWS:
                return self._windows_flags(toolchain)
            if toolchain.platform.kind == ANDROID:
                return self._android_flags(toolchain)
        return ""

    def _gc_profile(self) -> bool:
        return self.context.switch(GC_PROFILE_SWITCH) == 1

    def _make_flags(self) -> str:
        return f"-D{GC_PROFILE_DEFINE}" if self._gc_profile() else ""

    def _windows_flags(self, toolchain: Toolchain) -> str:
        """Positional args for the msvcbuild wrapper script.

        %1 vcvarsall.bat, %2 vcvarsall arch, %3 msvcbuild mode,
        %4 output lib dir, %5.. extra compiler args.
        """
        vcvarsall = toolchain.platform.vcvarsall()
        vs_arch = VCVARSALL_ARCHS.get(self.arch)
        if vs_arch is None:
            msg = f"Unsupported architecture: {self.arch}"
            raise UnsupportedArchitectureError(msg)
        mode = "debug" if self.build_type == BuildType.DEBUG else '""'
        args = [
            f'"{vcvarsall}"',
            vs_arch,
            mode,
            f'"{self.bin_path(toolchain).parent}"',
        ]
        if self._gc_profile():
            args.append(f"/D{GC_PROFILE_DEFINE}")
        return " ".join(args)

    def _android_flags(self, toolchain: Toolchain) -> str:
        """%1 prebuilt lib to copy, %2 output lib dir."""
        native = toolchain.platform.native_path
        prebuilt_lib = self.prebuilt_bin_path(toolchain)
        out_dir = self.bin_path(toolchain).parent
        return f'"{native(prebuilt_lib)}" "{native(out_dir)}"'
