"""Build targets: output paths and toolchain-specific flags."""

from .base import BuildType, Target
from .dependency import DependencyTarget
from .loom import LoomTarget
from .luajit import LuaJITTarget

__all__ = [
    "BuildType",
    "DependencyTarget",
    "LoomTarget",
    "LuaJITTarget",
    "Target",
]
