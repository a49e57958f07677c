"""Pytest fixtures for loom_tooling tests."""

from pathlib import Path

import pytest

from loom_tooling.config import BuildContext
from loom_tooling.host import HostInfo
from loom_tooling.targets import BuildType, LuaJITTarget
from loom_tooling.toolchains import make_toolchain

_VS_ENV = {"VS140COMNTOOLS": "C:\\Program Files (x86)\\Microsoft Visual Studio 14.0\\Common7\\Tools\\"}


@pytest.fixture
def sdk_root(tmp_path: Path) -> Path:
    root = tmp_path / "LoomSDK"
    root.mkdir()
    return root


@pytest.fixture
def make_ctx(sdk_root: Path):
    """Factory: BuildContext for sdk_root with a fixed 8-core linux host."""

    def _make(**config: int) -> BuildContext:
        return BuildContext.create(sdk_root, config=config, host=HostInfo("Linux", 8))

    return _make


@pytest.fixture
def ctx(make_ctx) -> BuildContext:
    return make_ctx()


@pytest.fixture
def windows():
    return make_toolchain("windows", env=_VS_ENV)


@pytest.fixture
def android():
    return make_toolchain("android")


@pytest.fixture
def luajit_debug(ctx: BuildContext) -> LuaJITTarget:
    return LuaJITTarget("x86_64", BuildType.DEBUG, ctx)


@pytest.fixture
def vs_env() -> dict[str, str]:
    return dict(_VS_ENV)
