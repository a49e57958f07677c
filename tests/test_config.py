"""Tests for loom_tooling.config."""

from pathlib import Path

import pytest

from loom_tooling.config import (
    DEFAULT_BUILD_CONFIG,
    BuildContext,
    load_build_config,
    resolve_build_config,
)
from loom_tooling.errors import ConfigurationError
from loom_tooling.host import HostInfo


class TestResolveBuildConfig:
    def test_none_gives_defaults(self) -> None:
        assert resolve_build_config(None) == DEFAULT_BUILD_CONFIG

    def test_overrides_and_ignores_unknown(self) -> None:
        cfg = resolve_build_config({"ENABLE_LUA_GC_PROFILE": "1", "SOMETHING_ELSE": 3})
        assert cfg["ENABLE_LUA_GC_PROFILE"] == 1
        assert "SOMETHING_ELSE" not in cfg

    def test_bad_value_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="BUILD_ADMOB"):
            resolve_build_config({"BUILD_ADMOB": "maybe"})

    def test_defaults_not_mutated(self) -> None:
        resolve_build_config({"USE_LUA_JIT": 0})
        assert DEFAULT_BUILD_CONFIG["USE_LUA_JIT"] == 1


class TestLoadBuildConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_build_config(tmp_path / "loom.yml") == DEFAULT_BUILD_CONFIG

    def test_reads_yaml(self, tmp_path: Path) -> None:
        p = tmp_path / "loom.yml"
        p.write_text("ENABLE_LUA_GC_PROFILE: 1\nBUILD_FACEBOOK: 1\n")
        cfg = load_build_config(p)
        assert cfg["ENABLE_LUA_GC_PROFILE"] == 1
        assert cfg["BUILD_FACEBOOK"] == 1
        assert cfg["USE_LUA_JIT"] == 1

    def test_empty_yaml_gives_defaults(self, tmp_path: Path) -> None:
        p = tmp_path / "loom.yml"
        p.write_text("")
        assert load_build_config(p) == DEFAULT_BUILD_CONFIG

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        p = tmp_path / "loom.yml"
        p.write_text("- USE_LUA_JIT\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_build_config(p)

    def test_malformed_yaml_raises(self, tmp_path: Path) -> None:
        p = tmp_path / "loom.yml"
        p.write_text("ENABLE_LUA_GC_PROFILE: [1\n")
        with pytest.raises(ConfigurationError, match="Invalid build config"):
            load_build_config(p)

    def test_required_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            load_build_config(tmp_path / "nope.yml", required=True)


class TestBuildContext:
    def test_paths(self, tmp_path: Path) -> None:
        ctx = BuildContext.create(tmp_path, host=HostInfo("Darwin", 10))
        assert ctx.build_root == tmp_path / "build"
        assert ctx.vendor_root == tmp_path / "loom" / "vendor"
        assert ctx.host.num_cores == 10

    def test_switch(self, tmp_path: Path) -> None:
        ctx = BuildContext.create(tmp_path, config={"BUILD_ADMOB": 1}, host=HostInfo("Linux", 2))
        assert ctx.switch("BUILD_ADMOB") == 1
        assert ctx.switch("USE_LUA_JIT") == 1
