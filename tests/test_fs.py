"""Tests for loom_tooling.fs (copy, persistent delete, unzip)."""

import itertools
import os
import zipfile
from pathlib import Path
from unittest.mock import patch

import pytest

from loom_tooling.errors import RemoveTimeoutError
from loom_tooling.fs import cp_r_safe, cp_safe, rm_rf_persistent, unzip_file


def _tree(root: Path) -> Path:
    (root / "a" / "c").mkdir(parents=True)
    (root / "a" / "b.txt").write_text("b")
    (root / "a" / "c" / "locked.dll").write_text("d")
    (root / "e.txt").write_text("e")
    return root


class TestCopy:
    def test_cp_safe_missing_source(self, tmp_path: Path) -> None:
        assert cp_safe(tmp_path / "nope", tmp_path / "out" / "x") is False
        assert not (tmp_path / "out").exists()

    def test_cp_safe_creates_parent(self, tmp_path: Path) -> None:
        src = tmp_path / "lib.a"
        src.write_text("lib")
        dst = tmp_path / "artifacts" / "android" / "lib.a"
        assert cp_safe(src, dst) is True
        assert dst.read_text() == "lib"

    def test_cp_r_safe_missing_source(self, tmp_path: Path) -> None:
        assert cp_r_safe(tmp_path / "nope", tmp_path / "out") is False

    def test_cp_r_safe_copies_directory_into_dest(self, tmp_path: Path) -> None:
        src = _tree(tmp_path / "assets")
        assert cp_r_safe(src, tmp_path / "out") is True
        assert (tmp_path / "out" / "assets" / "a" / "c" / "locked.dll").read_text() == "d"

    def test_cp_r_safe_copies_file_into_dest(self, tmp_path: Path) -> None:
        src = tmp_path / "README"
        src.write_text("hi")
        assert cp_r_safe(src, tmp_path / "out") is True
        assert (tmp_path / "out" / "README").read_text() == "hi"


class TestRmRfPersistent:
    def test_missing_path_is_noop(self, tmp_path: Path) -> None:
        rm_rf_persistent(tmp_path / "gone")

    def test_removes_tree(self, tmp_path: Path) -> None:
        root = _tree(tmp_path / "build")
        rm_rf_persistent(root)
        assert not root.exists()

    def test_removes_single_file(self, tmp_path: Path) -> None:
        f = tmp_path / "x.txt"
        f.write_text("x")
        rm_rf_persistent(f)
        assert not f.exists()

    def test_retries_locked_file_until_released(self, tmp_path: Path) -> None:
        root = _tree(tmp_path / "build")
        real_remove = os.remove
        failures = {"n": 0}

        def flaky_remove(p) -> None:
            if Path(p).name == "locked.dll" and failures["n"] < 2:
                failures["n"] += 1
                raise PermissionError(13, "in use", str(p))
            real_remove(p)

        sleeps: list[float] = []
        with patch("loom_tooling.fs.remove.os.remove", side_effect=flaky_remove):
            rm_rf_persistent(root, sleep=sleeps.append, clock=itertools.count().__next__)
        assert not root.exists()
        assert failures["n"] == 2
        assert sleeps == [1, 1]

    def test_times_out_when_file_stays_locked(self, tmp_path: Path) -> None:
        root = _tree(tmp_path / "build")
        real_remove = os.remove

        def locked_remove(p) -> None:
            if Path(p).name == "locked.dll":
                raise PermissionError(13, "in use", str(p))
            real_remove(p)

        sleeps: list[float] = []
        clock = itertools.count(0, 10).__next__
        with patch("loom_tooling.fs.remove.os.remove", side_effect=locked_remove):
            with pytest.raises(RemoveTimeoutError) as exc_info:
                rm_rf_persistent(root, sleep=sleeps.append, clock=clock)
        assert "locked.dll" in str(exc_info.value)
        assert len(sleeps) == 7
        assert (root / "a" / "c" / "locked.dll").exists()

    def test_file_vanishing_counts_as_removed(self, tmp_path: Path) -> None:
        root = _tree(tmp_path / "build")
        real_remove = os.remove

        def racing_remove(p) -> None:
            real_remove(p)
            if Path(p).name == "e.txt":
                raise FileNotFoundError(2, "gone", str(p))

        sleeps: list[float] = []
        with patch("loom_tooling.fs.remove.os.remove", side_effect=racing_remove):
            rm_rf_persistent(root, sleep=sleeps.append)
        assert not root.exists()
        assert sleeps == []


class TestUnzipFile:
    def test_extracts_preserving_relative_paths(self, tmp_path: Path) -> None:
        archive = tmp_path / "luajit-prebuilt.zip"
        with zipfile.ZipFile(archive, "w") as zh:
            zh.writestr("android/Release/lib/libluajit-5.1.a", "lib")
            zh.writestr("include/luajit.h", "h")
            zh.writestr("empty/", "")
        dest = tmp_path / "out"
        assert unzip_file(archive, dest) == 2
        assert (dest / "android" / "Release" / "lib" / "libluajit-5.1.a").read_text() == "lib"
        assert (dest / "include" / "luajit.h").read_text() == "h"
        assert (dest / "empty").is_dir()

    def test_skips_unsafe_entries(self, tmp_path: Path) -> None:
        archive = tmp_path / "evil.zip"
        with zipfile.ZipFile(archive, "w") as zh:
            zh.writestr("../escape.txt", "x")
            zh.writestr("ok.txt", "ok")
        dest = tmp_path / "out"
        assert unzip_file(archive, dest) == 1
        assert (dest / "ok.txt").exists()
        assert not (tmp_path / "escape.txt").exists()
