# SPDX-License-Identifier: MIT
"""Tests for lintbridge.targets — expanding locations into RuleTargets."""

from __future__ import annotations

from pathlib import Path

import pytest

from lintbridge.targets import build_target


class TestBuildTarget:
    def test_directory_is_globbed(self, tmp_path: Path) -> None:
        (tmp_path / "pkg").mkdir()
        (tmp_path / "a.py").write_text("")
        (tmp_path / "pkg" / "b.py").write_text("")
        (tmp_path / "pkg" / "c.txt").write_text("")
        target = build_target(str(tmp_path), ["**/*.py"])
        assert target.is_directory is True
        assert target.target == str(tmp_path)
        assert sorted(target.paths) == [str(tmp_path / "a.py"), str(tmp_path / "pkg" / "b.py")]

    def test_overlapping_patterns_do_not_duplicate(self, tmp_path: Path) -> None:
        (tmp_path / "a.py").write_text("")
        target = build_target(str(tmp_path), ["**/*.py", "*.py"])
        assert target.paths == [str(tmp_path / "a.py")]

    def test_file_is_taken_as_is(self, tmp_path: Path) -> None:
        source = tmp_path / "script.py"
        source.write_text("")
        target = build_target(str(source), ["**/*.py"])
        assert target.is_directory is False
        assert target.paths == [str(source)]

    def test_missing_location_has_no_paths(self, tmp_path: Path) -> None:
        target = build_target(str(tmp_path / "nope.py"), ["**/*.py"])
        assert target.paths == []
        assert target.is_directory is False

    def test_relative_directory_yields_absolute_paths(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "a.py").write_text("import os\n")
        monkeypatch.chdir(tmp_path)
        target = build_target("src", ["**/*.py"])
        assert target.target == "src"
        assert target.is_directory is True
        assert target.paths == [str(tmp_path / "src" / "a.py")]

    def test_relative_file_yields_absolute_path(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "a.py").write_text("")
        monkeypatch.chdir(tmp_path)
        target = build_target("a.py", ["**/*.py"])
        assert target.paths == [str(tmp_path / "a.py")]
