# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_context.py

from pathlib import Path

import pytest

from minish.core.context import ShellContext
from minish.system.exceptions import ValidationError


class TestResolve:
    def test_relative_path_joins_cwd(self, context):
        assert context.resolve("a/b") == context.cwd / "a" / "b"

    def test_dot_segments_are_collapsed(self, context):
        assert context.resolve("./a/../b/.") == context.cwd / "b"

    def test_absolute_path_ignores_cwd(self, context):
        assert context.resolve("/etc") == Path("/etc")

    def test_parent_beyond_root_stops_at_root(self):
        context = ShellContext(cwd=Path("/"))
        assert context.resolve("../../..") == Path("/")

    def test_home_is_expanded(self, context, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert context.resolve("~/notes") == tmp_path / "notes"

    @pytest.mark.parametrize("bad", ["", "a\0b"])
    def test_invalid_paths(self, context, bad):
        with pytest.raises(ValidationError):
            context.resolve(bad)


class TestContextState:
    def test_cwd_is_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        context = ShellContext(cwd=Path("."))
        assert context.cwd == tmp_path.resolve()

    def test_change_directory(self, context, tmp_path):
        context.change_directory(tmp_path)
        assert context.cwd == tmp_path
