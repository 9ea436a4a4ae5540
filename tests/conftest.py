# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/conftest.py

"""
Shared test fixtures for the minish test suite.
"""

import io

import pytest
from rich.console import Console

from minish.commands import build_default_registry
from minish.core.context import ShellContext
from minish.core.dispatcher import Dispatcher
from minish.core.shell import Shell


def make_console(buffer: io.StringIO) -> Console:
    """Plain, wide console writing into a buffer."""
    return Console(file=buffer, width=200, color_system=None, force_terminal=False)


@pytest.fixture
def out_buffer():
    return io.StringIO()


@pytest.fixture
def err_buffer():
    return io.StringIO()


@pytest.fixture
def console(out_buffer):
    return make_console(out_buffer)


@pytest.fixture
def err_console(err_buffer):
    return make_console(err_buffer)


@pytest.fixture
def context(tmp_path, console):
    """Context rooted at an empty temporary directory."""
    return ShellContext(cwd=tmp_path, console=console)


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def dispatcher(registry, context):
    return Dispatcher(registry, context)


@pytest.fixture
def shell(dispatcher, console, err_console):
    return Shell(dispatcher, console, err_console)
