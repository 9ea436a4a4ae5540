# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/commands/__init__.py

"""
Built-in command handlers.

- filesystem: mkdir, dir, cd, pwd, rm, mv, cp
- session: exit, help
"""

from minish.commands.base import CommandHandler, ShellSignal, expect_arguments
from minish.commands.filesystem import (
    CdCommand,
    CopyCommand,
    DirCommand,
    MakeDirCommand,
    MvCommand,
    PwdCommand,
    RmCommand,
)
from minish.commands.session import ExitCommand, HelpCommand
from minish.core.registry import CommandRegistry


def build_default_registry() -> CommandRegistry:
    """Register every built-in handler, help last so it can list the others."""
    registry = CommandRegistry()
    for handler in (
        MakeDirCommand(),
        DirCommand(),
        CdCommand(),
        PwdCommand(),
        RmCommand(),
        MvCommand(),
        CopyCommand(),
        ExitCommand(),
    ):
        registry.register(handler)
    registry.register(HelpCommand(registry))
    return registry


__all__ = [
    "CdCommand",
    "CommandHandler",
    "CopyCommand",
    "DirCommand",
    "ExitCommand",
    "HelpCommand",
    "MakeDirCommand",
    "MvCommand",
    "PwdCommand",
    "RmCommand",
    "ShellSignal",
    "build_default_registry",
    "expect_arguments",
]
