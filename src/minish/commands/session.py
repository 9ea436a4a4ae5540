# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/commands/session.py

"""
Session command handlers.

Handles: exit, help
"""

from minish.commands.base import ShellSignal, expect_arguments
from minish.core.context import ShellContext
from minish.core.registry import CommandRegistry
from minish.system.display import commands_to_table


class ExitCommand:
    name = "exit"
    usage = "exit"
    description = "Leave the shell"

    def execute(self, parameters: str, context: ShellContext) -> ShellSignal:
        expect_arguments(parameters, 0, self.usage)
        return ShellSignal.STOP


class HelpCommand:
    name = "help"
    usage = "help"
    description = "Show the available commands"

    def __init__(self, registry: CommandRegistry):
        # Read-only view; help never registers anything
        self._registry = registry

    def execute(self, parameters: str, context: ShellContext) -> None:
        expect_arguments(parameters, 0, self.usage)
        rows = [
            (name, handler.usage, handler.description)
            for name, handler in self._registry.items()
        ]
        context.console.print(commands_to_table(rows))
