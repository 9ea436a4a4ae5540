# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/core/registry.py

"""Name-keyed table of command handlers, built once at startup."""

from __future__ import annotations

from collections import OrderedDict
from typing import TYPE_CHECKING, Optional

from loguru import logger

from minish.system.exceptions import DuplicateCommandError

if TYPE_CHECKING:
    from minish.commands.base import CommandHandler


class CommandRegistry:
    """Maps command names to handlers, preserving registration order."""

    def __init__(self) -> None:
        self._handlers: OrderedDict[str, CommandHandler] = OrderedDict()

    def register(self, handler: CommandHandler) -> CommandHandler:
        """Register a handler under its name.

        Raises:
            DuplicateCommandError: If the name is already taken
        """
        if handler.name in self:
            raise DuplicateCommandError(handler.name)
        self._handlers[handler.name] = handler
        logger.debug(f"Registered command '{handler.name}'")
        return handler

    def lookup(self, name: str) -> Optional[CommandHandler]:
        return self._handlers.get(name)

    def items(self) -> list[tuple[str, CommandHandler]]:
        """Return (name, handler) pairs in registration order."""
        return list(self._handlers.items())

    def __contains__(self, name: object) -> bool:
        return name in self._handlers
