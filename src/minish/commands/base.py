# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/commands/base.py

"""Handler protocol shared by every built-in command."""

from enum import Enum
from typing import Optional, Protocol, runtime_checkable

from minish.core.context import ShellContext
from minish.core.tokenizer import tokenize_parameters
from minish.system.exceptions import ValidationError


class ShellSignal(Enum):
    """Control values a handler may return to the shell loop."""
    STOP = "stop"


@runtime_checkable
class CommandHandler(Protocol):
    """A named capability executed with its raw parameter text.

    execute() returns None on success or ShellSignal.STOP to end the loop.
    Expected failures are raised as ValidationError or FilesystemError.
    """
    name: str
    usage: str
    description: str

    def execute(self, parameters: str, context: ShellContext) -> Optional[ShellSignal]:
        ...


def expect_arguments(parameters: str, count: int, usage: str) -> list[str]:
    """Tokenize parameters, requiring exactly `count` arguments.

    Raises:
        ValidationError: If the number of arguments differs from `count`
    """
    arguments = tokenize_parameters(parameters)
    if len(arguments) != count:
        noun = "argument" if count == 1 else "arguments"
        raise ValidationError(
            f"expected {count} {noun}, got {len(arguments)}. Usage: {usage}"
        )
    return arguments
