# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/core/dispatcher.py

"""
Command dispatcher.

Resolves one command string to one handler call and folds the two expected
failure kinds (ValidationError, FilesystemError) into a failed Outcome.
Any other exception raised by a handler is a defect and propagates.
"""

from dataclasses import dataclass
from enum import Enum

from loguru import logger

from minish.commands.base import ShellSignal
from minish.core.context import ShellContext
from minish.core.registry import CommandRegistry
from minish.core.tokenizer import extract_command_name, extract_parameters
from minish.system.exceptions import FilesystemError, ValidationError

NOT_FOUND_MESSAGE = "command not found. Type help to get help"


class OutcomeStatus(Enum):
    OK = "ok"
    FAILED = "failed"
    STOP = "stop"


@dataclass(frozen=True)
class Outcome:
    """Result of dispatching one command string."""
    command: str
    status: OutcomeStatus
    message: str = ""

    @classmethod
    def ok(cls, command: str) -> "Outcome":
        return cls(command, OutcomeStatus.OK)

    @classmethod
    def failed(cls, command: str, message: str) -> "Outcome":
        return cls(command, OutcomeStatus.FAILED, message)

    @classmethod
    def stop(cls, command: str) -> "Outcome":
        return cls(command, OutcomeStatus.STOP)

    @property
    def is_failed(self) -> bool:
        return self.status is OutcomeStatus.FAILED

    @property
    def is_stop(self) -> bool:
        return self.status is OutcomeStatus.STOP

    def report(self) -> str:
        """Error-channel line: '<command>: <message>'."""
        return f"{self.command}: {self.message}"


class Dispatcher:
    """Looks up handlers in a registry and runs them against a shared context."""

    def __init__(self, registry: CommandRegistry, context: ShellContext):
        self.registry = registry
        self.context = context

    def dispatch(self, command: str) -> Outcome:
        name = extract_command_name(command)
        parameters = extract_parameters(command)

        if not name:
            return Outcome.ok(name)

        handler = self.registry.lookup(name)
        if handler is None:
            logger.debug(f"Unknown command '{name}'")
            return Outcome.failed(name, NOT_FOUND_MESSAGE)

        logger.debug(f"Dispatching '{name}' with parameters {parameters!r}")
        try:
            signal = handler.execute(parameters, self.context)
        except (ValidationError, FilesystemError) as e:
            logger.debug(f"'{name}' failed: {e}")
            return Outcome.failed(name, str(e))

        if signal is ShellSignal.STOP:
            return Outcome.stop(name)
        return Outcome.ok(name)
