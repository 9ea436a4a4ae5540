# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/core/shell.py

"""
Shell loop.

Two run modes, chosen once from the process arguments:
- interactive: prompt, read a line, dispatch every command in it, repeat
  until end of input. Failures are reported and the loop continues.
- batch: join the arguments with spaces and dispatch the resulting
  commands in order, stopping at the first failure.
"""

from enum import Enum
from typing import Optional, Sequence, TextIO

from loguru import logger
from rich.console import Console

from minish.config.manager import DEFAULT_PROMPT
from minish.core.dispatcher import Dispatcher, Outcome
from minish.core.tokenizer import split_commands
from minish.system.display import echo

EXIT_SUCCESS = 0
EXIT_BATCH_FAILURE = 1


class RunMode(Enum):
    INTERACTIVE = "interactive"
    BATCH = "batch"

    @classmethod
    def from_arguments(cls, arguments: Optional[Sequence[str]]) -> "RunMode":
        return cls.BATCH if arguments else cls.INTERACTIVE


class Shell:
    """Sequences dispatch calls and decides the exit code.

    Args:
        dispatcher: Dispatcher bound to a registry and context
        console: Console for the prompt (stdout)
        err_console: Console for reported failures (stderr)
        prompt: Text printed before each interactive read
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        console: Console,
        err_console: Console,
        prompt: str = DEFAULT_PROMPT,
    ):
        self.dispatcher = dispatcher
        self.console = console
        self.err_console = err_console
        self.prompt = prompt

    def run(self, arguments: Optional[Sequence[str]], stdin: TextIO) -> int:
        mode = RunMode.from_arguments(arguments)
        logger.debug(f"Starting in {mode.value} mode")
        if mode is RunMode.BATCH:
            return self.run_batch(arguments)
        return self.run_interactive(stdin)

    def run_interactive(self, stdin: TextIO) -> int:
        """Read and execute lines until end of input; always exits 0."""
        while True:
            echo(self.console, self.prompt, end="")
            line = stdin.readline()
            if not line:
                break
            for command in split_commands(line.rstrip("\r\n")):
                outcome = self._execute(command)
                if outcome.is_stop:
                    return EXIT_SUCCESS
        return EXIT_SUCCESS

    def run_batch(self, arguments: Sequence[str]) -> int:
        """Execute the joined arguments, failing fast."""
        for command in split_commands(" ".join(arguments)):
            outcome = self._execute(command)
            if outcome.is_failed:
                logger.debug(f"Batch stopped at '{command}'")
                return EXIT_BATCH_FAILURE
            if outcome.is_stop:
                break
        return EXIT_SUCCESS

    def _execute(self, command: str) -> Outcome:
        outcome = self.dispatcher.dispatch(command)
        if outcome.is_failed:
            echo(self.err_console, outcome.report())
        return outcome
