# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/cli/main.py

"""
Typer entry point.

`minish` with no command words reads commands from stdin; with command
words it runs them as one batch. Options are only recognised before the
first command word, so `minish rm -x` passes `-x` through to the batch.
"""

# Standard library imports
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

# Third-party imports
import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

# Local imports
from minish.commands import build_default_registry
from minish.config.manager import load_shell_config
from minish.core.context import ShellContext
from minish.core.dispatcher import Dispatcher
from minish.core.shell import Shell
from minish.system.exceptions import ConfigError
from minish.system.logging_setup import setup_logging

EXIT_DEFECT = 70  # EX_SOFTWARE

app = typer.Typer(
    help="minish - a minimal command shell",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        try:
            pkg_version = version("minish")
        except PackageNotFoundError:
            pkg_version = "unknown"
        typer.echo(f"minish version {pkg_version}")
        raise typer.Exit()


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    }
)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="Load settings from this file only"
    ),
) -> None:
    """Run COMMAND_WORDS as a ';'-separated batch, or read commands from stdin."""
    console = Console()
    err_console = Console(stderr=True)

    try:
        config = load_shell_config(config_path)
    except ConfigError as e:
        err_console.print(f"[red]✗[/red] Configuration error: {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    setup_logging(config, debug=debug)

    context = ShellContext(cwd=config.start_dir or Path.cwd(), console=console)
    dispatcher = Dispatcher(build_default_registry(), context)
    shell = Shell(dispatcher, console, err_console, prompt=config.prompt)

    try:
        exit_code = shell.run(ctx.args, sys.stdin)
    except Exception:
        logger.opt(exception=True).critical("Internal error: a command handler broke its contract")
        raise typer.Exit(EXIT_DEFECT)

    raise typer.Exit(exit_code)
