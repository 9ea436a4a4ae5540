# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/system/display.py

# Third-party imports
from rich.console import Console
from rich.table import Table


def echo(console: Console, text: str, end: str = "\n") -> None:
    """Print text verbatim: no markup, highlighting, emoji or wrapping."""
    console.print(
        text,
        end=end,
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def commands_to_table(rows: list[tuple[str, str, str]]) -> Table:
    """Convert (name, usage, description) rows to a rich Table for help output."""
    table = Table(title="Available commands", title_justify="left")
    table.add_column("Command", style="bold")
    table.add_column("Usage")
    table.add_column("Description")
    for name, usage, description in rows:
        table.add_row(name, usage, description)
    return table
