# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/core/context.py

from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger
from rich.console import Console

from minish.system.exceptions import ValidationError


@dataclass
class ShellContext:
    """Process-wide state passed to every handler invocation.

    Attributes:
        cwd: Absolute working directory shared by all handlers
        console: Console for handler output (stdout)
    """
    cwd: Path = field(default_factory=Path.cwd)
    console: Console = field(default_factory=Console)

    def __post_init__(self) -> None:
        self.cwd = Path(self.cwd).expanduser().resolve()

    def resolve(self, path_text: str) -> Path:
        """Resolve a user-supplied path against the working directory.

        Raises:
            ValidationError: If the path is empty, contains a NUL character,
                or starts with a ~user that cannot be expanded
        """
        if not path_text:
            raise ValidationError("empty path")
        if "\0" in path_text:
            raise ValidationError(f"invalid path: {path_text!r}")
        try:
            path = Path(path_text).expanduser()
        except RuntimeError as e:
            # ~user with no such user, or no home directory at all
            raise ValidationError(f"cannot expand {path_text!r}") from e
        if not path.is_absolute():
            path = self.cwd / path
        return Path(*_normalize_parts(path))

    def change_directory(self, target: Path) -> None:
        logger.debug(f"cwd {self.cwd} -> {target}")
        self.cwd = target


def _normalize_parts(path: Path) -> list[str]:
    # Lexical '..' handling, so a missing path still gets a readable error
    parts: list[str] = []
    for part in path.parts:
        if part == ".":
            continue
        if part == ".." and len(parts) > 1:
            parts.pop()
        elif part != "..":
            parts.append(part)
    return parts
