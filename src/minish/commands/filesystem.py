# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/commands/filesystem.py

"""
Filesystem command handlers.

Handles: mkdir, dir, cd, pwd, rm, mv, cp

Every path argument is resolved against ShellContext.cwd. OSError from any
stat or filesystem call is re-raised as FilesystemError.
"""

import os
import shutil
from pathlib import Path

from loguru import logger

from minish.commands.base import expect_arguments
from minish.core.context import ShellContext
from minish.system.display import echo
from minish.system.exceptions import FilesystemError, ValidationError


def _require_exists(path: Path) -> None:
    if not path.exists() and not path.is_symlink():
        raise FilesystemError(f"{path}: no such file or directory", path=str(path))


def _destination_for(source: Path, destination: Path) -> Path:
    """Place source inside destination when destination is an existing directory."""
    if destination.is_dir():
        return destination / source.name
    return destination


def _is_same_or_inside(path: Path, ancestor: Path) -> bool:
    return path == ancestor or ancestor in path.parents


class MakeDirCommand:
    name = "mkdir"
    usage = "mkdir <directory>"
    description = "Create a directory"

    def execute(self, parameters: str, context: ShellContext) -> None:
        (raw_path,) = expect_arguments(parameters, 1, self.usage)
        path = context.resolve(raw_path)
        try:
            path.mkdir()
        except OSError as e:
            raise FilesystemError.from_os_error(e, path) from e
        logger.debug(f"Created directory {path}")


class DirCommand:
    name = "dir"
    usage = "dir"
    description = "List the contents of the working directory"

    def execute(self, parameters: str, context: ShellContext) -> None:
        expect_arguments(parameters, 0, self.usage)
        try:
            names = sorted(entry.name for entry in context.cwd.iterdir())
        except OSError as e:
            raise FilesystemError.from_os_error(e, context.cwd) from e
        for name in names:
            echo(context.console, name)


class CdCommand:
    name = "cd"
    usage = "cd <directory>"
    description = "Change the working directory"

    def execute(self, parameters: str, context: ShellContext) -> None:
        (raw_path,) = expect_arguments(parameters, 1, self.usage)
        path = context.resolve(raw_path)
        try:
            _require_exists(path)
            if not path.is_dir():
                raise FilesystemError(f"{path}: not a directory", path=str(path))
            if not os.access(path, os.X_OK):
                raise FilesystemError(f"{path}: permission denied", path=str(path))
        except OSError as e:
            raise FilesystemError.from_os_error(e, path) from e
        context.change_directory(path)


class PwdCommand:
    name = "pwd"
    usage = "pwd"
    description = "Print the working directory"

    def execute(self, parameters: str, context: ShellContext) -> None:
        expect_arguments(parameters, 0, self.usage)
        echo(context.console, str(context.cwd))


class RmCommand:
    name = "rm"
    usage = "rm <path>"
    description = "Remove a file, or a directory with all its contents"

    def execute(self, parameters: str, context: ShellContext) -> None:
        (raw_path,) = expect_arguments(parameters, 1, self.usage)
        path = context.resolve(raw_path)
        if _is_same_or_inside(context.cwd, path):
            raise ValidationError(f"cannot remove {path}: it contains the working directory")
        try:
            _require_exists(path)
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        except OSError as e:
            raise FilesystemError.from_os_error(e, path) from e
        logger.debug(f"Removed {path}")


class MvCommand:
    name = "mv"
    usage = "mv <source> <destination>"
    description = "Move or rename a file or directory"

    def execute(self, parameters: str, context: ShellContext) -> None:
        raw_source, raw_destination = expect_arguments(parameters, 2, self.usage)
        source = context.resolve(raw_source)
        target = context.resolve(raw_destination)
        try:
            _require_exists(source)
            destination = _destination_for(source, target)
            if source == destination:
                raise ValidationError(f"{source} and {destination} are the same file")
            if source.is_dir() and _is_same_or_inside(destination, source):
                raise ValidationError(f"cannot move {source} into itself")
            shutil.move(str(source), str(destination))
        except OSError as e:
            raise FilesystemError.from_os_error(e) from e
        logger.debug(f"Moved {source} -> {destination}")


class CopyCommand:
    name = "cp"
    usage = "cp <source> <destination>"
    description = "Copy a file, or a directory with all its contents"

    def execute(self, parameters: str, context: ShellContext) -> None:
        raw_source, raw_destination = expect_arguments(parameters, 2, self.usage)
        source = context.resolve(raw_source)
        target = context.resolve(raw_destination)
        try:
            _require_exists(source)
            destination = _destination_for(source, target)
            if source == destination:
                raise ValidationError(f"{source} and {destination} are the same file")
            if source.is_dir() and _is_same_or_inside(destination, source):
                raise ValidationError(f"cannot copy {source} into itself")
            if source.is_dir():
                shutil.copytree(source, destination, symlinks=True)
            else:
                shutil.copy2(source, destination)
        except OSError as e:
            raise FilesystemError.from_os_error(e) from e
        logger.debug(f"Copied {source} -> {destination}")
