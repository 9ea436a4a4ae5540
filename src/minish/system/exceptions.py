# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/system/exceptions.py

"""
Minish-specific exception classes.

Handlers signal the two expected failure kinds by raising ValidationError
(bad input shape) or FilesystemError (the environment refused the operation).
The dispatcher reports those and carries on; anything else is a defect.
"""


class MinishError(Exception):
    """Base exception for all minish-specific errors."""
    pass


class ConfigError(MinishError):
    """Raised when a configuration file cannot be validated."""
    pass


class ValidationError(MinishError):
    """Raised when a handler rejects its parameters (count, syntax, values)."""
    pass


class DuplicateCommandError(MinishError):
    """Raised when two handlers are registered under the same name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"command '{name}' is already registered")


# === FILESYSTEM OPERATION ERRORS ===

class FilesystemError(MinishError):
    """Raised when an underlying filesystem operation fails."""

    def __init__(self, message: str, path: str = None):
        self.path = path
        super().__init__(message)

    @classmethod
    def from_os_error(cls, error: OSError, path=None) -> "FilesystemError":
        """Wrap an OSError, keeping the OS message and the offending path."""
        path = path if path is not None else error.filename
        reason = error.strerror or str(error)
        if path is not None:
            return cls(f"{path}: {reason}", path=str(path))
        return cls(reason)
