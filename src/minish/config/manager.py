# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/config/manager.py

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Final

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from minish.system.exceptions import ConfigError


# ---- Constants ----

USER_CFG: Final = "minish.yml"
DEFAULT_PROMPT: Final = "$ "


def _get_config_search_paths() -> tuple[Path, ...]:
    """Get config file search paths (ordered by priority: lowest to highest).

    Evaluated at call time so environment overrides set by tests are honoured.
    """
    return (
        Path("/etc/minish") / USER_CFG,  # System defaults
        Path.home() / ".config" / "minish" / USER_CFG,  # User config
        Path(os.getenv("XDG_CONFIG_HOME", "")) / "minish" / USER_CFG,  # XDG override
        Path(os.getenv("MINISH_CONFIG_HOME", "")) / USER_CFG,  # Explicit override (highest priority)
    )


def _is_unset_env_candidate(candidate: Path) -> bool:
    # An empty env var turns the candidate into a relative path under cwd
    return not candidate.is_absolute()


def _load_merged_config_data(candidates: tuple[Path, ...]) -> dict:
    """Load and merge config data from candidate paths.

    Later candidates override earlier ones. Files that are missing or
    unreadable are skipped.
    """
    merged_data = {}
    found_configs = []

    for candidate in candidates:
        if _is_unset_env_candidate(candidate) or not candidate.exists():
            continue
        try:
            with candidate.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {candidate}: {e}")
            continue

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config {candidate}: top level is not a mapping")
            continue

        merged_data.update(data)
        found_configs.append(str(candidate))
        logger.debug(f"Loaded config from {candidate}")

    if found_configs:
        logger.debug(f"Merged config from: {', '.join(found_configs)}")
    return merged_data


class ShellConfig(BaseModel):
    """Shell settings: prompt, optional log directory and starting directory."""
    prompt: str = Field(default=DEFAULT_PROMPT, description="Prompt printed before each interactive read")
    local_log: Optional[Path] = Field(default=None, description="Directory for the DEBUG log file")
    start_dir: Optional[Path] = Field(default=None, description="Initial working directory")

    @field_validator("start_dir")
    @classmethod
    def start_dir_must_be_directory(cls, value: Optional[Path]) -> Optional[Path]:
        """An initial working directory has to exist up front."""
        if value is None:
            return value
        try:
            path = value.expanduser()
            is_dir = path.is_dir()
        except (OSError, RuntimeError) as e:
            raise ValueError(f"start_dir {value}: {e}") from e
        if not is_dir:
            raise ValueError(f"start_dir {path} is not an existing directory")
        return path

    @classmethod
    def from_data(cls, data: dict, source: str = "config") -> "ShellConfig":
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigError(f"Invalid {source}: {e}") from e

    @classmethod
    def load(cls, config_path: Path) -> "ShellConfig":
        """Load config from a single file."""
        try:
            with config_path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid {config_path}: top level must be a mapping")
        return cls.from_data(data, source=str(config_path))


def load_shell_config(config_path: Path | None = None) -> ShellConfig:
    """Load the shell config from an explicit file or the merged search path."""
    if config_path is not None:
        return ShellConfig.load(config_path)
    merged_data = _load_merged_config_data(_get_config_search_paths())
    return ShellConfig.from_data(merged_data, source="merged config")
