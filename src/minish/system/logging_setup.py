# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/system/logging_setup.py

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from minish.config.manager import ShellConfig

LOG_FILE_NAME = "minish.log"


def setup_logging(config: Optional[ShellConfig] = None, debug: bool = False) -> None:
    """Setup loguru logging for the shell.

    Configures:
    - Console output: WARNING+ on stderr (DEBUG+ with debug=True)
    - File output: DEBUG+ if local_log is configured
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "WARNING",
        format="<level>{level}</level>: {message}",
        colorize=True
    )

    if config is None or config.local_log is None:
        return

    try:
        log_dir = Path(config.local_log).expanduser()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME

        logger.add(
            log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation="10 MB",
            retention="30 days",
            compression="gz"
        )
        logger.debug(f"File logging enabled: {log_file}")

    except Exception as e:
        # Don't fail the shell if logging setup fails
        logger.warning(f"Failed to setup file logging: {e}")
