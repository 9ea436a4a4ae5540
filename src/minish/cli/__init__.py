# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/cli/__init__.py

from minish.cli.main import app

__all__ = ["app"]
