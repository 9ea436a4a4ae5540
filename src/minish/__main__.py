# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/__main__.py

from minish.cli import app

if __name__ == "__main__":
    app(prog_name="minish")
