# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/__init__.py

"""minish - a minimal command shell with a ';'-separated batch mode."""
