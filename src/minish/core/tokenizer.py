# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/minish/core/tokenizer.py

"""
Command-line tokenizer.

Pure text-splitting functions used by the dispatcher and by handlers:
- split_commands: one input line -> ';'-separated command strings
- extract_command_name / extract_parameters: split a command string at its first space
- tokenize_parameters / count_parameters: parameter text -> argument tokens

None of these functions raise; every string is valid input.
"""

import re

COMMAND_SEPARATOR = ";"

# Alternatives are tried left to right at each position: a double-quoted
# span, a single-quoted span, then a bare run without whitespace or quotes.
# A quote with no closing partner matches nothing and is skipped.
_TOKEN_PATTERN = re.compile(r'"([^"]*)"|\'([^\']*)\'|([^\s"\']+)')


def split_commands(text: str) -> list[str]:
    """Split an input line on ';' and trim each piece.

    Empty pieces are kept; the dispatcher treats an empty command as a no-op.

    >>> split_commands("a; b ;c")
    ['a', 'b', 'c']
    """
    return [piece.strip() for piece in text.split(COMMAND_SEPARATOR)]


def extract_command_name(command: str) -> str:
    """Return the text before the first space, or the whole string."""
    name, _, _ = command.partition(" ")
    return name


def extract_parameters(command: str) -> str:
    """Return the text after the first space, or '' when there is none."""
    _, _, parameters = command.partition(" ")
    return parameters


def tokenize_parameters(parameters: str) -> list[str]:
    """Split parameter text into argument tokens.

    Quoted spans lose their outer quotes and keep their interior verbatim.

    >>> tokenize_parameters('"a b" c')
    ['a b', 'c']
    >>> tokenize_parameters("'x y' z")
    ['x y', 'z']
    """
    tokens = []
    for match in _TOKEN_PATTERN.finditer(parameters):
        double_quoted, single_quoted, bare = match.groups()
        if double_quoted is not None:
            tokens.append(double_quoted)
        elif single_quoted is not None:
            tokens.append(single_quoted)
        else:
            tokens.append(bare)
    return tokens


def count_parameters(parameters: str) -> int:
    return len(tokenize_parameters(parameters))
