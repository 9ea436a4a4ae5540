# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_tokenizer.py

import pytest

from minish.core.tokenizer import (
    count_parameters,
    extract_command_name,
    extract_parameters,
    split_commands,
    tokenize_parameters,
)


class TestSplitCommands:
    """Splitting an input line on ';'."""

    @pytest.mark.parametrize("text", ["", "   ", "mkdir foo", "  pwd  ", "cp 'a b' c"])
    def test_no_separator_yields_single_trimmed_command(self, text):
        """Without ';' the result is the trimmed input."""
        assert split_commands(text) == [text.strip()]

    def test_pieces_are_trimmed(self):
        assert split_commands("a; b ;c") == ["a", "b", "c"]

    def test_empty_pieces_are_preserved(self):
        """Consecutive and trailing separators leave empty entries."""
        assert split_commands("a;;b;") == ["a", "", "b", ""]
        assert split_commands(";") == ["", ""]

    def test_separator_inside_quotes_still_splits(self):
        """Quoting is a parameter concept; ';' always separates commands."""
        assert split_commands("mkdir 'a;b'") == ["mkdir 'a", "b'"]


class TestCommandNameAndParameters:
    """Splitting a command string at its first space."""

    def test_name_with_parameters(self):
        assert extract_command_name("mkdir foo") == "mkdir"
        assert extract_parameters("mkdir foo") == "foo"

    def test_name_without_parameters(self):
        assert extract_command_name("exit") == "exit"
        assert extract_parameters("exit") == ""

    def test_trailing_space_gives_empty_parameters(self):
        assert extract_command_name("pwd ") == "pwd"
        assert extract_parameters("pwd ") == ""

    def test_only_first_space_is_split(self):
        assert extract_parameters("mv  a   b") == " a   b"

    def test_empty_string(self):
        assert extract_command_name("") == ""
        assert extract_parameters("") == ""

    def test_name_is_case_sensitive(self):
        assert extract_command_name("MkDir x") == "MkDir"

    @pytest.mark.parametrize("line", ["cp 'a b' c; dir", "mkdir x;  pwd", "help", "mv a  b"])
    def test_resplitting_name_and_parameters_is_stable(self, line):
        """Splitting name/parameters again reconstructs the same split."""
        for command in split_commands(line):
            name = extract_command_name(command)
            parameters = extract_parameters(command)
            rebuilt = f"{name} {parameters}" if parameters else name
            assert extract_command_name(rebuilt) == name
            assert tokenize_parameters(extract_parameters(rebuilt)) == tokenize_parameters(parameters)


class TestTokenizeParameters:
    """Argument tokenization with quoting."""

    def test_plain_words(self):
        assert tokenize_parameters("a b") == ["a", "b"]

    def test_double_quoted_span(self):
        assert tokenize_parameters('"a b" c') == ["a b", "c"]

    def test_single_quoted_span(self):
        assert tokenize_parameters("'x y' z") == ["x y", "z"]

    def test_empty_and_whitespace_only(self):
        assert tokenize_parameters("") == []
        assert tokenize_parameters(" \t  ") == []

    def test_mixed_whitespace_separates(self):
        assert tokenize_parameters("  a\tb   c ") == ["a", "b", "c"]

    def test_other_quote_kind_survives_inside_span(self):
        assert tokenize_parameters("\"it's\" 'say \"hi\"'") == ["it's", 'say "hi"']

    def test_empty_quoted_span_is_a_token(self):
        assert tokenize_parameters('"" x') == ["", "x"]

    def test_unterminated_quote_is_skipped(self):
        """A quote without a closing partner produces no token itself."""
        assert tokenize_parameters('a "b') == ["a", "b"]
        assert tokenize_parameters("'") == []

    def test_quote_ends_a_bare_run(self):
        """A bare run stops at a quote; the quoted span follows as its own token."""
        assert tokenize_parameters('a"b c"') == ["a", "b c"]
        assert tokenize_parameters('a"b') == ["a", "b"]

    def test_non_ascii_and_punctuation(self):
        assert tokenize_parameters("résumé.txt ../dir/~x") == ["résumé.txt", "../dir/~x"]

    @pytest.mark.parametrize("text", ["", "a", "a b", '"a b" c', "x 'y", "'p q' \"r\" s t"])
    def test_count_matches_tokens(self, text):
        assert count_parameters(text) == len(tokenize_parameters(text))
