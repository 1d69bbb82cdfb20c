"""Test argument classification into option name and value."""

from cmdline.tokens import UNKNOWN_OPTION_NAME, Token, classify, positional


class TestPositional:
    def test_plain_word(self):
        assert classify("cmd") == Token("", "cmd")

    def test_keeps_equals(self):
        assert classify("a=b") == Token("", "a=b")

    def test_empty_string(self):
        tok = classify("")
        assert tok.name == ""
        assert tok.value == ""
        assert not tok.is_option

    def test_positional_keeps_leading_dashes(self):
        assert positional("--file=file.txt") == Token("", "--file=file.txt")
        assert positional("-") == Token("", "-")
        assert positional("--") == Token("", "--")


class TestOptions:
    def test_long_option(self):
        tok = classify("--verbose")
        assert tok == Token("verbose", "")
        assert tok.is_option

    def test_short_option(self):
        assert classify("-v") == Token("v", "")

    def test_inline_value(self):
        assert classify("--level=2") == Token("level", "2")

    def test_splits_on_first_equals(self):
        assert classify("--define=x=y") == Token("define", "x=y")

    def test_empty_inline_value(self):
        assert classify("--file=") == Token("file", "")

    def test_any_number_of_dashes(self):
        assert classify("---odd") == Token("odd", "")

    def test_negative_number_is_option(self):
        assert classify("-1") == Token("1", "")


class TestDashOnly:
    def test_single_dash(self):
        assert classify("-").name == UNKNOWN_OPTION_NAME

    def test_double_dash(self):
        assert classify("--").name == UNKNOWN_OPTION_NAME

    def test_dashes_with_value(self):
        assert classify("--=x") == Token(UNKNOWN_OPTION_NAME, "x")
