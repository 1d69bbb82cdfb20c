"""Callback-driven command-line argument and option parsing."""

from __future__ import annotations

from cmdline.config import (
    HELP_HINT,
    Config,
    print_help,
    return_error,
    runtime_error,
    syntax_error,
)
from cmdline.errors import ParseError
from cmdline.messages import dont_format, format_help, format_message
from cmdline.parser import Parser, parse, parse_args
from cmdline.tokens import Token, classify

__version__ = "0.1.0"

__all__ = [
    "HELP_HINT",
    "Config",
    "ParseError",
    "Parser",
    "Token",
    "classify",
    "dont_format",
    "format_help",
    "format_message",
    "parse",
    "parse_args",
    "print_help",
    "return_error",
    "runtime_error",
    "syntax_error",
]
