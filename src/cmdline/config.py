"""Parser configuration and the default error/help handlers."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn

from cmdline.messages import LineFormatter, dont_format, program_message

HELP_HINT = "Use --help for more information."

Handler = Callable[["Config", str], None]


def return_error(config: Config, message: str) -> None:
    """Error handler that does nothing, leaving the error to be returned by the parse."""


def syntax_error(config: Config, message: str) -> NoReturn:
    """Report a usage error with a hint to consult --help, then exit with status 1."""
    config.warn(f"{message}\n\n{HELP_HINT}")
    raise SystemExit(1)


def runtime_error(config: Config, message: str) -> NoReturn:
    """Report an error, then exit with status 1."""
    config.warn(message)
    raise SystemExit(1)


def print_help(config: Config, text: str) -> NoReturn:
    """Print already formatted help text to stdout, then exit with status 0."""
    print(text)
    raise SystemExit(0)


@dataclass(slots=True)
class Config:
    """Settings shared by a parse and the messages around it.

    Callers may override any field before parsing. ``program`` is filled in
    from ``argv[0]`` by the parse when left empty.
    """

    program: str = ""
    help: str = ""
    format_warning: LineFormatter = dont_format
    format_info: LineFormatter = dont_format
    on_error: Handler = return_error
    on_help: Handler = print_help

    def warn(self, message: str) -> None:
        """Write ``"<program>: <message>"`` to stderr."""
        program_message(sys.stderr, self.program, message, self.format_warning)

    def info(self, message: str) -> None:
        """Write ``"<program>: <message>"`` to stdout."""
        program_message(sys.stdout, self.program, message, self.format_info)

    def syntax_error(self, message: str) -> NoReturn:
        syntax_error(self, message)

    def runtime_error(self, message: str) -> NoReturn:
        runtime_error(self, message)
