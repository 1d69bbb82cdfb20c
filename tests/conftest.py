"""Shared test fixtures and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from cmdline.config import Config, return_error
from cmdline.errors import ParseError
from cmdline.parser import Parser, parse_args


@dataclass
class Opts:
    verbose: bool = False
    help: str | None = None
    file: str = ""
    level: int = 0
    cmd: str = ""
    args: list[str] = field(default_factory=list)


@pytest.fixture
def config() -> Config:
    """Return a Config that records errors and help instead of exiting."""
    return Config(help="Usage: cmdline [OPTS]", on_error=return_error)


@pytest.fixture
def parse_cmdline(config: Config):
    """Return a helper that parses a whitespace-separated command line.

    The handler accepts -v/--verbose, -f/--file, -l/--level (0..3), a command
    at index 0 and at most two further arguments.
    """

    def _parse(line: str) -> tuple[Opts, ParseError | None]:
        opts = Opts()

        def on_help(cfg: Config, text: str) -> None:
            opts.help = text

        config.on_help = on_help

        def handle(p: Parser) -> None:
            if p.is_opt("verbose", "v"):
                opts.verbose = True
            elif p.is_str_opt("file", "f"):
                opts.file = p.str_val
            elif p.is_int_opt("level", "l", 0, 3):
                opts.level = p.int_val
            elif p.is_arg_n(0):
                opts.cmd = p.arg()
            elif p.is_arg() and p.arg_idx < 3:
                opts.args.append(p.arg())

        err = parse_args(line.split(), handle, config)
        return opts, err

    return _parse


def assert_error(err: ParseError | None, message: str) -> None:
    """Assert that err is a ParseError with exactly the given message."""
    assert err is not None, f"Expected error {message!r}, got success"
    assert isinstance(err, ParseError), f"Expected ParseError, got {type(err).__name__}"
    assert err.message == message, f"Expected error {message!r}, got {err.message!r}"
