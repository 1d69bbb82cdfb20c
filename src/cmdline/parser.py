"""Callback-driven command-line parser.

The caller passes a function that is invoked once per argument. It tests the
current argument with an ordered chain of queries, the first match wins::

    def handle(p: Parser) -> None:
        if p.is_opt("verbose", "v"):
            opts.verbose = True
        elif p.is_str_opt("file", "f"):
            opts.file = p.str_val
        elif p.is_int_opt("level", "l", 0, 3):
            opts.level = p.int_val
        elif p.is_arg_n(0):
            opts.cmd = p.arg()
        elif p.is_arg():
            opts.args.append(p.arg())

    err = parse_args(sys.argv, handle, config)

Every argument must be claimed by one of the queries, otherwise the parse
fails with ``unknown option`` or ``too many arguments``.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from pathlib import PurePath

from cmdline.config import Config, syntax_error
from cmdline.errors import ParseError
from cmdline.messages import format_help
from cmdline.tokens import END_OF_OPTIONS, HELP_FLAG, classify, positional

_INT_RE = re.compile(r"[+-]?[0-9]+")


class Parser:
    """Per-parse state, queried by the callback for the current argument."""

    def __init__(self, args: list[str], config: Config) -> None:
        self._rest = list(args)
        self._config = config
        self._arg_idx = 0
        self._only_args = False
        self._opt = ""
        self._str_val = ""
        self._int_val = 0
        self._grabbed = False
        self._error: ParseError | None = None

    # ------------------------------------------------------------------
    # Driving the parse
    # ------------------------------------------------------------------

    def run(self, fn: Callable[[Parser], None]) -> ParseError | None:
        """Feed every remaining argument to fn; return the first error."""
        while self._rest and self._error is None:
            arg = self._pop()

            if self._only_args:
                token = positional(arg)
            elif arg == HELP_FLAG:
                self._config.on_help(self._config, format_help(self._config.help))
                return None
            elif arg == END_OF_OPTIONS:
                if not self._rest:
                    return self._error
                self._only_args = True
                token = positional(self._pop())
            else:
                token = classify(arg)

            self._opt = token.name
            self._str_val = token.value
            self._grabbed = False

            fn(self)

            if self._error is not None:
                return self._error

            if not self._grabbed:
                if self._opt:
                    return self.error(f"unknown option: --{self._opt}")
                return self.error("too many arguments")

        return self._error

    def _pop(self) -> str:
        return self._rest.pop(0)

    def error(self, message: str) -> ParseError:
        """Record a parse error and pass it to ``config.on_error``.

        Only the first error is kept; the parse stops after the current
        callback returns.
        """
        if self._error is None:
            self._error = ParseError(message)
            self._config.on_error(self._config, message)
        return self._error

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    def _is_named(self, long: str, short: str) -> bool:
        if self._error is not None or not self._opt:
            return False
        if self._opt not in (long, short):
            return False
        self._opt = long
        return True

    def is_opt(self, long: str, short: str = "") -> bool:
        """Match a flag that takes no value."""
        if not self._is_named(long, short):
            return False

        if self._str_val:
            self.error(f"option forbids a value: --{self._opt}")
            return False

        self._grabbed = True
        return True

    def is_str_opt(self, long: str, short: str = "") -> bool:
        """Match an option with a value, given inline (``--file=x``) or as the next argument."""
        if not self._is_named(long, short):
            return False

        if self._str_val:
            self._grabbed = True
            return True

        if self._rest:
            token = classify(self._pop())
            if not token.is_option and token.value:
                self._str_val = token.value
                self._grabbed = True
                return True

        self.error(f"option requires a value: --{self._opt}")
        return False

    def is_int_opt(self, long: str, short: str, min: int, max: int) -> bool:
        """Match an option with a base-10 integer value in ``[min, max]``."""
        if not self.is_str_opt(long, short):
            return False

        if not _INT_RE.fullmatch(self._str_val):
            self.error(f"invalid number: {self._str_val} (option --{self._opt})")
            return False

        value = int(self._str_val)
        if value < min:
            self.error(f"number must be >= {min}: {value} (option --{self._opt})")
            return False
        if value > max:
            self.error(f"number must be <= {max}: {value} (option --{self._opt})")
            return False

        self._int_val = value
        return True

    @property
    def str_val(self) -> str:
        """Value of the last matched string option (or the current argument)."""
        return self._str_val

    @property
    def int_val(self) -> int:
        """Value of the last matched integer option."""
        return self._int_val

    # ------------------------------------------------------------------
    # Positional arguments
    # ------------------------------------------------------------------

    def is_arg(self) -> bool:
        """True if the current argument is a non-empty positional value."""
        if self._error is not None:
            return False
        return self._opt == "" and self._str_val != ""

    @property
    def arg_idx(self) -> int:
        """Number of positional arguments claimed so far."""
        return self._arg_idx

    def is_arg_n(self, idx: int) -> bool:
        """True if the current argument is the positional at index idx (0-based)."""
        if self._arg_idx != idx:
            return False
        return self.is_arg()

    def arg(self) -> str:
        """Claim the current positional argument and return it."""
        if not self._grabbed:
            self._grabbed = True
            self._arg_idx += 1
        return self._str_val


def parse_args(
    argv: list[str],
    fn: Callable[[Parser], None],
    config: Config | None = None,
) -> ParseError | None:
    """Parse argv (executable path first) with fn; return the first error, if any.

    Sets ``config.program`` from ``argv[0]`` when it is still empty.
    """
    if config is None:
        config = Config()

    args = list(argv)
    if args:
        if not config.program:
            config.program = PurePath(args[0]).name
        args = args[1:]

    return Parser(args, config).run(fn)


def parse(fn: Callable[[Parser], None], config: Config | None = None) -> None:
    """Parse ``sys.argv``; on error report it and exit with status 1."""
    if config is None:
        config = Config()

    err = parse_args(sys.argv, fn, config)
    if err is not None:
        syntax_error(config, err.message)
