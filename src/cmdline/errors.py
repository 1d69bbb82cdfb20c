"""Error type for command-line parse failures."""

from __future__ import annotations


class ParseError(Exception):
    """The first error hit while parsing a command line.

    The message is already worded for the user, e.g. ``unknown option: --foo``.
    It carries no program name or help hint; those are added when shown.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
