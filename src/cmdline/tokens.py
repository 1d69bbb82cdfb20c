"""Token classification: option tokens versus positional values."""

from __future__ import annotations

from dataclasses import dataclass

HELP_FLAG = "--help"
END_OF_OPTIONS = "--"

# Never a valid option name, so a dash-only token always reports as unknown.
UNKNOWN_OPTION_NAME = "???"


@dataclass(frozen=True, slots=True)
class Token:
    """A classified argument: option name (empty for positionals) and value."""

    name: str
    value: str

    @property
    def is_option(self) -> bool:
        return self.name != ""


def classify(arg: str) -> Token:
    """Split a raw argument into option name and value.

    ``--level=2`` gives ``Token("level", "2")``, ``-v`` gives ``Token("v", "")``
    and ``cmd`` gives ``Token("", "cmd")``.
    """
    if not arg.startswith("-"):
        return Token("", arg)

    name, _, value = arg.lstrip("-").partition("=")
    if not name:
        name = UNKNOWN_OPTION_NAME
    return Token(name, value)


def positional(arg: str) -> Token:
    """Return arg as a positional value, leading dashes included."""
    return Token("", arg)
