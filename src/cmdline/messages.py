"""Help-text normalization and program-prefixed message rendering."""

from __future__ import annotations

from collections.abc import Callable
from typing import TextIO

LineFormatter = Callable[[str], str]


def dont_format(line: str) -> str:
    """Identity line formatter, the default for warnings and info messages."""
    return line


def format_help(text: str) -> str:
    """Normalize a multi-line help string written inside indented source.

    Algorithm:
    1. Split into lines.
    2. Strip leading and trailing whitespace from each line.
    3. If a line starts with ``|``, replace that character with a single space.
    4. Drop trailing blank lines.
    5. Rejoin with newline.

    The ``|`` marker keeps deliberate indentation that step 2 would remove.
    """
    lines = []
    for line in text.split("\n"):
        line = line.strip()
        if line.startswith("|"):
            line = " " + line[1:]
        lines.append(line)

    while lines and lines[-1] == "":
        lines.pop()

    return "\n".join(lines)


def format_message(program: str, message: str, format_line: LineFormatter = dont_format) -> str:
    """Render ``"<program>: <message>"``, aligning continuation lines under the text."""
    first, *rest = message.split("\n")
    lines = [format_line(f"{program}: {first}")]
    indent = " " * (len(program) + 2)
    lines.extend(format_line(indent + line) for line in rest)
    return "\n".join(lines)


def program_message(
    stream: TextIO,
    program: str,
    message: str,
    format_line: LineFormatter = dont_format,
) -> None:
    print(format_message(program, message, format_line), file=stream)
