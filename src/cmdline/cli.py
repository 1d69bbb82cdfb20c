"""Demo command built on the cmdline parser."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from cmdline.config import HELP_HINT, Config
from cmdline.errors import ParseError
from cmdline.parser import Parser, parse_args

HELP = """Usage: cmdline-demo [OPTIONS] CMD [ARGS...]

    | Echo the parsed command line.

    Options:
    | -v, --verbose    verbose messages
    | -l, --level=NUM  verbosity level (0 to 3)
    | -f, --file=FILE  show the contents of FILE
    |     --help       this help
    """


@dataclass(slots=True)
class DemoOptions:
    """Parsed demo options."""

    verbose: bool = False
    level: int = 0
    file: str = ""
    cmd: str = ""
    args: list[str] = field(default_factory=list)


def parse_options(argv: list[str], config: Config) -> DemoOptions:
    """Parse argv (executable path first) into DemoOptions.

    Raises ParseError on a syntax error or a missing command.
    """
    opts = DemoOptions()

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

    err = parse_args(argv, handle, config)
    if err is not None:
        raise err
    if not opts.cmd:
        raise ParseError("missing command")
    return opts


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit().

    ``--help`` prints the help text and raises SystemExit(0).
    """
    if argv is None:
        argv = sys.argv

    config = Config(help=HELP)

    try:
        opts = parse_options(argv, config)
    except ParseError as exc:
        config.warn(f"{exc.message}\n\n{HELP_HINT}")
        return 2

    if opts.verbose:
        config.info(f"level {opts.level}")
    config.info(f"command: {opts.cmd}")
    if opts.args:
        config.info("arguments:\n" + "\n".join(opts.args))

    if opts.file:
        try:
            text = Path(opts.file).read_text(encoding="utf-8")
        except OSError as exc:
            config.warn(f"cannot read {opts.file}: {exc.strerror}")
            return 1
        sys.stdout.write(text)

    return 0
