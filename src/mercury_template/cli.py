"""Command line interface for generating Mercury module skeletons."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn, Sequence

from .config import TemplateContext
from .options import OPTION_TABLE, OptionError, parse_args
from .scaffold import ModuleScaffolder

LOGGER = logging.getLogger(__name__)

PROGRAM_NAME = "mercury_template"

USAGE = (
    f"Usage: {PROGRAM_NAME} [-mh] <module_name>\n"
    + "".join(f" -{spec.short}, --{spec.long:<13}{spec.help}\n" for spec in OPTION_TABLE)
    + "\n"
)


def die(message: str) -> NoReturn:
    """Write ``message`` verbatim to standard error and exit with status 1."""

    sys.stderr.write(message)
    sys.stderr.flush()
    raise SystemExit(1)


def usage() -> NoReturn:
    die(USAGE)


def _program_name() -> str:
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).name
    return PROGRAM_NAME


def main(argv: Sequence[str] | None = None, *, prog: str | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    program = prog or _program_name()

    try:
        parsed = parse_args(argv)
    except OptionError as exc:
        sys.stderr.write(f"{program}: {exc}\n")
        usage()

    if parsed.options.help or len(parsed.positionals) != 1:
        usage()

    (module_name,) = parsed.positionals
    context = TemplateContext.from_environment(module_name)
    LOGGER.debug("generating module=%s author=%r", module_name, context.author)

    scaffolder = ModuleScaffolder()
    scaffolder.write_module(context)
    if parsed.options.makefile:
        scaffolder.write_makefile(module_name)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
