"""Command line option table and parser."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Iterable, NoReturn, Sequence

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "DEFAULT_OPTIONS",
    "OPTION_TABLE",
    "OptionError",
    "OptionSpec",
    "Options",
    "ParsedArguments",
    "build_parser",
    "parse_args",
]


LOGGER = logging.getLogger(__name__)


class OptionError(ValueError):
    """Raised when the command line contains an option that cannot be honoured."""


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """A single boolean flag reachable by a short character and a long name."""

    field: str
    short: str
    long: str
    default: bool
    help: str


OPTION_TABLE: tuple[OptionSpec, ...] = (
    OptionSpec("help", "h", "help", False, "display this message"),
    OptionSpec("makefile", "m", "makefile", False, "create a makefile"),
)

SHORT_OPTIONS = {spec.short: spec for spec in OPTION_TABLE}
LONG_OPTIONS = {spec.long: spec for spec in OPTION_TABLE}
DEFAULT_OPTIONS = {spec.field: spec.default for spec in OPTION_TABLE}


class Options(BaseModel):
    """Flags selected on the command line."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    makefile: bool = Field(DEFAULT_OPTIONS["makefile"], description="Also write a Makefile.")
    help: bool = Field(DEFAULT_OPTIONS["help"], description="Show the usage text and exit.")


class ParsedArguments(BaseModel):
    """Options plus the non-flag tokens in the order they were given."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    options: Options = Field(default_factory=Options)
    positionals: tuple[str, ...] = Field(default=(), description="Non-flag tokens in command line order.")


class _OptionParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise OptionError(message)


def build_parser() -> argparse.ArgumentParser:
    """Return a parser for the flag tokens described by :data:`OPTION_TABLE`."""

    parser = _OptionParser(add_help=False, allow_abbrev=False)
    for spec in OPTION_TABLE:
        parser.add_argument(
            f"-{spec.short}",
            f"--{spec.long}",
            dest=spec.field,
            action="store_true",
            default=spec.default,
            help=spec.help,
        )
    return parser


def _check_known(token: str) -> None:
    if token.startswith("--"):
        name, sep, _ = token[2:].partition("=")
        if name not in LONG_OPTIONS:
            raise OptionError(f"unrecognized option: --{name}")
        if sep:
            raise OptionError(f"option does not take a value: --{name}")
        return

    for char in token[1:]:
        if char not in SHORT_OPTIONS:
            raise OptionError(f"unrecognized option: -{char}")


def _split_tokens(args: Iterable[str]) -> tuple[list[str], list[str]]:
    flags: list[str] = []
    positionals: list[str] = []
    tokens = iter(args)
    for token in tokens:
        if token == "--":
            positionals.extend(tokens)
            break
        if token == "-" or not token.startswith("-"):
            positionals.append(token)
            continue
        _check_known(token)
        flags.append(token)
    return flags, positionals


def parse_args(args: Sequence[str]) -> ParsedArguments:
    """Parse ``args`` (without the program name) in a single left-to-right pass.

    Flags and positionals may be intermixed and short flags may be clustered
    (``-mh``). A lone ``--`` ends option processing.

    Raises
    ------
    OptionError
        If a flag-shaped token names no known option, or a value is attached
        to one of the boolean flags.
    """

    flags, positionals = _split_tokens(args)
    namespace = build_parser().parse_args(flags)
    options = Options(**{spec.field: getattr(namespace, spec.field) for spec in OPTION_TABLE})
    LOGGER.debug(
        "parsed options makefile=%s help=%s positionals=%r",
        options.makefile,
        options.help,
        positionals,
    )
    return ParsedArguments(options=options, positionals=tuple(positionals))
