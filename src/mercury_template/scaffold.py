"""Writers for the Mercury module skeleton and its Makefile."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from .config import TemplateContext
from .template import render_string

__all__ = ["MAKEFILE_NAME", "MAKEFILE_TEMPLATE", "MODULE_TEMPLATE", "ModuleScaffolder"]


LOGGER = logging.getLogger(__name__)

MAKEFILE_NAME = "Makefile"
WRITE_FAILURE_MESSAGE = "Couldn't open file for writing: "

# ``date`` carries its own newline, so the ``%`` after it starts the next line.
# The usage and foreign_proc lines end in a space.
MODULE_TEMPLATE = """%-------------------------------------------------------------------------------%
% vim: ft=mercury ts=4 sw=4 et
%-------------------------------------------------------------------------------%
%
% File: {{ module_name }}.m
% Author: {{ author }}
% Date: {{ date }}%
% Purpose: Description of the program
%
%-------------------------------------------------------------------------------%

:- module {{ module_name }}.
:- interface.
:- import_module io.
:- pred main(io::di, io::uo) is det.

%-------------------------------------------------------------------------------%

:- implementation.
main(!IO) :-
    % Your code here.

     usage(!IO).

:- pred usage(io::di, io::uo) is erroneous.
usage(!IO) :-
    UsageString = "Usage: {{ module_name }} <args>", 
    die(UsageString, !IO).

:- pred die(string::in, io::di, io::uo) is erroneous.
die(Error, !IO) :-
    io.write_string(io.stderr_stream, Error, !IO),
    die(!IO).

:- pred die(io::di, io::uo) is erroneous.
:- pragma foreign_proc("C",
    die(_IO0::di, _IO::uo),
    [will_not_call_mercury, promise_pure],
    " exit(1); "). 

%-------------------------------------------------------------------------------%
:- end_module {{ module_name }}.
%-------------------------------------------------------------------------------%
"""

MAKEFILE_TEMPLATE = """MC=mmc
MLFLAGS=
ALL: {{ module_name }}

{{ module_name }}: {{ module_name }}.m
\t$(MC) --make $(MLFLAGS) {{ module_name }}

clean:
\t$(MC) --make clean

.PHONY: ALL clean
"""


@dataclass(slots=True)
class ModuleScaffolder:
    """Write a Mercury module skeleton, and optionally a Makefile, into ``directory``.

    Existing files are overwritten. A file that cannot be written is reported
    on standard output and skipped; the writers return ``None`` in that case
    and the written path otherwise.
    """

    directory: Path = field(default_factory=Path)

    def __post_init__(self) -> None:
        self.directory = Path(self.directory)

    def write_module(self, context: TemplateContext) -> Path | None:
        """Write ``<module_name>.m`` rendered from :data:`MODULE_TEMPLATE`."""

        destination = self.directory / f"{context.module_name}.m"
        return self._write(destination, MODULE_TEMPLATE, context.context())

    def write_makefile(self, module_name: str) -> Path | None:
        """Write a ``Makefile`` that builds ``module_name`` with ``mmc --make``."""

        destination = self.directory / MAKEFILE_NAME
        return self._write(destination, MAKEFILE_TEMPLATE, {"module_name": module_name})

    def _write(self, destination: Path, template: str, context: Mapping[str, str]) -> Path | None:
        rendered = render_string(template, context)
        try:
            # Undecodable argv and environment bytes arrive as surrogate escapes;
            # they are written back out unchanged.
            payload = rendered.encode("utf-8", errors="surrogateescape")
            with destination.open("wb") as handle:
                handle.write(payload)
        except (OSError, UnicodeError) as exc:
            LOGGER.debug("write failed path=%s error=%s", destination, exc)
            print(f"{WRITE_FAILURE_MESSAGE}{getattr(exc, 'strerror', None) or exc}")
            return None

        LOGGER.debug("wrote path=%s length=%s", destination, len(rendered))
        return destination
