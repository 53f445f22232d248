"""Generate boilerplate Mercury modules.

The package renders a ready-to-edit Mercury source file, with a header comment,
a ``main`` entry point and ``usage``/``die`` helpers, and optionally a Makefile
driving ``mmc --make``. Everything is usable programmatically as well as through
the ``mercury_template`` command.
"""

from __future__ import annotations

from .config import TemplateContext, current_date_string, get_author_name
from .options import OptionError, Options, ParsedArguments, parse_args
from .scaffold import ModuleScaffolder
from .template import TemplateRenderingError, render_string

__all__ = [
    "ModuleScaffolder",
    "OptionError",
    "Options",
    "ParsedArguments",
    "TemplateContext",
    "TemplateRenderingError",
    "current_date_string",
    "get_author_name",
    "parse_args",
    "render_string",
]

__version__ = "0.1.0"
