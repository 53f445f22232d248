"""Placeholder substitution for the built-in file templates."""

from __future__ import annotations

import re
from typing import Mapping

__all__ = [
    "TemplateRenderingError",
    "render_string",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<key>[A-Za-z_][A-Za-z0-9_]*)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when a placeholder has no value in the context."""


def render_string(template: str, context: Mapping[str, str]) -> str:
    """Replace every ``{{ key }}`` in ``template`` with ``context[key]``.

    Substituted values are inserted verbatim and never rescanned, so values
    that themselves contain braces are safe.
    """

    def substitute(match: re.Match[str]) -> str:
        key = match.group("key")
        try:
            return str(context[key])
        except KeyError:
            raise TemplateRenderingError(f"missing value for '{key}'") from None

    return _PLACEHOLDER_PATTERN.sub(substitute, template)
