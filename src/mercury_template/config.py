"""Per-invocation values spliced into the generated module."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping

__all__ = [
    "AUTHOR_ENVIRONMENT_VARIABLE",
    "TemplateContext",
    "current_date_string",
    "get_author_name",
]


AUTHOR_ENVIRONMENT_VARIABLE = "GIT_AUTHOR_NAME"


def get_author_name(environ: Mapping[str, str] | None = None) -> str:
    """Return ``GIT_AUTHOR_NAME`` from ``environ``, or ``""`` when it is unset."""

    source = os.environ if environ is None else environ
    return source.get(AUTHOR_ENVIRONMENT_VARIABLE, "")


def current_date_string(now: datetime | None = None) -> str:
    """Render ``now`` in the C ``asctime`` layout, trailing newline included.

    ``now`` defaults to the current UTC time. Aware datetimes are converted to
    UTC first; naive ones are rendered as given.
    """

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return f"{now.ctime()}\n"


@dataclass(slots=True)
class TemplateContext:
    """Values substituted into the module template.

    Attributes
    ----------
    module_name:
        The module name exactly as given on the command line. It names both the
        generated file and the module it declares.
    author:
        Author recorded in the header comment. May be empty.
    date:
        The ``asctime`` style date string, including its trailing newline.
    """

    module_name: str
    author: str = ""
    date: str = ""

    @classmethod
    def from_environment(
        cls,
        module_name: str,
        *,
        environ: Mapping[str, str] | None = None,
        now: datetime | None = None,
    ) -> "TemplateContext":
        """Build a :class:`TemplateContext` from the environment and the clock."""

        return cls(
            module_name=module_name,
            author=get_author_name(environ),
            date=current_date_string(now),
        )

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "module_name": self.module_name,
            "author": self.author,
            "date": self.date,
        }
