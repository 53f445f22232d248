from __future__ import annotations

from .cli import PROGRAM_NAME, main

raise SystemExit(main(prog=PROGRAM_NAME))
