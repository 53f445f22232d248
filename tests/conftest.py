from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

FIXED_DATE = "Sun Oct  4 09:05:07 2026\n"


@pytest.fixture()
def fixed_clock(monkeypatch: pytest.MonkeyPatch) -> str:
    """Pin the date written into generated modules."""

    monkeypatch.setattr(
        "mercury_template.config.current_date_string",
        lambda now=None: FIXED_DATE,
    )
    return FIXED_DATE


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty current directory."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GIT_AUTHOR_NAME", raising=False)
    return tmp_path
