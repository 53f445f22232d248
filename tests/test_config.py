from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from mercury_template.config import TemplateContext, current_date_string, get_author_name


def test_author_name_from_environment():
    assert get_author_name({"GIT_AUTHOR_NAME": "Alice"}) == "Alice"


def test_author_name_set_but_empty():
    assert get_author_name({"GIT_AUTHOR_NAME": ""}) == ""


def test_author_name_missing_defaults_to_empty():
    assert get_author_name({}) == ""


def test_author_name_reads_process_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Bob")
    assert get_author_name() == "Bob"
    monkeypatch.delenv("GIT_AUTHOR_NAME")
    assert get_author_name() == ""


@pytest.mark.parametrize(
    "now, expected",
    [
        (datetime(2026, 10, 18, 17, 24, 0), "Sun Oct 18 17:24:00 2026\n"),
        (datetime(2023, 6, 1, 3, 4, 5), "Thu Jun  1 03:04:05 2023\n"),
        (datetime(1999, 12, 31, 23, 59, 59), "Fri Dec 31 23:59:59 1999\n"),
    ],
)
def test_current_date_string_matches_asctime(now, expected):
    assert current_date_string(now) == expected


def test_current_date_string_converts_aware_times_to_utc():
    plus_two = timezone(timedelta(hours=2))
    now = datetime(2026, 1, 1, 1, 30, 0, tzinfo=plus_two)
    assert current_date_string(now) == "Wed Dec 31 23:30:00 2025\n"


def test_current_date_string_defaults_to_now():
    rendered = current_date_string()
    assert rendered.endswith("\n")
    assert len(rendered) == len("Www Mmm dd hh:mm:ss yyyy\n")


def test_from_environment_collects_values():
    context = TemplateContext.from_environment(
        "demo",
        environ={"GIT_AUTHOR_NAME": "Alice"},
        now=datetime(2026, 10, 18, 17, 24, 0),
    )
    assert context == TemplateContext("demo", "Alice", "Sun Oct 18 17:24:00 2026\n")
    assert context.context() == {
        "module_name": "demo",
        "author": "Alice",
        "date": "Sun Oct 18 17:24:00 2026\n",
    }
