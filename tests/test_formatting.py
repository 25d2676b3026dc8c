from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta

import pytest

from datasync.formatting import format_bytes, format_mod_time


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0.00 KB"),
        (1536, "1.50 KB"),
        (1024**2, "1.00 MB"),
        (5 * 1024**3, "5.00 GB"),
        (3 * 1024**4, "3.00 TB"),
        (2 * 1024**5, "2.00 PB"),
    ],
)
def test_format_bytes(size, expected) -> None:
    assert format_bytes(size) == expected


@pytest.mark.parametrize(
    ("delta", "age"),
    [
        (timedelta(0), "now"),
        (timedelta(seconds=1), "1 second ago"),
        (timedelta(minutes=5), "5 minutes ago"),
        (timedelta(hours=3, minutes=59), "3 hours ago"),
        (timedelta(days=1), "1 day ago"),
        (timedelta(days=400), "1 year ago"),
    ],
)
def test_format_mod_time_relative_age(delta, age) -> None:
    mod_time = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    text = format_mod_time(mod_time, now=mod_time + delta)

    assert re.fullmatch(
        r"\d{4}-\d{2}-\d{2} [ \d]\d:\d{2}\w+ \(" + re.escape(age) + r"\)", text
    )


def test_format_mod_time_treats_naive_as_utc() -> None:
    naive = datetime(2024, 1, 1, 12, 0)
    aware = naive.replace(tzinfo=UTC)
    now = aware + timedelta(hours=2)

    assert format_mod_time(naive, now=now) == format_mod_time(aware, now=now)
