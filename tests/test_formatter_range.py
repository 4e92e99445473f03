"""Tests for range formatting and the same-day merge."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from apdates.formatter import format_date, format_range, merge_same_day
from apdates.options import DEFAULT, Century, Composite, Decade, parse_format_string
from apdates.utils.errors import InvalidRangeError


def at(hour: int, minute: int = 0, *, day: int = 15) -> datetime:
    return datetime(1987, 6, day, hour, minute)


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        (at(15), at(16, 30), "June 15, 1987 3-4:30 p.m."),
        (at(9), at(11, 30), "June 15, 1987 9-11:30 a.m."),
        (at(10), at(15), "June 15, 1987 10 a.m.-3 p.m."),
        (at(12), at(15), "June 15, 1987 noon-3 p.m."),
        (at(10), at(12), "June 15, 1987 10 a.m.-noon"),
        (at(0), at(1), "June 15, 1987 midnight-1 a.m."),
    ],
)
def test_same_day_merge(start: datetime, end: datetime, expected: str) -> None:
    assert format_range(start, end, DEFAULT) == expected


def test_same_day_merge_keeps_other_parts() -> None:
    opts = parse_format_string("wmdt")
    assert format_range(at(15), at(16, 30), opts) == "Monday June 15 3-4:30 p.m."


def test_same_day_merge_time_only() -> None:
    assert format_range(at(15), at(16, 30), Composite(time=True)) == "3-4:30 p.m."
    assert merge_same_day(at(12), at(13), Composite(time=True)) == "noon-1 p.m."


def test_identical_rendering_collapses() -> None:
    assert format_range(at(15), at(15), DEFAULT) == format_date(at(15), DEFAULT)
    later = at(15) + timedelta(seconds=30)
    assert format_range(at(15), later, DEFAULT) == "June 15, 1987 3 p.m."
    assert format_range(at(9), at(17), parse_format_string("ymd")) == "June 15, 1987"


@pytest.mark.parametrize("spec", ["", "c", "x", "l", "ymd", "wt", "m"])
def test_degenerate_range_equals_single_format(spec: str) -> None:
    opts = parse_format_string(spec)
    assert format_range(at(8), at(8), opts) == format_date(at(8), opts)


def test_different_days() -> None:
    ymd = parse_format_string("ymd")
    assert format_range(at(15), at(16, day=16), ymd) == "June 15, 1987 to June 16, 1987"
    assert (
        format_range(at(15), at(16, 30, day=16), DEFAULT)
        == "June 15, 1987 3 p.m. to June 16, 1987 4:30 p.m."
    )


def test_decade_ranges() -> None:
    assert format_range(date(1981, 1, 1), date(1987, 1, 1), Decade()) == "'80s"
    assert format_range(date(1979, 1, 1), date(1987, 1, 1), Decade()) == "'70s to '80s"
    assert format_range(date(1899, 1, 1), date(1987, 1, 1), Century()) == "1800s to 1900s"


def test_end_before_start_raises() -> None:
    with pytest.raises(InvalidRangeError):
        format_range(at(16), at(15), DEFAULT)
    with pytest.raises(ValueError):
        format_range(date(1987, 6, 16), date(1987, 6, 15), Century())


def test_aware_values_compare_by_instant() -> None:
    utc = timezone.utc
    start = datetime(1987, 6, 15, 15, tzinfo=utc)
    end = datetime(1987, 6, 15, 16, 30, tzinfo=utc)
    assert format_range(start, end, DEFAULT) == "June 15, 1987 3-4:30 p.m."
