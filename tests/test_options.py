from __future__ import annotations

import pytest

from apdates.options import (
    DEFAULT,
    OPTION_NAMES,
    RESET,
    Century,
    Composite,
    Decade,
    LongDecade,
    as_flags,
    is_enabled,
    parse_format_string,
    set_option,
    to_format_string,
)
from apdates.utils.errors import UnknownOptionError

# ---------------------------------------------------------------------------
# Exclusivity rules
# ---------------------------------------------------------------------------


def test_exclusive_flags_reset_everything() -> None:
    opts = set_option(DEFAULT, "century")
    assert opts == Century()
    assert as_flags(opts) == {name: name == "century" for name in OPTION_NAMES}


def test_century_and_decade_are_mutually_exclusive() -> None:
    opts = set_option(set_option(RESET, "century"), "decade")
    assert is_enabled(opts, "decade")
    assert not is_enabled(opts, "century")

    opts = set_option(opts, "century")
    assert is_enabled(opts, "century")
    assert not is_enabled(opts, "decade")


def test_composite_flag_leaves_exclusive_mode() -> None:
    opts = set_option(LongDecade(), "year")
    assert opts == Composite(year=True)
    assert not is_enabled(opts, "longdecade")


def test_composite_flags_accumulate() -> None:
    opts = set_option(set_option(RESET, "month"), "dayofweek")
    assert opts == Composite(month=True, dayofweek=True)


def test_disable_active_exclusive_flag() -> None:
    assert set_option(Decade(), "decade", False) == RESET


def test_disable_inactive_flags_is_noop() -> None:
    assert set_option(Decade(), "century", False) == Decade()
    assert set_option(Decade(), "year", False) == Decade()
    assert set_option(DEFAULT, "century", False) == DEFAULT


def test_disable_composite_flag() -> None:
    opts = set_option(DEFAULT, "time", False)
    assert opts == Composite(year=True, month=True, day=True)


def test_unknown_option_name() -> None:
    with pytest.raises(UnknownOptionError):
        set_option(DEFAULT, "fortnight")
    with pytest.raises(ValueError):
        is_enabled(DEFAULT, "fortnight")


def test_options_are_immutable() -> None:
    opts = Composite(year=True)
    set_option(opts, "month")
    assert opts == Composite(year=True)
    with pytest.raises(AttributeError):
        opts.year = False  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Format-string mini-language
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("spec", ["", None])
def test_empty_spec_selects_default(spec: str | None) -> None:
    assert parse_format_string(spec) == DEFAULT
    assert parse_format_string(spec) == parse_format_string("ymdt")


def test_spec_is_case_insensitive() -> None:
    assert parse_format_string("YmDt") == DEFAULT
    assert parse_format_string("W") == Composite(dayofweek=True)


def test_unknown_characters_are_skipped() -> None:
    assert parse_format_string("y-m?d") == Composite(year=True, month=True, day=True)
    assert parse_format_string("zq") == RESET


def test_exclusive_code_stops_scan() -> None:
    assert parse_format_string("cy") == Century()
    assert parse_format_string("xl") == Decade()
    assert parse_format_string("ymdl") == LongDecade()


def test_to_format_string() -> None:
    assert to_format_string(DEFAULT) == "ymdt"
    assert to_format_string(Composite(dayofweek=True, time=True)) == "wt"
    assert to_format_string(Century()) == "c"
    assert to_format_string(RESET) == ""
