"""AP style rendering of dates and date ranges.

The module is split in two layers:

* pure functions (:func:`format_date`, :func:`format_range`,
  :func:`merge_same_day` and the ``render_*`` unit renderers) taking an
  explicit :data:`~apdates.options.FormatOptions` value;
* :class:`ApFormatter`, a builder that accumulates options through fluent
  setters and forwards to the pure functions.

Examples (default options, i.e. ``"ymdt"``)::

    1987-06-15 00:00              -> "June 15, 1987 midnight"
    1987-06-15 15:00 to 16:30     -> "June 15, 1987 3-4:30 p.m."
    1987-06-15 12:00 to 15:00     -> "June 15, 1987 noon-3 p.m."

Values are ``datetime.datetime`` instances; a plain ``datetime.date`` is read
as midnight of that day.  Values are never modified and no timezone
conversion takes place.
"""

from __future__ import annotations

import threading
from datetime import date, datetime, time
from typing import TYPE_CHECKING, Final

from .options import (
    DEFAULT_FORMAT,
    RESET,
    Century,
    Composite,
    Decade,
    FormatOptions,
    LongDecade,
    as_flags,
    is_enabled,
    parse_format_string,
    set_option,
)
from .utils.errors import InvalidRangeError
from .utils.logging import get_logger

if TYPE_CHECKING:
    from .config import ConfigModel

__all__ = [
    "ApFormatter",
    "format_date",
    "format_range",
    "merge_same_day",
    "render_century",
    "render_decade",
    "render_dayofweek",
    "render_month",
    "render_day",
    "render_year",
    "render_time",
]

log = get_logger(__name__)

MONTH_NAMES: Final[tuple[str, ...]] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

WEEKDAY_NAMES: Final[tuple[str, ...]] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# March through July are spelled out even when a day follows.
_SPELLED_OUT_MONTHS: Final = range(3, 8)

# Bare times that carry no meridiem suffix.
_NAMED_TIMES: Final = frozenset({"noon", "midnight"})


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time())


# ---------------------------------------------------------------------------
# Unit renderers
# ---------------------------------------------------------------------------


def render_century(value: date) -> str:
    """Return the century, e.g. ``1900s`` for 1987."""

    return f"{value.year // 100}00s"


def render_decade(value: date, *, long: bool = False) -> str:
    """Return the decade as ``'80s`` or, with ``long``, ``1980s``."""

    if long:
        return f"{value.year // 10}0s"
    return f"'{value.year % 100 // 10}0s"


def render_dayofweek(value: date, options: FormatOptions) -> str:
    if not is_enabled(options, "dayofweek"):
        return ""
    return WEEKDAY_NAMES[value.weekday()]


def render_month(value: date, options: FormatOptions) -> str:
    """Return the month name, abbreviated outside March-July when a day follows."""

    if not is_enabled(options, "month"):
        return ""
    name = MONTH_NAMES[value.month - 1]
    if not is_enabled(options, "day") or value.month in _SPELLED_OUT_MONTHS:
        return name
    return f"{name[:3]}."


def render_day(value: date, options: FormatOptions) -> str:
    if not is_enabled(options, "day"):
        return ""
    if is_enabled(options, "year"):
        return f"{value.day},"
    return str(value.day)


def render_year(value: date, options: FormatOptions) -> str:
    if not is_enabled(options, "year"):
        return ""
    return str(value.year)


def render_time(value: date, options: FormatOptions) -> str:
    """Return the 12-hour time such as ``3 p.m.``, ``4:30 a.m.``, ``noon``."""

    if not is_enabled(options, "time"):
        return ""
    moment = _as_datetime(value)
    hour = moment.hour % 12 or 12
    meridiem = "a.m." if moment.hour < 12 else "p.m."
    if hour == 12 and moment.minute == 0:
        return "midnight" if meridiem == "a.m." else "noon"
    minutes = f":{moment.minute:02d}" if moment.minute else ""
    return f"{hour}{minutes} {meridiem}"


# ---------------------------------------------------------------------------
# Single dates and ranges
# ---------------------------------------------------------------------------


def _render_composite(value: date, options: FormatOptions) -> str:
    parts = (
        render_dayofweek(value, options),
        render_month(value, options),
        render_day(value, options),
        render_year(value, options),
        render_time(value, options),
    )
    return " ".join(part for part in parts if part)


def format_date(value: date, options: FormatOptions) -> str:
    """Render ``value`` according to ``options``.

    Exclusive modes take priority in the order century, decade, long decade.
    Otherwise the enabled composite parts are joined with single spaces; an
    all-false configuration yields ``""``.
    """

    if isinstance(options, Century):
        return render_century(value)
    if isinstance(options, Decade):
        return render_decade(value)
    if isinstance(options, LongDecade):
        return render_decade(value, long=True)
    return _render_composite(value, options)


def merge_same_day(start: date, end: date, options: FormatOptions) -> str:
    """Collapse a range within one calendar day, e.g. ``June 15, 1987 3-4:30 p.m.``.

    The meridiem is stated once when both times share it.  ``noon`` and
    ``midnight`` are joined as they are.
    """

    bare = Composite(time=True)
    start_time = render_time(start, bare)
    end_time = render_time(end, bare)

    if start_time in _NAMED_TIMES or end_time in _NAMED_TIMES:
        segment = f"{start_time}-{end_time}"
    else:
        start_number, start_meridiem = start_time.split(" ")
        _, end_meridiem = end_time.split(" ")
        if start_meridiem == end_meridiem:
            segment = f"{start_number}-{end_time}"
        else:
            segment = f"{start_time}-{end_time}"

    date_only = format_date(start, set_option(options, "time", False))
    if not date_only:
        return segment
    return f"{date_only} {segment}"


def format_range(start: date, end: date, options: FormatOptions) -> str:
    """Render the range from ``start`` to ``end``.

    Raises
    ------
    InvalidRangeError
        If ``end`` is chronologically before ``start``.
    """

    start_dt = _as_datetime(start)
    end_dt = _as_datetime(end)
    if end_dt < start_dt:
        raise InvalidRangeError("The end date cannot be before the start date.")

    start_text = format_date(start_dt, options)
    end_text = format_date(end_dt, options)
    if start_text == end_text:
        log.debug("range renders as a single value: %s", start_text)
        return start_text

    if is_enabled(options, "time") and start_dt.date() == end_dt.date():
        log.debug("merging same-day range on %s", start_dt.date().isoformat())
        return merge_same_day(start_dt, end_dt, options)
    return f"{start_text} to {end_text}"


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


class ApFormatter:
    """Configurable AP date formatter.

    Setters return the formatter so that calls can be chained::

        ApFormatter("").reset().month().day().format(value)

    The current options are an immutable value available as :attr:`options`.
    Calls on one instance are serialized with a lock, so a formatter can be
    shared between threads.
    """

    def __init__(self, format: str | None = None) -> None:
        """Initialize with ``format``; ``None`` or ``""`` selects ``ymdt``."""

        self._lock = threading.RLock()
        self._options: FormatOptions = parse_format_string(format)

    @classmethod
    def from_config(cls, cfg: ConfigModel) -> "ApFormatter":
        """Create a formatter using the format string configured in ``cfg``."""

        return cls(cfg.formatter.format)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(options={self._options!r})"

    # -- option state -----------------------------------------------------

    @property
    def options(self) -> FormatOptions:
        return self._options

    @property
    def flags(self) -> dict[str, bool]:
        """Return the eight option flags keyed by name."""

        return as_flags(self._options)

    def is_enabled(self, name: str) -> bool:
        return is_enabled(self._options, name)

    def option(self, name: str, enable: bool = True) -> "ApFormatter":
        """Switch option ``name`` on or off applying the exclusivity rules."""

        with self._lock:
            self._options = set_option(self._options, name, enable)
        return self

    def reset(self) -> "ApFormatter":
        """Switch every option off."""

        with self._lock:
            self._options = RESET
        return self

    def string_format(self, format: str | None) -> "ApFormatter":
        """Replace the options with those of ``format``, e.g. ``"ymd"``.

        An empty value selects the default ``ymdt``.
        """

        with self._lock:
            self._options = parse_format_string(format)
            log.debug("options set from %r: %r", format or DEFAULT_FORMAT, self._options)
        return self

    def century(self, enable: bool = True) -> "ApFormatter":
        """Set the century option; enabling it resets all other options."""

        return self.option("century", enable)

    def decade(self, enable: bool = True) -> "ApFormatter":
        """Set the decade option; enabling it resets all other options."""

        return self.option("decade", enable)

    def longdecade(self, enable: bool = True) -> "ApFormatter":
        """Set the longdecade option; enabling it resets all other options."""

        return self.option("longdecade", enable)

    def year(self, enable: bool = True) -> "ApFormatter":
        return self.option("year", enable)

    def month(self, enable: bool = True) -> "ApFormatter":
        return self.option("month", enable)

    def day(self, enable: bool = True) -> "ApFormatter":
        return self.option("day", enable)

    def dayofweek(self, enable: bool = True) -> "ApFormatter":
        return self.option("dayofweek", enable)

    def time(self, enable: bool = True) -> "ApFormatter":
        return self.option("time", enable)

    # -- formatting -------------------------------------------------------

    def format(self, value: date, format: str | None = None) -> str:
        """Format ``value``; a non-empty ``format`` replaces the options first."""

        with self._lock:
            if format:
                self.string_format(format)
            return format_date(value, self._options)

    def format_range(self, start: date, end: date, format: str | None = None) -> str:
        """Format the range from ``start`` to ``end``.

        Raises
        ------
        InvalidRangeError
            If ``end`` is before ``start``.
        """

        with self._lock:
            options = parse_format_string(format) if format else self._options
            # Options are kept only when the range is valid.
            text = format_range(start, end, options)
            self._options = options
            return text

