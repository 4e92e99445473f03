"""Formatting option state.

The eight AP formatting flags (``century``, ``decade``, ``longdecade``,
``year``, ``month``, ``day``, ``dayofweek`` and ``time``) are modelled as a
tagged variant instead of a bag of booleans::

    FormatOptions = Century | Decade | LongDecade | Composite

The three exclusive modes carry no data: when one of them is active every
other flag reads as ``False``.  :class:`Composite` holds the five composable
flags.  States that break the exclusivity rules therefore cannot be built.

All values are immutable.  :func:`set_option` and :func:`parse_format_string`
return new values and never modify their input.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Final, TypeAlias

from .utils.errors import UnknownOptionError

__all__ = [
    "Century",
    "Decade",
    "LongDecade",
    "Composite",
    "FormatOptions",
    "OPTION_NAMES",
    "EXCLUSIVE_OPTIONS",
    "FORMAT_CODES",
    "RESET",
    "DEFAULT",
    "DEFAULT_FORMAT",
    "as_flags",
    "is_enabled",
    "set_option",
    "parse_format_string",
    "to_format_string",
]


@dataclass(slots=True, frozen=True)
class Century:
    """Render the century only, e.g. ``1900s``."""


@dataclass(slots=True, frozen=True)
class Decade:
    """Render the short decade only, e.g. ``'80s``."""


@dataclass(slots=True, frozen=True)
class LongDecade:
    """Render the long decade only, e.g. ``1980s``."""


@dataclass(slots=True, frozen=True)
class Composite:
    """Any combination of day of week, month, day, year and time."""

    year: bool = False
    month: bool = False
    day: bool = False
    dayofweek: bool = False
    time: bool = False


FormatOptions: TypeAlias = Century | Decade | LongDecade | Composite

_EXCLUSIVE: Final[dict[str, FormatOptions]] = {
    "century": Century(),
    "decade": Decade(),
    "longdecade": LongDecade(),
}

EXCLUSIVE_OPTIONS: Final[tuple[str, ...]] = tuple(_EXCLUSIVE)
OPTION_NAMES: Final[tuple[str, ...]] = EXCLUSIVE_OPTIONS + tuple(
    f.name for f in fields(Composite)
)

# One-character codes of the format-string mini-language.
FORMAT_CODES: Final[dict[str, str]] = {
    "c": "century",
    "x": "decade",
    "l": "longdecade",
    "y": "year",
    "m": "month",
    "d": "day",
    "w": "dayofweek",
    "t": "time",
}

RESET: Final[Composite] = Composite()
DEFAULT: Final[Composite] = Composite(year=True, month=True, day=True, time=True)
DEFAULT_FORMAT: Final[str] = "ymdt"


def _check_name(name: str) -> None:
    if name not in OPTION_NAMES:
        raise UnknownOptionError(f"unknown formatting option: {name!r}")


def is_enabled(options: FormatOptions, name: str) -> bool:
    """Return whether flag ``name`` is on in ``options``."""

    _check_name(name)
    if name in _EXCLUSIVE:
        return options == _EXCLUSIVE[name]
    if isinstance(options, Composite):
        return bool(getattr(options, name))
    return False


def as_flags(options: FormatOptions) -> dict[str, bool]:
    """Return all eight flags of ``options`` keyed by option name."""

    return {name: is_enabled(options, name) for name in OPTION_NAMES}


def set_option(options: FormatOptions, name: str, enabled: bool = True) -> FormatOptions:
    """Return ``options`` with flag ``name`` switched ``enabled``.

    Enabling an exclusive flag discards everything else.  Enabling a
    composite flag leaves any exclusive mode and keeps the other composite
    flags.  Disabling a flag that is already off is a no-op; disabling the
    active exclusive flag leaves nothing enabled.

    Raises
    ------
    UnknownOptionError
        If ``name`` is not one of :data:`OPTION_NAMES`.
    """

    _check_name(name)
    enabled = bool(enabled)

    if name in _EXCLUSIVE:
        if enabled:
            return _EXCLUSIVE[name]
        return RESET if options == _EXCLUSIVE[name] else options

    if not isinstance(options, Composite):
        # An exclusive mode has every composite flag off already.
        return Composite(**{name: True}) if enabled else options
    return replace(options, **{name: enabled})


def parse_format_string(format_string: str | None) -> FormatOptions:
    """Build options from a format string such as ``"ymdt"``.

    Codes are case-insensitive and unknown characters are skipped.  Scanning
    stops right after the first ``c``, ``x`` or ``l`` code.  An empty or
    ``None`` value yields :data:`DEFAULT`.
    """

    if not format_string:
        return DEFAULT

    options: FormatOptions = RESET
    for char in str(format_string):
        name = FORMAT_CODES.get(char.lower())
        if name is None:
            continue
        options = set_option(options, name)
        if name in _EXCLUSIVE:
            break
    return options


def to_format_string(options: FormatOptions) -> str:
    """Return the canonical format string for ``options``.

    An all-false :class:`Composite` gives ``""``, which
    :func:`parse_format_string` reads back as :data:`DEFAULT`.
    """

    flags = as_flags(options)
    return "".join(code for code, name in FORMAT_CODES.items() if flags[name])
