"""AP style dates.

Render dates and date ranges as Associated Press style text, for example
``"June 15, 1987 3-4:30 p.m."``, ``"noon"`` or ``"the '80s"``.

The formatting engine lives in :mod:`apdates.formatter`, the option state in
:mod:`apdates.options` and the :class:`~apdates.apdatetime.ApDateTime` wrapper
in :mod:`apdates.apdatetime`.  The command line interface lives in
:mod:`apdates.cli`.
"""

from .apdatetime import ApDateTime
from .formatter import ApFormatter, format_date, format_range
from .options import (
    DEFAULT,
    RESET,
    Century,
    Composite,
    Decade,
    FormatOptions,
    LongDecade,
    parse_format_string,
    set_option,
)
from .utils.errors import ApDatesError, InvalidRangeError, UnknownOptionError
from .version import VERSION as __version__

__all__ = [
    "ApDateTime",
    "ApFormatter",
    "format_date",
    "format_range",
    "FormatOptions",
    "Century",
    "Decade",
    "LongDecade",
    "Composite",
    "DEFAULT",
    "RESET",
    "parse_format_string",
    "set_option",
    "ApDatesError",
    "InvalidRangeError",
    "UnknownOptionError",
    "__version__",
]
