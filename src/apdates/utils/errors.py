"""Typed exceptions for option handling, ranges and date input."""


class ApDatesError(ValueError):
    """Base class for AP date formatting errors."""


class InvalidRangeError(ApDatesError):
    """Raised when the end of a range is before its start."""


class UnknownOptionError(ApDatesError):
    """Raised when an option name is not one of the formatting flags."""


class DateInputError(ApDatesError):
    """Raised when textual date input cannot be parsed."""
