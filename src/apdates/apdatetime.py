"""``datetime`` subclass with AP style formatting methods."""

from __future__ import annotations

from datetime import date, datetime, time

from .formatter import ApFormatter

__all__ = ["ApDateTime"]


class ApDateTime(datetime):
    """A :class:`datetime.datetime` that formats itself in AP style.

    Each instance lazily creates its own :class:`ApFormatter`; options set on
    :attr:`formatter` apply to later :meth:`ap_format` calls on the same
    instance.
    """

    _formatter: ApFormatter | None = None

    @classmethod
    def from_datetime(cls, value: date) -> "ApDateTime":
        """Wrap ``value``; a plain ``date`` becomes midnight of that day."""

        if not isinstance(value, datetime):
            value = datetime.combine(value, time())
        return cls(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            value.tzinfo,
            fold=value.fold,
        )

    @property
    def formatter(self) -> ApFormatter:
        """Return the low-level formatter of this instance."""

        if self._formatter is None:
            self._formatter = ApFormatter()
        return self._formatter

    def ap_format(self, format: str | None = None) -> str:
        """Format this instance using the AP rules."""

        return self.formatter.format(self, format)

    def ap_format_until(self, until: date, format: str | None = None) -> str:
        """Format the range from this instance to ``until``.

        Raises
        ------
        InvalidRangeError
            If ``until`` is before this instance.
        """

        return self.formatter.format_range(self, until, format)
