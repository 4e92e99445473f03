"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``apdates`` namespace.
    - Allow an optional verbose/debug mode for the command line.

Inputs/Outputs:
    - Inputs: module name and verbosity settings.
    - Outputs: configured `logging.Logger` instances.

Notes/Edge cases:
    - The package logger carries a ``NullHandler`` so library use stays
      silent unless the application configures logging.
    - :func:`configure` is idempotent; repeated calls adjust the level of the
      single handler it installs.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["ROOT_LOGGER", "get_logger", "configure"]

ROOT_LOGGER = "apdates"

_HANDLER_NAME = "apdates-stderr"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is at emit time."""

    # Follows sys.stderr when test runners such as CliRunner swap it out.
    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value: object) -> None:
        pass


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger for ``name`` nested under the package logger."""

    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    ``verbose`` selects ``DEBUG`` instead of ``WARNING``.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    level = logging.DEBUG if verbose else logging.WARNING
    handler = next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = _StderrHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    handler.setLevel(level)
    logger.setLevel(level)
    return logger
