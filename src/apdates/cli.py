"""Typer-based command line interface for AP date formatting.

``apdates format`` renders a single ISO 8601 date and ``apdates range``
renders a start/end pair.  Both take an optional format string (``-f ymdt``)
that overrides the configured default.

Exit codes
----------
0 success
3 invalid date input
4 configuration error
5 invalid range (end before start)
"""

from __future__ import annotations

import os
import re
import sys
from datetime import datetime
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml

from . import __version__
from .config import ConfigModel, load_config
from .formatter import ApFormatter
from .options import to_format_string
from .utils.errors import DateInputError, InvalidRangeError
from .utils.logging import configure

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="apdates",
    help="Render dates in AP style. Use 'apdates format' or 'apdates range'.",
)

_DATE_ONLY_RX = re.compile(r"^\d{4}-\d{2}-\d{2}$")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def parse_value(text: str, *, assume_midnight: bool = True) -> datetime:
    """Parse an ISO 8601 date or date-time.

    Raises
    ------
    DateInputError
        If ``text`` is not ISO 8601, or is date-only while
        ``assume_midnight`` is off.
    """

    text = text.strip()
    try:
        value = datetime.fromisoformat(text)
    except ValueError as exc:
        raise DateInputError(f"Invalid date: '{text}' (expected ISO 8601)") from exc
    if not assume_midnight and _DATE_ONLY_RX.fullmatch(text):
        raise DateInputError(f"Missing time of day: '{text}'")
    return value


def _load(config_path: Path | None, verbose: bool) -> ConfigModel:
    configure(verbose)
    try:
        cfg = load_config(config_path)
    except (ValueError, OSError, yaml.YAMLError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    if verbose:
        typer.echo("Loaded config", err=True)
    return cfg


def _build_formatter(cfg: ConfigModel, fmt: str | None, verbose: bool) -> ApFormatter:
    formatter = ApFormatter.from_config(cfg)
    if fmt:
        formatter.string_format(fmt)
    if verbose:
        typer.echo(f"Using format '{to_format_string(formatter.options)}'", err=True)
    return formatter


def _parse_or_exit(text: str, cfg: ConfigModel) -> datetime:
    try:
        return parse_value(text, assume_midnight=cfg.input.assume_midnight_for_dates)
    except DateInputError as exc:
        _safe_exit(3, str(exc))


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"apdates {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: B008
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Entry point for the apdates command group."""
    pass


@app.command("format")
def format_command(
    value: str = typer.Argument(..., help="ISO 8601 date or date-time"),  # noqa: B008
    fmt: Optional[str] = typer.Option(  # noqa: B008
        None, "--format", "-f", help="Format string, e.g. 'ymdt' or 'x'"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> str:
    """Render a single date in AP style."""

    cfg = _load(config_path, verbose)
    formatter = _build_formatter(cfg, fmt, verbose)
    moment = _parse_or_exit(value, cfg)

    text = formatter.format(moment)
    typer.echo(text)
    return text


@app.command("range")
def range_command(
    start: str = typer.Argument(..., help="Start, ISO 8601"),  # noqa: B008
    end: str = typer.Argument(..., help="End, ISO 8601"),  # noqa: B008
    fmt: Optional[str] = typer.Option(  # noqa: B008
        None, "--format", "-f", help="Format string, e.g. 'ymdt' or 'x'"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> str:
    """Render the range from START to END in AP style."""

    cfg = _load(config_path, verbose)
    formatter = _build_formatter(cfg, fmt, verbose)
    start_moment = _parse_or_exit(start, cfg)
    end_moment = _parse_or_exit(end, cfg)

    try:
        text = formatter.format_range(start_moment, end_moment)
    except (InvalidRangeError, TypeError) as exc:
        # TypeError: naive and aware values cannot be compared.
        _safe_exit(5, str(exc))
    typer.echo(text)
    return text
