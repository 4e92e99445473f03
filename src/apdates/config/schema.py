"""Typed configuration schema and loader for the apdates package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, conint

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class FormatterSettings(BaseModel):
    """Default options of formatters built from the configuration."""

    # Unknown characters are skipped when the string is applied, as with -f.
    format: str = ""
    format_env: str = "APDATES_FORMAT"

    model_config = ConfigDict(extra="forbid")


class InputSettings(BaseModel):
    """How textual date input is interpreted."""

    assume_midnight_for_dates: bool = True

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    formatter: FormatterSettings
    input: InputSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``formatter.format_env``.
    """

    with (
        importlib_resources.files("apdates.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"{path}: top level of the config must be a mapping")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    format_env = cfg.formatter.format_env
    if format_env in environ:
        formatter = FormatterSettings.model_validate(
            {**cfg.formatter.model_dump(), "format": environ[format_env]}
        )
        cfg = cfg.model_copy(update={"formatter": formatter})

    return cfg


__all__ = [
    "ConfigModel",
    "FormatterSettings",
    "InputSettings",
    "deep_merge_dicts",
    "load_config",
]
