"""
Application settings (Pydantic).

Settings are loaded from `src/coordshift/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `COORDSHIFT_CONFIG_PATH`
- environment variables (`COORDSHIFT_LOG_LEVEL`, `COORDSHIFT_PRECISION`)

Only the CLI reads settings; the transform and distance functions take plain numbers.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any
from coordshift.core.env import load_dotenv_if_present

import yaml
from pydantic import BaseModel, Field


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `coordshift.config`."""
    text = resources.files("coordshift.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "coordshift"
    log_level: str = "WARNING"


class OutputSettings(BaseModel):
    precision: int | None = Field(default=None, ge=0, le=17)
    json_indent: int | None = Field(default=2, ge=0)


class DemoSettings(BaseModel):
    point: tuple[float, float] = (104.03604907542808, 30.623654551828945)
    distance_from: tuple[float, float] = (104.070497, 30.588777)
    distance_to: tuple[float, float] = (104.070785, 30.581813)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    demo: DemoSettings = Field(default_factory=DemoSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    data = dict(data)
    log_level = os.getenv("COORDSHIFT_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    precision = os.getenv("COORDSHIFT_PRECISION")
    if precision:
        # "none"/"full" restores repr output; anything else is validated as an int by Pydantic.
        value: str | None = None if precision.strip().lower() in ("none", "full") else precision
        data.setdefault("output", {})["precision"] = value

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("COORDSHIFT_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
