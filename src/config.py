"""Configuration loader for the terminal analog clock."""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from typing import Any

from dotenv import load_dotenv
import yaml

DEFAULT_REFRESH_INTERVAL_SECONDS = 0.1
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIR = "logs/"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ClockConfig:
    """Clock display configuration."""

    color: bool
    refresh_interval_seconds: float


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str
    log_dir: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    clock: ClockConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def _parse_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value!r}")


def _parse_interval(value: Any, name: str) -> float:
    try:
        interval = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid number for {name}: {value!r}") from exc
    if interval <= 0:
        raise ValueError(f"{name} must be positive, got {interval}")
    return interval


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    load_dotenv()
    clock = config.clock
    color_env = os.environ.get("CLOCK_COLOR", "").strip()
    if color_env:
        clock = replace(clock, color=_parse_bool(color_env, "CLOCK_COLOR"))
    interval_env = os.environ.get("CLOCK_REFRESH_SECONDS", "").strip()
    if interval_env:
        clock = replace(
            clock,
            refresh_interval_seconds=_parse_interval(interval_env, "CLOCK_REFRESH_SECONDS"),
        )
    return replace(config, clock=clock)


def default_config() -> AppConfig:
    """Built-in defaults with environment overrides applied."""
    config = AppConfig(
        clock=ClockConfig(color=False, refresh_interval_seconds=DEFAULT_REFRESH_INTERVAL_SECONDS),
        log=LoggingConfig(level=DEFAULT_LOG_LEVEL, log_dir=DEFAULT_LOG_DIR),
    )
    return _apply_env_overrides(config)


def load_config(path: str = "config/config.yaml") -> AppConfig:
    """Load application configuration from a YAML file."""
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    clock_section = _require_key(data, "clock", "clock")
    logging_section = _require_key(data, "logging", "logging")

    if not isinstance(clock_section, dict):
        raise ValueError("'clock' config must be a mapping")
    if not isinstance(logging_section, dict):
        raise ValueError("'logging' config must be a mapping")

    clock = ClockConfig(
        color=_parse_bool(_require_key(clock_section, "color", "clock"), "clock.color"),
        refresh_interval_seconds=_parse_interval(
            _require_key(clock_section, "refresh_interval_seconds", "clock"),
            "clock.refresh_interval_seconds",
        ),
    )

    logging = LoggingConfig(
        level=str(_require_key(logging_section, "level", "logging")).upper(),
        log_dir=_require_key(logging_section, "log_dir", "logging"),
    )

    return _apply_env_overrides(AppConfig(clock=clock, log=logging))
