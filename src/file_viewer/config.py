"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

from file_viewer.core.constants import LINE_NUMBER_MARGIN, X_FACTOR, Y_FACTOR
from file_viewer.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FILE_VIEWER_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/file-viewer/config.toml")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_SECTIONS = ("viewer", "logging")


@dataclass(slots=True, frozen=True)
class ViewerConfig:
    """Fully merged viewer configuration."""

    encoding: str = "utf-8"
    errors: str = "replace"
    show_line_numbers: bool = True
    filtering: bool = False
    line_number_margin: int = LINE_NUMBER_MARGIN
    x_factor: int = X_FACTOR
    y_factor: int = Y_FACTOR
    log_level: str = "WARNING"
    log_file: Path | None = None


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Optional startup overrides applied at highest precedence."""

    encoding: str | None = None
    show_line_numbers: bool | None = None
    filtering: bool | None = None
    log_level: str | None = None
    log_file: Path | None = None


def resolve_config_path(explicit: Path | None = None) -> Path | None:
    """Pick the config file: explicit path, then $FILE_VIEWER_CONFIG, then the default."""
    if explicit is not None:
        return explicit
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        return Path(env_path).expanduser()
    default = DEFAULT_CONFIG_PATH.expanduser()
    if default.exists():
        return default
    return None


def load_config_file(path: Path) -> dict[str, object]:
    """Parse a TOML config file."""
    try:
        with path.open("rb") as handle:
            payload = tomllib.load(handle)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file {path} does not exist.") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid TOML: {e}") from e
    logger.debug("read config file %s", path)
    return payload


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"Config section '{key}' must be a table.")
    return value


def _bool(table: dict[str, object], section: str, field: str, default: bool) -> bool:
    if field not in table:
        return default
    value = table[field]
    if not isinstance(value, bool):
        raise ConfigError(f"Config field '{section}.{field}' must be a boolean.")
    return value


def _positive_int(table: dict[str, object], section: str, field: str, default: int) -> int:
    if field not in table:
        return default
    value = table[field]
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"Config field '{section}.{field}' must be a positive integer.")
    return value


def _non_negative_int(table: dict[str, object], section: str, field: str, default: int) -> int:
    if field not in table:
        return default
    value = table[field]
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"Config field '{section}.{field}' must be a non-negative integer.")
    return value


def _string(table: dict[str, object], section: str, field: str, default: str) -> str:
    if field not in table:
        return default
    value = table[field]
    if not isinstance(value, str) or not value:
        raise ConfigError(f"Config field '{section}.{field}' must be a non-empty string.")
    return value


def _log_level(value: str, field: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Config field '{field}' must be one of {', '.join(LOG_LEVELS)}.")
    return level


def merge_config(
    base: ViewerConfig, payload: dict[str, object], overrides: CliOverrides
) -> ViewerConfig:
    """Merge defaults, config file, then CLI overrides."""
    unknown = sorted(set(payload) - set(_SECTIONS))
    if unknown:
        raise ConfigError(f"Unknown config section '{unknown[0]}'.")

    viewer = _get_table(payload, "viewer")
    logging_table = _get_table(payload, "logging")

    log_file = base.log_file
    if "file" in logging_table:
        log_file = Path(_string(logging_table, "logging", "file", "")).expanduser()

    merged = ViewerConfig(
        encoding=_string(viewer, "viewer", "encoding", base.encoding),
        errors=_string(viewer, "viewer", "errors", base.errors),
        show_line_numbers=_bool(viewer, "viewer", "show_line_numbers", base.show_line_numbers),
        filtering=_bool(viewer, "viewer", "filtering", base.filtering),
        line_number_margin=_non_negative_int(
            viewer, "viewer", "line_number_margin", base.line_number_margin
        ),
        x_factor=_positive_int(viewer, "viewer", "x_factor", base.x_factor),
        y_factor=_positive_int(viewer, "viewer", "y_factor", base.y_factor),
        log_level=_log_level(
            _string(logging_table, "logging", "level", base.log_level), "logging.level"
        ),
        log_file=log_file,
    )
    return apply_cli_overrides(merged, overrides)


def apply_cli_overrides(config: ViewerConfig, overrides: CliOverrides) -> ViewerConfig:
    """Apply startup overrides at highest precedence."""
    changes: dict[str, object] = {}
    if overrides.encoding is not None:
        changes["encoding"] = overrides.encoding
    if overrides.show_line_numbers is not None:
        changes["show_line_numbers"] = overrides.show_line_numbers
    if overrides.filtering is not None:
        changes["filtering"] = overrides.filtering
    if overrides.log_level is not None:
        changes["log_level"] = _log_level(overrides.log_level, "overrides.log_level")
    if overrides.log_file is not None:
        changes["log_file"] = overrides.log_file
    return replace(config, **changes)


def load_config(
    path: Path | None = None, overrides: CliOverrides | None = None
) -> ViewerConfig:
    """Build the effective configuration."""
    config_path = resolve_config_path(path)
    payload = load_config_file(config_path) if config_path is not None else {}
    return merge_config(ViewerConfig(), payload, overrides or CliOverrides())
