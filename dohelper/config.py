"""TOML-based settings.

Loads ~/.dohelper/defaults.toml (global) and dohelper.toml (project),
merges them with the project file winning, and builds a Settings instance.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

from dohelper.credentials import DEFAULT_TOKEN_ENV
from dohelper.exceptions import ConfigurationError
from dohelper.logging import LOG_LEVELS, LogLevel

type RawConfig = dict[str, Any]

GLOBAL_CONFIG_PATH = Path.home() / ".dohelper" / "defaults.toml"
PROJECT_CONFIG_NAME = "dohelper.toml"


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved do-helper settings.

    Args:
        token_env: Environment variable holding the API token.
        log_level: Minimum console log level.
        log_file: Optional log file path.
    """

    token_env: str = DEFAULT_TOKEN_ENV
    log_level: LogLevel = "WARNING"
    log_file: str | None = None

    @classmethod
    def from_raw(cls, raw: RawConfig) -> Settings:
        token_env = raw.get("token_env", DEFAULT_TOKEN_ENV)
        if not isinstance(token_env, str) or not token_env:
            raise ConfigurationError("'token_env' must be a non-empty string")

        logging_cfg = raw.get("logging", {})
        if not isinstance(logging_cfg, dict):
            raise ConfigurationError("'logging' must be a table")
        level = str(logging_cfg.get("level", "WARNING")).upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level '{level}'. Valid: {', '.join(LOG_LEVELS)}"
            )

        log_file = logging_cfg.get("file")
        return cls(
            token_env=token_env,
            log_level=cast(LogLevel, level),
            log_file=str(log_file) if log_file else None,
        )


def _deep_merge(base: RawConfig, override: RawConfig) -> RawConfig:
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_toml(path: Path) -> RawConfig:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid settings file {path}: {e}") from e


def load_config(
    *,
    project_dir: Path | None = None,
    project_path: Path | None = None,
    global_path: Path | None = None,
) -> RawConfig:
    global_cfg = _read_toml(global_path or GLOBAL_CONFIG_PATH)
    if project_path is None:
        project_path = (project_dir or Path.cwd()) / PROJECT_CONFIG_NAME
    elif not project_path.is_file():
        raise ConfigurationError(f"Settings file not found: {project_path}")
    project_cfg = _read_toml(project_path)

    merged = _deep_merge(global_cfg, project_cfg)
    merged.setdefault("logging", {})
    return merged


def load_settings(
    *,
    project_dir: Path | None = None,
    project_path: Path | None = None,
    global_path: Path | None = None,
) -> Settings:
    raw = load_config(project_dir=project_dir, project_path=project_path, global_path=global_path)
    return Settings.from_raw(raw)


__all__ = ["Settings", "load_config", "load_settings"]
