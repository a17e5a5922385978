"""
Runtime configuration for keylight-tui.

Settings come from built-in defaults overridden by environment variables.
Paths follow the XDG Base Directory standard. Nothing is ever written back.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping, Optional

from keylight_tui.core.errors import ConfigurationError
from keylight_tui.core.settings_schema import LoggingSettings, NetworkSettings

APP_NAME = "keylight-tui"
ENV_PREFIX = "KEYLIGHT_TUI_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppConfig:
    """Resolved settings for one run of the controller."""
    network: NetworkSettings = field(default_factory=NetworkSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> AppConfig:
        """Build a config from defaults plus ``KEYLIGHT_TUI_*`` overrides."""
        env = os.environ if environ is None else environ
        config = cls()

        config.network.port = _read(env, "PORT", int, config.network.port)
        if not 0 < config.network.port < 65536:
            raise ConfigurationError(ENV_PREFIX + "PORT", str(config.network.port), "not a TCP port")

        config.network.fetch_timeout_s = _read(
            env, "FETCH_TIMEOUT", float, config.network.fetch_timeout_s
        )
        config.network.push_timeout_s = _read(
            env, "PUSH_TIMEOUT", float, config.network.push_timeout_s
        )
        for name, value in (
            ("FETCH_TIMEOUT", config.network.fetch_timeout_s),
            ("PUSH_TIMEOUT", config.network.push_timeout_s),
        ):
            if value <= 0:
                raise ConfigurationError(ENV_PREFIX + name, str(value), "must be positive")

        level = env.get(ENV_PREFIX + "LOG_LEVEL")
        if level:
            level = level.upper()
            if level not in LOG_LEVELS:
                raise ConfigurationError(
                    ENV_PREFIX + "LOG_LEVEL", level, f"expected one of {', '.join(LOG_LEVELS)}"
                )
            config.logging.log_level = level

        log_file = env.get(ENV_PREFIX + "LOG_FILE")
        config.log_file = Path(log_file).expanduser() if log_file else default_log_path(env)
        return config


def _read(env: Mapping[str, str], name: str, convert: Callable, default):
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        return convert(raw)
    except ValueError as e:
        raise ConfigurationError(ENV_PREFIX + name, raw, str(e)) from e


def default_log_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Get the log file path following XDG standards."""
    env = os.environ if environ is None else environ
    # Use XDG_STATE_HOME if set, otherwise default to ~/.local/state
    state_home = env.get("XDG_STATE_HOME")
    if state_home:
        state_dir = Path(state_home) / APP_NAME
    else:
        state_dir = Path.home() / ".local" / "state" / APP_NAME
    return state_dir / f"{APP_NAME}.log"
