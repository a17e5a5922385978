from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


@dataclass
class NetworkSettings:
    port: int = 9123
    fetch_timeout_s: float = 5.0
    push_timeout_s: float = 1.0


@dataclass
class LoggingSettings:
    log_level: LogLevel = "WARNING"
    log_max_bytes: int = 1024 * 1024
    log_backup_count: int = 3
