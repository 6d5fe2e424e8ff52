"""
System domain configuration.

Settings can be overridden from the environment:

- ORDERFEES_DEBUG: "1"/"true" enables debug logging
- ORDERFEES_LOG_LEVEL: root log level when not in debug mode
- ORDERFEES_JSON_LOGS: "1"/"true" renders logs as JSON
- ORDERFEES_CONFIG_DIR: directory holding the YAML configuration files
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


class LogLevel(Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class SystemConfig:
    """System-level settings for the orderfees package."""
    debug: bool = False
    log_level: str = LogLevel.INFO.value
    json_logs: bool = False
    config_dir: str = "settings"

    def __post_init__(self):
        self.log_level = LogLevel(self.log_level.upper()).value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SystemConfig":
        """Build the configuration from ORDERFEES_* environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            debug=env.get("ORDERFEES_DEBUG", "").lower() in _TRUTHY,
            log_level=env.get("ORDERFEES_LOG_LEVEL", LogLevel.INFO.value),
            json_logs=env.get("ORDERFEES_JSON_LOGS", "").lower() in _TRUTHY,
            config_dir=env.get("ORDERFEES_CONFIG_DIR", "settings")
        )
