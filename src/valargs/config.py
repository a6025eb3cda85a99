"""Environment-driven configuration for valargs."""

import os
from dataclasses import dataclass
from typing import Optional

from valargs.logger import setup_logger


def _env_flag(key: str, default: str) -> bool:
    return os.getenv(key, default).lower() == "true"


@dataclass
class LoggingConfig:
    """Logging settings for the valargs command line."""

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = True

    def apply(self) -> None:
        """Install the loguru sinks described by this configuration."""
        setup_logger(
            log_file=self.log_file,
            log_level=self.log_level,
            console_output=self.console_output,
        )


def load_logging_config() -> LoggingConfig:
    """Load logging configuration from environment variables.

    DEBUG=true overrides VALARGS_LOG_LEVEL.
    """
    log_level = os.getenv("VALARGS_LOG_LEVEL", "WARNING").upper()
    if _env_flag("DEBUG", "false"):
        log_level = "DEBUG"

    return LoggingConfig(
        log_level=log_level,
        log_file=os.getenv("VALARGS_LOG_FILE") or None,
        console_output=_env_flag("VALARGS_LOG_CONSOLE", "true"),
    )
