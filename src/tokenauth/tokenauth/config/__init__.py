# ABOUTME: Configuration package initialization
# ABOUTME: Exports token settings and logging utilities

from tokenauth.config.settings import TokenSettings, get_settings
from tokenauth.config.logging import (
    LoggerConfig,
    LoggingSettings,
    redact,
    redact_record,
    setup_logging,
)

__all__ = [
    "TokenSettings",
    "get_settings",
    "LoggerConfig",
    "LoggingSettings",
    "redact",
    "redact_record",
    "setup_logging",
]
