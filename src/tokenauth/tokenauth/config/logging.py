# ABOUTME: Loguru configuration for the token authentication library
# ABOUTME: Installs console/file sinks behind a patcher that masks tokens, passwords and secrets

import re
import sys
from pathlib import Path
from typing import Any, Optional, Union

from loguru import logger
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

MASK = "***"

# Compact JWS headers are base64url JSON objects, so they always start with "eyJ"
TOKEN_PATTERN = re.compile(r"eyJ[A-Za-z0-9_-]*\.[A-Za-z0-9_-]*\.[A-Za-z0-9_-]*")
BEARER_PATTERN = re.compile(r"(Bearer\s+)\S+")
CREDENTIAL_PATTERN = re.compile(
    r"""(?P<key>["']?(?:password|secret)["']?\s*[:=]\s*)(?P<value>"[^"]*"|'[^']*'|[^\s,;}]+)""",
    re.IGNORECASE,
)

SENSITIVE_EXTRA_KEYS = frozenset({"password", "secret", "token"})


class LoggerConfig(BaseModel):
    """Configuration for loguru logger."""

    # Console output configuration
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True

    # File output configuration
    file_enabled: bool = False
    file_level: str = "DEBUG"
    file_path: Union[str, Path] = "logs/tokenauth.log"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"
    file_rotation: str = "100 MB"
    file_retention: str = "30 days"
    file_compression: Optional[str] = "gz"

    redact: bool = True
    enqueue: bool = True


class LoggingSettings(BaseSettings):
    """Logging settings that can be configured via environment variables."""

    log_level: str = Field(default="INFO")
    log_file_enabled: bool = Field(default=False)
    log_file_path: str = Field(default="logs/tokenauth.log")
    log_console_colorize: bool = Field(default=True)
    log_redact: bool = Field(default=True)

    model_config = {"env_prefix": "TOKENAUTH_"}


def _mask_credential(match: re.Match) -> str:
    value = match["value"]
    quote = value[0] if value[0] in "\"'" else ""
    return f"{match['key']}{quote}{MASK}{quote}"


def redact(text: str) -> str:
    """Mask compact tokens, Bearer credentials and password/secret assignments in text."""
    text = BEARER_PATTERN.sub(rf"\g<1>{MASK}", text)
    text = TOKEN_PATTERN.sub(MASK, text)
    return CREDENTIAL_PATTERN.sub(_mask_credential, text)


def redact_record(record: dict[str, Any]) -> None:
    """Loguru patcher applying `redact` to the message and masking sensitive `extra` values."""
    record["message"] = redact(record["message"])
    extra = record["extra"]
    for key in SENSITIVE_EXTRA_KEYS.intersection(extra):
        extra[key] = MASK


def _keep_record(record: dict[str, Any]) -> None:
    pass


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Setup loguru logger with the specified configuration.

    The library never calls this on import; the host application decides
    where token manager logs go. Handlers installed here never render local
    variables in tracebacks, since those hold secrets and raw tokens.

    Args:
        config: Logger configuration. If None, uses environment-driven defaults.
    """
    if config is None:
        settings = LoggingSettings()
        config = LoggerConfig(
            console_level=settings.log_level,
            file_enabled=settings.log_file_enabled,
            file_path=settings.log_file_path,
            console_colorize=settings.log_console_colorize,
            file_level=settings.log_level,
            redact=settings.log_redact,
        )

    # Remove default handler
    logger.remove()
    logger.configure(patcher=redact_record if config.redact else _keep_record)

    if config.console_enabled:
        logger.add(
            sys.stdout,
            level=config.console_level,
            format=config.console_format,
            colorize=config.console_colorize,
            diagnose=False,
            enqueue=config.enqueue,
        )

    if config.file_enabled:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.file_path,
            level=config.file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            diagnose=False,
            enqueue=config.enqueue,
        )
