# ABOUTME: Exceptions package exports
# ABOUTME: Exports the configuration, token and decode error taxonomy

from tokenauth.exceptions.base import (
    CoreException,
    ConfigError,
    TokenError,
    TokenDecodeError,
    MalformedTokenError,
    BadSignatureError,
    UnsupportedAlgorithmError,
)

__all__ = [
    "CoreException",
    "ConfigError",
    "TokenError",
    "TokenDecodeError",
    "MalformedTokenError",
    "BadSignatureError",
    "UnsupportedAlgorithmError",
]
