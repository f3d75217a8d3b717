# ABOUTME: Core exception classes for the token authentication library
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class CoreException(Exception):
    """Base exception class for the token authentication library.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the library inherit from this class
    to ensure consistent error handling patterns.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ConfigError(CoreException):
    """Exception raised for configuration errors.

    Used when the token configuration is invalid, such as:
    - Unknown signature algorithm name
    - Algorithm outside the supported HMAC family

    Should include details about the offending configuration value.
    """

    def __init__(self, message: str, code: str | None = "CONFIG_ERROR", details: Dict[str, Any] | None = None):
        super().__init__(message, code, details)


class TokenError(CoreException):
    """Exception raised for semantic token failures.

    Used when a token decodes but cannot serve the requested operation, e.g.
    the user info needed to regenerate it is missing.
    """

    def __init__(self, message: str, code: str | None = "TOKEN_ERROR", details: Dict[str, Any] | None = None):
        super().__init__(message, code, details)


class TokenDecodeError(TokenError):
    """Base class for failures while turning a token string back into claims."""

    pass


class MalformedTokenError(TokenDecodeError):
    """Token is not a well-formed compact serialization.

    Raised for a wrong segment count, bad base64url, an unknown compression
    indicator, a payload that cannot be inflated, or a payload that is not a
    JSON object.
    """

    def __init__(self, message: str, code: str | None = "MALFORMED_TOKEN", details: Dict[str, Any] | None = None):
        super().__init__(message, code, details)


class BadSignatureError(TokenDecodeError):
    """Token signature does not verify against the configured secret."""

    def __init__(self, message: str, code: str | None = "BAD_SIGNATURE", details: Dict[str, Any] | None = None):
        super().__init__(message, code, details)


class UnsupportedAlgorithmError(TokenDecodeError):
    """Token header names an algorithm outside the HMAC family."""

    def __init__(
        self, message: str, code: str | None = "UNSUPPORTED_ALGORITHM", details: Dict[str, Any] | None = None
    ):
        super().__init__(message, code, details)
