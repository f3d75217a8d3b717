# ABOUTME: Claim keys and claim mapping type for authentication tokens
# ABOUTME: Centralizes the wire names shared by the codec and the token manager

from typing import Any, Final, Mapping

TOKEN_PREFIX: Final[str] = "Bearer "

USERNAME: Final[str] = "username"
PASSWORD: Final[str] = "password"
CREATE_TIME: Final[str] = "createTime"

# Registered JWT claim names
SUBJECT: Final[str] = "sub"
EXPIRATION: Final[str] = "exp"

EMPTY: Final[str] = ""

Claims = Mapping[str, Any]


def user_claims(username: str | None, password: str | None, create_time: int) -> dict[str, Any]:
    """Build the user claims of a fresh token, storing absent values as empty strings."""
    return {
        USERNAME: username or EMPTY,
        PASSWORD: password or EMPTY,
        CREATE_TIME: create_time,
    }
