# ABOUTME: TokenInfo model carrying the user credentials a token is minted for
# ABOUTME: Immutable value object handed to the token manager by the auth layer

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenInfo(BaseModel):
    """
    Credentials to embed in a freshly minted token.

    Either field may be absent; the token manager stores an absent value as
    the empty string.
    """

    username: Optional[str] = Field(default=None, description="Subject identity")
    password: Optional[str] = Field(default=None, description="Opaque credential carried in the token")

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        # Keep credentials out of logs and tracebacks
        return f"TokenInfo(username={self.username!r}, password='***')"

    __str__ = __repr__
