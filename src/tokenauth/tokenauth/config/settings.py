# ABOUTME: Token configuration loaded once at startup
# ABOUTME: Binds the jwt.token.* keys to an immutable pydantic-settings object

from functools import lru_cache
from typing import Any, Mapping

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tokenauth.exceptions import ConfigError
from tokenauth.models.enum import SignatureAlgorithm

PROPERTY_PREFIX = "jwt.token."


class TokenSettings(BaseSettings):
    """Defines the configuration of the token manager.

    Values are read from environment variables (`JWT_TOKEN_SECRET`,
    `JWT_TOKEN_TIMEOUT`, `JWT_TOKEN_ALGORITHM`), a `.env` file, keyword
    arguments by field name, or the dotted property keys used by the host
    service (`jwt.token.secret` and friends, see `from_properties`).

    The object is frozen: configuration is created once and shared for the
    lifetime of the process.

    Attributes:
        secret: HMAC secret, encoded as UTF-8 when signing.
        timeout: Default token lifetime. Expiry is computed as
            `createTime + timeout * 1000`, i.e. the value is read as seconds.
        algorithm: HMAC algorithm name, one of HS256, HS384, HS512.
    """

    secret: str = Field(
        default="asdqwe",
        description="HMAC secret used to sign and verify tokens.",
    )
    timeout: int = Field(
        default=8640000,
        ge=0,
        description="Default token lifetime, multiplied by 1000 and added to createTime.",
    )
    algorithm: str = Field(
        default="HS256",
        description="HMAC signature algorithm name.",
    )

    model_config = SettingsConfigDict(
        env_prefix="JWT_TOKEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @field_validator("algorithm", mode="before")
    @classmethod
    def validate_algorithm(cls, v: Any) -> Any:
        """Normalize the algorithm name and reject anything outside the HMAC family."""
        if not isinstance(v, str):
            return v
        try:
            return SignatureAlgorithm.of(v).value
        except ConfigError as e:
            raise ValueError(e.message) from e

    @classmethod
    def from_properties(cls, properties: Mapping[str, Any]) -> "TokenSettings":
        """Build settings from a flat property mapping such as `{"jwt.token.secret": "..."}`.

        Keys outside the `jwt.token.` namespace are ignored; missing keys fall
        back to the environment and then to the defaults.
        """
        values = {}
        for key, value in properties.items():
            if not key.startswith(PROPERTY_PREFIX):
                continue
            name = key[len(PROPERTY_PREFIX) :]
            if name in cls.model_fields:
                values[name] = value
        return cls(**values)

    def __repr__(self) -> str:
        return f"TokenSettings(secret='***', timeout={self.timeout!r}, algorithm={self.algorithm!r})"

    __str__ = __repr__


@lru_cache
def get_settings() -> TokenSettings:
    """Provides a singleton instance of the token settings.

    The cache guarantees the environment is read only once and every caller
    sees the same configuration.

    Returns:
        A single, cached instance of TokenSettings.
    """
    return TokenSettings()
