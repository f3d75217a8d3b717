# ABOUTME: Enum of the HMAC signature algorithms accepted for tokens
# ABOUTME: Resolves configured algorithm names and rejects everything else

from enum import Enum

from tokenauth.exceptions import ConfigError


class SignatureAlgorithm(str, Enum):
    """
    Enum for supported symmetric signature algorithms.
    """

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"

    @classmethod
    def names(cls) -> list[str]:
        """All accepted algorithm names, in declaration order."""
        return [member.value for member in cls]

    @classmethod
    def of(cls, name: "str | SignatureAlgorithm") -> "SignatureAlgorithm":
        """
        Resolve an algorithm name into a member.

        Matching is exact apart from surrounding whitespace and letter case,
        so "hs512" resolves to HS512.

        Raises:
            ConfigError: If the name is not a supported HMAC algorithm.
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            try:
                return cls(name.strip().upper())
            except ValueError:
                pass
        raise ConfigError(
            message=f"Unsupported signature algorithm: {name!r}",
            code="UNSUPPORTED_ALGORITHM",
            details={"algorithm": str(name), "supported": cls.names()},
        )

    @property
    def min_key_bytes(self) -> int:
        """Recommended minimum HMAC secret length: the digest size (RFC 7518 section 3.2)."""
        return int(self.value[2:]) // 8
