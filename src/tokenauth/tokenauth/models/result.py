# ABOUTME: DecodeResult model for best-effort token decoding
# ABOUTME: Carries either decoded claims or the decode error, never both

from dataclasses import dataclass
from typing import Any, Optional

from tokenauth.exceptions import TokenDecodeError
from tokenauth.models.claims import Claims


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of decoding a token without raising.

    Exactly one of `claims` and `error` is set. Inspectors turn a result into
    an optional value with `get` and decide themselves how to report `error`.
    """

    claims: Optional[Claims] = None
    error: Optional[TokenDecodeError] = None

    @classmethod
    def success(cls, claims: Claims) -> "DecodeResult":
        return cls(claims=claims)

    @classmethod
    def failure(cls, error: TokenDecodeError) -> "DecodeResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def get(self, key: str) -> Optional[Any]:
        """Return a claim value, or None when decoding failed or the claim is absent."""
        if self.claims is None:
            return None
        return self.claims.get(key)
