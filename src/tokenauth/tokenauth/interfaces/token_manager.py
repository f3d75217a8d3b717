# ABOUTME: Abstract token manager interface for authentication token lifecycle management
# ABOUTME: Defines the contract for minting, refreshing, inspecting and validating bearer tokens

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from tokenauth.models.claims import Claims
from tokenauth.models.token_info import TokenInfo


class AbstractTokenManager(ABC):
    """
    Abstract token manager for authentication token lifecycle management.

    This abstract class defines the contract the authentication layer relies
    on. Implementations are stateless after construction and every method may
    be called concurrently from any number of threads.

    Failure policy:
        - Mint operations (`generate*`, `refresh`, `regenerate`) raise.
        - Inspectors (`get_username`, `get_password`, `get_create_time`,
          `get_expiration`) log decode failures and return None.
        - `validate` and `is_expired` never raise.
        - `get_claims` is the raw decode and raises on any decode failure.

    Every read operation accepts tokens with or without the "Bearer " prefix.
    """

    @abstractmethod
    def generate(self, username: Optional[str] = None, password: Optional[str] = None) -> str:
        """
        Mints a token for the given credentials with the default timeout.

        Absent or empty values are stored as the empty string.

        Raises:
            ConfigError: If the configured algorithm cannot be used for signing.
        """
        pass

    @abstractmethod
    def generate_from_info(self, token_info: TokenInfo) -> str:
        """
        Same as `generate`, reading the credentials from a TokenInfo.
        """
        pass

    @abstractmethod
    def generate_with_timeout(self, token_info: TokenInfo, timeout_seconds: int) -> str:
        """
        Same as `generate_from_info` with a caller-supplied timeout instead of the default.
        """
        pass

    @abstractmethod
    def regenerate(self, token: str, timeout_seconds: int) -> str:
        """
        Mints a fresh token carrying the user info of an existing token.

        Raises:
            TokenError: If the username or password cannot be extracted from
                        the token or either is empty.
        """
        pass

    @abstractmethod
    def refresh(self, token: str) -> str:
        """
        Re-signs a token with a new creation time and the default timeout.

        All other claims are preserved.

        Raises:
            TokenDecodeError: If the token cannot be decoded.
        """
        pass

    @abstractmethod
    def generate_continuous(self, token_info: TokenInfo) -> str:
        """
        Mints a token without an expiry claim, for service-to-service channels.
        """
        pass

    @abstractmethod
    def get_username(self, token: str) -> Optional[str]:
        """
        Returns the username claim, or None if the token cannot be decoded.
        """
        pass

    @abstractmethod
    def get_password(self, token: str) -> Optional[str]:
        """
        Returns the password claim, or None if the token cannot be decoded.
        """
        pass

    @abstractmethod
    def get_create_time(self, token: str) -> Optional[datetime]:
        """
        Returns the creation instant (UTC), or None if it cannot be read.
        """
        pass

    @abstractmethod
    def get_expiration(self, token: str) -> Optional[datetime]:
        """
        Returns the expiry instant (UTC), or None for a continuous or undecodable token.
        """
        pass

    @abstractmethod
    def get_claims(self, token: str) -> Claims:
        """
        Decodes and verifies a token, returning its claims.

        Raises:
            MalformedTokenError, BadSignatureError, UnsupportedAlgorithmError
        """
        pass

    @abstractmethod
    def validate(self, token: str, username: Optional[str], password: Optional[str]) -> bool:
        """
        True iff the token decodes, carries exactly these credentials and is not expired.
        """
        pass

    @abstractmethod
    def is_expired(self, token: str) -> bool:
        """
        True iff the token has an expiry and it lies strictly before now.
        """
        pass
