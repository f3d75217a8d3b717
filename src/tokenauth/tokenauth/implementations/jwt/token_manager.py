# ABOUTME: JWT implementation of AbstractTokenManager using HMAC-signed, DEFLATE-compressed tokens
# ABOUTME: Mints, refreshes, inspects and validates bearer tokens carrying user credentials

import math
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from loguru import logger

from tokenauth.config.settings import TokenSettings
from tokenauth.exceptions import MalformedTokenError, TokenError
from tokenauth.interfaces.clock import AbstractClock
from tokenauth.interfaces.token_manager import AbstractTokenManager
from tokenauth.implementations.system.clock import SystemClock
from tokenauth.models.claims import (
    Claims,
    USERNAME,
    PASSWORD,
    CREATE_TIME,
    EXPIRATION,
    SUBJECT,
    user_claims,
)
from tokenauth.models.enum import SignatureAlgorithm
from tokenauth.models.result import DecodeResult
from tokenauth.models.token_info import TokenInfo

from .codec import JwtCodec

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class JwtTokenManager(AbstractTokenManager):
    """
    JWT implementation of AbstractTokenManager.

    Tokens are compact JWS strings signed with the configured HMAC secret and
    carrying `username`, `password`, `createTime` (milliseconds), `sub` and,
    unless continuous, `exp` (seconds). Expiry is
    `createTime + timeout_seconds * 1000`.

    Features:
    - Stateless: no token is ever stored, so one instance can be shared by
      every request handler
    - Injectable clock for deterministic expiry handling
    - Bearer prefix accepted by every read operation
    - Best-effort inspectors that log decode failures and return None

    The instance holds only immutable configuration and is safe to call from
    any number of threads without locking.
    """

    def __init__(
        self,
        secret: str | bytes = "asdqwe",
        algorithm: str | SignatureAlgorithm = SignatureAlgorithm.HS256,
        default_timeout: int = 8640000,
        clock: Optional[AbstractClock] = None,
    ):
        """
        Initialize the token manager.

        Args:
            secret: HMAC secret used to sign and verify tokens.
            algorithm: HMAC algorithm name (HS256, HS384 or HS512).
            default_timeout: Lifetime applied by `generate`, `generate_from_info`
                             and `refresh`; multiplied by 1000 and added to createTime.
            clock: Time source; defaults to the system wall clock.

        Raises:
            ConfigError: If the algorithm is not a supported HMAC algorithm.
        """
        self._codec = JwtCodec(secret, algorithm)
        self._default_timeout = int(default_timeout)
        self._clock = clock if clock is not None else SystemClock()

        logger.info(
            f"JWT token manager initialized (algorithm={self._codec.algorithm.value}, "
            f"default_timeout={self._default_timeout})"
        )

    @classmethod
    def from_settings(cls, settings: TokenSettings, clock: Optional[AbstractClock] = None) -> "JwtTokenManager":
        """Build a token manager from loaded settings."""
        return cls(
            secret=settings.secret,
            algorithm=settings.algorithm,
            default_timeout=settings.timeout,
            clock=clock,
        )

    @property
    def algorithm(self) -> SignatureAlgorithm:
        return self._codec.algorithm

    @property
    def default_timeout(self) -> int:
        return self._default_timeout

    @property
    def clock(self) -> AbstractClock:
        return self._clock

    # Mint operations

    def generate(self, username: Optional[str] = None, password: Optional[str] = None) -> str:
        claims = user_claims(username, password, self._clock.now_millis())
        return self._sign(claims, self._default_timeout)

    def generate_from_info(self, token_info: TokenInfo) -> str:
        return self.generate(token_info.username, token_info.password)

    def generate_with_timeout(self, token_info: TokenInfo, timeout_seconds: int) -> str:
        claims = user_claims(token_info.username, token_info.password, self._clock.now_millis())
        return self._sign(claims, timeout_seconds)

    def regenerate(self, token: str, timeout_seconds: int) -> str:
        """
        Mint a fresh token for the user carried by an existing token.

        The existing token is decoded with signature verification, but its
        expiry is not checked, so an expired token can be regenerated.

        Args:
            token: Existing token, with or without the "Bearer " prefix.
            timeout_seconds: Lifetime of the new token.

        Raises:
            TokenError: If the token cannot be decoded or its username or
                        password claim is missing or empty.
        """
        result = self._codec.try_decode(token)
        username = self._read_text(result, USERNAME)
        password = self._read_text(result, PASSWORD)
        if not username or not password:
            raise TokenError(
                message="cannot extract user info from token",
                code="MISSING_USER_INFO",
                details={"username_present": bool(username), "password_present": bool(password)},
            )

        claims = {USERNAME: username, PASSWORD: password, CREATE_TIME: self._clock.now_millis()}
        return self._sign(claims, timeout_seconds)

    def refresh(self, token: str) -> str:
        """
        Re-sign a token with `createTime` set to now and the default timeout.

        The new claim mapping is seeded from the decoded one, so unknown keys
        survive; `sub` and `exp` are recomputed.

        Raises:
            TokenDecodeError: If the token cannot be decoded.
        """
        previous = self._codec.decode(token)
        claims = {key: value for key, value in previous.items() if key not in (SUBJECT, EXPIRATION)}
        claims[CREATE_TIME] = self._clock.now_millis()
        return self._sign(claims, self._default_timeout)

    def generate_continuous(self, token_info: TokenInfo) -> str:
        claims = user_claims(token_info.username, token_info.password, self._clock.now_millis())
        logger.debug("Minting continuous token without expiry")
        return self._codec.encode(claims, subject=claims[USERNAME])

    def _sign(self, claims: Claims, timeout_seconds: int) -> str:
        create_time = int(claims[CREATE_TIME])
        expiry_millis = create_time + int(timeout_seconds) * 1000
        username = claims.get(USERNAME)
        subject = None if username is None else str(username)

        logger.debug(f"Minting token (create_time={create_time}, timeout={timeout_seconds})")
        return self._codec.encode(claims, subject=subject, expiry_millis=expiry_millis)

    # Inspectors

    def get_username(self, token: str) -> Optional[str]:
        return self._read_text(self._codec.try_decode(token), USERNAME)

    def get_password(self, token: str) -> Optional[str]:
        return self._read_text(self._codec.try_decode(token), PASSWORD)

    def get_create_time(self, token: str) -> Optional[datetime]:
        return self._read_instant(token, CREATE_TIME, scale=1, required=True)

    def get_expiration(self, token: str) -> Optional[datetime]:
        # Continuous tokens have no expiry
        return self._read_instant(token, EXPIRATION, scale=1000, required=False)

    def get_claims(self, token: str) -> Claims:
        return self._codec.decode(token)

    def validate(self, token: str, username: Optional[str], password: Optional[str]) -> bool:
        if username is None or password is None:
            return False

        result = self._codec.try_decode(token)
        if not self._report(result, "claims"):
            return False

        if self._text(result.get(USERNAME)) != username or self._text(result.get(PASSWORD)) != password:
            return False

        try:
            return not self._expired(result.claims)
        except MalformedTokenError as e:
            logger.opt(exception=e).error(f"validate token error: {e.message}")
            return False

    def is_expired(self, token: str) -> bool:
        result = self._codec.try_decode(token)
        if not self._report(result, EXPIRATION):
            return False
        try:
            return self._expired(result.claims)
        except MalformedTokenError as e:
            logger.opt(exception=e).error(f"get {EXPIRATION} from token error: {e.message}")
            return False

    def _expired(self, claims: Claims) -> bool:
        expiry_millis = self._millis_claim(claims, EXPIRATION, scale=1000)
        return expiry_millis is not None and expiry_millis < self._clock.now_millis()

    def _read_instant(self, token: str, key: str, scale: int, required: bool) -> Optional[datetime]:
        result = self._codec.try_decode(token)
        if not self._report(result, key):
            return None
        try:
            millis = self._millis_claim(result.claims, key, scale)
            if millis is None:
                if required:
                    logger.error(f"get {key} from token error: claim is missing")
                return None
            return EPOCH + timedelta(milliseconds=millis)
        except (MalformedTokenError, OverflowError) as e:
            logger.opt(exception=e).error(f"get {key} from token error: {e}")
            return None

    def _read_text(self, result: DecodeResult, key: str) -> Optional[str]:
        if not self._report(result, key):
            return None
        value = result.get(key)
        if value is None:
            logger.error(f"get {key} from token error: claim is missing")
            return None
        return self._text(value)

    @staticmethod
    def _report(result: DecodeResult, what: str) -> bool:
        """Log a failed decode at error level; True when the result carries claims."""
        if result.ok:
            return True
        logger.opt(exception=result.error).error(f"get {what} from token error: {result.error.message}")
        return False

    @staticmethod
    def _text(value: Any) -> Optional[str]:
        return None if value is None else str(value)

    @staticmethod
    def _millis_claim(claims: Claims, key: str, scale: int) -> Optional[int]:
        value = claims.get(key)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise MalformedTokenError(
                message=f"Claim '{key}' must be numeric", details={"claim": key, "type": type(value).__name__}
            )
        scaled = value * scale
        if isinstance(scaled, float) and not math.isfinite(scaled):
            raise MalformedTokenError(
                message=f"Claim '{key}' must be finite", details={"claim": key, "value": str(value)}
            )
        return int(scaled)

    def __repr__(self) -> str:
        return (
            f"JwtTokenManager(algorithm={self._codec.algorithm.value!r}, "
            f"default_timeout={self._default_timeout!r}, clock={self._clock!r})"
        )
