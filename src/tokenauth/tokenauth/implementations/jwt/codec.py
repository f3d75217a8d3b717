# ABOUTME: Compact JWT codec with HMAC signatures and DEFLATE-compressed payloads
# ABOUTME: Translates claim mappings to signed token strings and back, translating library errors

import json
import zlib
from typing import Any, Optional

import jwt
from jwt.api_jws import PyJWS
from loguru import logger

from tokenauth.exceptions import (
    ConfigError,
    MalformedTokenError,
    BadSignatureError,
    TokenDecodeError,
    TokenError,
    UnsupportedAlgorithmError,
)
from tokenauth.models.claims import Claims, TOKEN_PREFIX, SUBJECT, EXPIRATION
from tokenauth.models.enum import SignatureAlgorithm
from tokenauth.models.result import DecodeResult

COMPRESSION_HEADER = "zip"
DEFLATE = "DEF"


def strip_bearer(token: str) -> str:
    """Remove a leading "Bearer " prefix, then surrounding whitespace."""
    if token.startswith(TOKEN_PREFIX):
        token = token[len(TOKEN_PREFIX) :]
    return token.strip()


def deflate(data: bytes) -> bytes:
    return zlib.compress(data)


def inflate(data: bytes) -> bytes:
    """Inflate a zlib-wrapped DEFLATE stream, falling back to raw DEFLATE (RFC 1951)."""
    try:
        return zlib.decompress(data)
    except zlib.error:
        return zlib.decompress(data, -zlib.MAX_WBITS)


class JwtCodec:
    """
    Encodes claim mappings into compact JWS tokens and decodes them back.

    Tokens are `base64url(header).base64url(deflate(payload)).base64url(signature)`
    where the header declares the HMAC algorithm and `"zip": "DEF"`. The
    signature covers the compressed payload segment.

    The codec holds only the secret and the resolved algorithm; it is safe to
    share between threads. It never checks expiry, which is the token
    manager's concern.
    """

    def __init__(self, secret: str | bytes, algorithm: str | SignatureAlgorithm = SignatureAlgorithm.HS256):
        """
        Initialize the codec.

        Args:
            secret: HMAC secret; strings are encoded as UTF-8.
            algorithm: HMAC algorithm name, one of HS256, HS384, HS512.

        Raises:
            ConfigError: If the algorithm is unknown or the secret cannot be
                         used as an HMAC key.
        """
        self._algorithm = SignatureAlgorithm.of(algorithm)
        self._key = secret.encode("utf-8") if isinstance(secret, str) else bytes(secret)
        self._jws = PyJWS(algorithms=SignatureAlgorithm.names())

        try:
            self._jws.get_algorithm_by_name(self._algorithm.value).prepare_key(self._key)
        except jwt.InvalidKeyError as e:
            raise ConfigError(
                message=f"Secret cannot be used as an HMAC key: {e}",
                details={"algorithm": self._algorithm.value},
            ) from e

        if len(self._key) < self._algorithm.min_key_bytes:
            logger.warning(
                f"HMAC secret is {len(self._key)} bytes, shorter than the {self._algorithm.min_key_bytes} bytes "
                f"recommended for {self._algorithm.value}"
            )

    @property
    def algorithm(self) -> SignatureAlgorithm:
        return self._algorithm

    def encode(self, claims: Claims, subject: Optional[str], expiry_millis: Optional[int] = None) -> str:
        """
        Serialize, compress and sign claims.

        Args:
            claims: Claim mapping; copied, never modified.
            subject: Value of the `sub` claim; omitted when None.
            expiry_millis: Expiry instant in milliseconds; stored as whole
                           seconds in `exp`. None produces a token without `exp`.

        Returns:
            The compact token string.
        """
        payload: dict[str, Any] = {k: v for k, v in claims.items() if k not in (SUBJECT, EXPIRATION)}
        if subject is not None:
            payload[SUBJECT] = subject
        if expiry_millis is not None:
            payload[EXPIRATION] = int(expiry_millis) // 1000

        try:
            raw = json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise TokenError(
                message=f"Claims are not JSON serializable: {e}",
                details={"claims": sorted(payload.keys())},
            ) from e

        return self._jws.encode(
            deflate(raw),
            self._key,
            algorithm=self._algorithm.value,
            headers={COMPRESSION_HEADER: DEFLATE},
        )

    def decode(self, token: str) -> dict[str, Any]:
        """
        Verify and decode a token into its claims.

        A leading "Bearer " prefix is accepted. Any HMAC algorithm named in
        the header is verified with the configured secret.

        Raises:
            MalformedTokenError: If the token is structurally invalid or its
                                 payload is not a compressed JSON object.
            BadSignatureError: If the signature does not verify.
            UnsupportedAlgorithmError: If the header names a non-HMAC algorithm.
        """
        if not isinstance(token, str):
            raise MalformedTokenError(
                message="Token must be a string", details={"token_type": type(token).__name__}
            )

        compact = strip_bearer(token)
        if not compact:
            raise MalformedTokenError(message="Token is empty")
        if compact.count(".") != 2:
            raise MalformedTokenError(
                message="Token must have exactly three segments",
                details={"segments": compact.count(".") + 1},
            )

        try:
            decoded = self._jws.decode_complete(compact, self._key, algorithms=SignatureAlgorithm.names())
        except jwt.InvalidSignatureError as e:
            raise BadSignatureError(message="Token signature verification failed") from e
        except jwt.InvalidAlgorithmError as e:
            raise UnsupportedAlgorithmError(message=f"Unsupported token algorithm: {e}") from e
        except jwt.PyJWTError as e:
            raise MalformedTokenError(message=f"Malformed token: {e}") from e

        compression = decoded["header"].get(COMPRESSION_HEADER)
        payload = decoded["payload"]
        if compression == DEFLATE:
            try:
                payload = inflate(payload)
            except zlib.error as e:
                raise MalformedTokenError(message=f"Token payload cannot be inflated: {e}") from e
        elif compression is not None:
            raise MalformedTokenError(
                message=f"Unsupported compression: {compression!r}", details={"zip": str(compression)}
            )

        try:
            claims = json.loads(payload)
        except ValueError as e:
            raise MalformedTokenError(message=f"Token payload is not valid JSON: {e}") from e
        if not isinstance(claims, dict):
            raise MalformedTokenError(
                message="Token payload must be a JSON object", details={"payload_type": type(claims).__name__}
            )
        return claims

    def try_decode(self, token: str) -> DecodeResult:
        """Decode without raising; decode failures are returned in the result."""
        try:
            return DecodeResult.success(self.decode(token))
        except TokenDecodeError as e:
            return DecodeResult.failure(e)

    def __repr__(self) -> str:
        return f"JwtCodec(algorithm={self._algorithm.value!r})"
