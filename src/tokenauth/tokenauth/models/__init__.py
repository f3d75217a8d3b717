# ABOUTME: Models package exports
# ABOUTME: Exports claim keys, the algorithm enum, TokenInfo and DecodeResult

from . import claims
from .claims import Claims, TOKEN_PREFIX
from .enum import SignatureAlgorithm
from .result import DecodeResult
from .token_info import TokenInfo

__all__ = [
    "claims",
    "Claims",
    "TOKEN_PREFIX",
    "SignatureAlgorithm",
    "DecodeResult",
    "TokenInfo",
]
