# ABOUTME: JWT implementations package exports
# ABOUTME: Exports the signed token codec, the token manager and its composition root

from .codec import JwtCodec, strip_bearer
from .token_manager import JwtTokenManager
from .factory import create_token_manager, get_token_manager

__all__ = [
    "JwtCodec",
    "strip_bearer",
    "JwtTokenManager",
    "create_token_manager",
    "get_token_manager",
]
