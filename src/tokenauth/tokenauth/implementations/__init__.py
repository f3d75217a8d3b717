# ABOUTME: Implementations package exports
# ABOUTME: Contains concrete implementations of the clock and token manager interfaces

"""
Implementations

- system: wall-clock backed implementations for production
- memory: dependency-free implementations for tests and simulations
- jwt: signed token codec and token manager
"""

from .system import SystemClock
from .memory import ManualClock
from .jwt import JwtCodec, JwtTokenManager, create_token_manager, get_token_manager

__all__ = [
    "SystemClock",
    "ManualClock",
    "JwtCodec",
    "JwtTokenManager",
    "create_token_manager",
    "get_token_manager",
]
