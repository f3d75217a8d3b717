# ABOUTME: Interfaces package exports
# ABOUTME: Exports the abstract clock and token manager

from .clock import AbstractClock
from .token_manager import AbstractTokenManager

__all__ = [
    "AbstractClock",
    "AbstractTokenManager",
]
