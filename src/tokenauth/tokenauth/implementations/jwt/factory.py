# ABOUTME: Composition root for the JWT token manager
# ABOUTME: Builds the process-wide manager from settings and hands out the shared instance

from functools import lru_cache
from typing import Optional

from tokenauth.config.settings import TokenSettings, get_settings
from tokenauth.interfaces.clock import AbstractClock

from .token_manager import JwtTokenManager


def create_token_manager(
    settings: Optional[TokenSettings] = None, clock: Optional[AbstractClock] = None
) -> JwtTokenManager:
    """
    Build a token manager.

    Args:
        settings: Token settings; defaults to the cached process settings.
        clock: Time source; defaults to the system wall clock.

    Returns:
        A new JwtTokenManager.
    """
    return JwtTokenManager.from_settings(settings if settings is not None else get_settings(), clock=clock)


@lru_cache
def get_token_manager() -> JwtTokenManager:
    """Provides the shared token manager built from the process settings.

    The manager is stateless, so request handlers share this one instance.
    """
    return create_token_manager()
