# ABOUTME: Unit tests for the token manager composition root
# ABOUTME: Tests building managers from settings and sharing the process-wide instance

import pytest

from tokenauth.config.settings import TokenSettings, get_settings
from tokenauth.implementations.jwt.factory import create_token_manager, get_token_manager
from tokenauth.implementations.jwt.token_manager import JwtTokenManager
from tokenauth.implementations.memory.clock import ManualClock
from tokenauth.models.enum import SignatureAlgorithm


@pytest.fixture(autouse=True)
def fresh_caches(monkeypatch):
    for name in ("JWT_TOKEN_SECRET", "JWT_TOKEN_TIMEOUT", "JWT_TOKEN_ALGORITHM"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_token_manager.cache_clear()
    yield
    get_settings.cache_clear()
    get_token_manager.cache_clear()


class TestCreateTokenManager:
    """Test suite for create_token_manager."""

    @pytest.mark.unit
    def test_uses_given_settings_and_clock(self):
        clock = ManualClock(1_000)
        manager = create_token_manager(TokenSettings(timeout=5, algorithm="HS384"), clock=clock)

        assert isinstance(manager, JwtTokenManager)
        assert manager.algorithm is SignatureAlgorithm.HS384
        assert manager.default_timeout == 5
        assert manager.get_claims(manager.generate("a", "b"))["exp"] == (1_000 + 5_000) // 1000

    @pytest.mark.unit
    def test_defaults_to_process_settings(self, monkeypatch):
        monkeypatch.setenv("JWT_TOKEN_TIMEOUT", "42")
        assert create_token_manager().default_timeout == 42


class TestGetTokenManager:
    """Test suite for get_token_manager."""

    @pytest.mark.unit
    def test_shared_instance(self):
        assert get_token_manager() is get_token_manager()

    @pytest.mark.unit
    def test_built_from_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_TOKEN_SECRET", "env-secret")
        monkeypatch.setenv("JWT_TOKEN_ALGORITHM", "HS512")

        manager = get_token_manager()
        token = manager.generate("alice", "pw")

        assert manager.algorithm is SignatureAlgorithm.HS512
        assert create_token_manager(TokenSettings(secret="env-secret")).get_username(token) == "alice"
        assert create_token_manager(TokenSettings(secret="other")).get_username(token) is None
