# ABOUTME: Unit tests for claim helpers and DecodeResult
# ABOUTME: Tests user claim construction and result-to-option conversion

import pytest

from tokenauth.exceptions import BadSignatureError
from tokenauth.models import claims
from tokenauth.models.result import DecodeResult


class TestUserClaims:
    """Test suite for user_claims."""

    @pytest.mark.unit
    def test_builds_user_claims(self):
        built = claims.user_claims("alice", "pw", 123)
        assert built == {"username": "alice", "password": "pw", "createTime": 123}

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_values_become_empty_strings(self, value):
        built = claims.user_claims(value, value, 0)
        assert built["username"] == ""
        assert built["password"] == ""

    @pytest.mark.unit
    def test_wire_names(self):
        assert claims.TOKEN_PREFIX == "Bearer "
        assert (claims.USERNAME, claims.PASSWORD, claims.CREATE_TIME) == ("username", "password", "createTime")
        assert (claims.SUBJECT, claims.EXPIRATION) == ("sub", "exp")


class TestDecodeResult:
    """Test suite for DecodeResult."""

    @pytest.mark.unit
    def test_success(self):
        result = DecodeResult.success({"username": "alice"})

        assert result.ok
        assert result.error is None
        assert result.get("username") == "alice"
        assert result.get("missing") is None

    @pytest.mark.unit
    def test_failure(self):
        error = BadSignatureError("bad")
        result = DecodeResult.failure(error)

        assert not result.ok
        assert result.error is error
        assert result.claims is None
        assert result.get("username") is None
