# ABOUTME: Unit tests for the tokenauth exception hierarchy
# ABOUTME: Verifies inheritance, default error codes and detail handling

import pytest

from tokenauth.exceptions import (
    CoreException,
    ConfigError,
    TokenError,
    TokenDecodeError,
    MalformedTokenError,
    BadSignatureError,
    UnsupportedAlgorithmError,
)


class TestCoreException:
    """Test suite for CoreException."""

    @pytest.mark.unit
    def test_message_code_and_details(self):
        details = {"key": "value"}
        error = CoreException("boom", code="E1", details=details)

        assert str(error) == "boom"
        assert error.message == "boom"
        assert error.code == "E1"
        assert error.details == {"key": "value"}

    @pytest.mark.unit
    def test_details_are_copied(self):
        details = {"key": "value"}
        error = CoreException("boom", details=details)
        details["key"] = "changed"

        assert error.details == {"key": "value"}

    @pytest.mark.unit
    def test_defaults(self):
        error = CoreException("boom")
        assert error.code is None
        assert error.details == {}


class TestTokenErrors:
    """Test suite for configuration and token errors."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error_class, parent, code",
        [
            (ConfigError, CoreException, "CONFIG_ERROR"),
            (TokenError, CoreException, "TOKEN_ERROR"),
            (MalformedTokenError, TokenDecodeError, "MALFORMED_TOKEN"),
            (BadSignatureError, TokenDecodeError, "BAD_SIGNATURE"),
            (UnsupportedAlgorithmError, TokenDecodeError, "UNSUPPORTED_ALGORITHM"),
        ],
    )
    def test_hierarchy_and_default_codes(self, error_class, parent, code):
        error = error_class("failure")

        assert isinstance(error, parent)
        assert isinstance(error, CoreException)
        assert error.code == code

    @pytest.mark.unit
    def test_decode_errors_are_token_errors(self):
        assert issubclass(TokenDecodeError, TokenError)
        assert not issubclass(ConfigError, TokenError)

    @pytest.mark.unit
    def test_code_can_be_overridden(self):
        error = TokenError("cannot extract user info from token", code="MISSING_USER_INFO")
        assert error.code == "MISSING_USER_INFO"

    @pytest.mark.unit
    def test_catchable_as_token_error(self):
        with pytest.raises(TokenError):
            raise BadSignatureError("bad")
