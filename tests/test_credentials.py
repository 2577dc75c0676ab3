"""Tests for credential sanitization and validation."""

import pytest

from quorum_api import Credentials, CredentialsInvalid
from quorum_api.credentials import is_valid_api_key, is_valid_username, sanitize


class TestSanitize:
    def test_removes_control_characters(self):
        assert sanitize("abc\x00de\tf\n") == "abcdef"

    def test_removes_non_ascii(self):
        assert sanitize("josé") == "jos"

    def test_strips_tags(self):
        assert sanitize("<b>name</b>") == "name"

    def test_keeps_punctuation(self):
        assert sanitize("first.last+quorum@example.com") == "first.last+quorum@example.com"


class TestRules:
    @pytest.mark.parametrize("key", ["mockValidApiKey", "abc123", "0"])
    def test_valid_api_keys(self, key):
        assert is_valid_api_key(key) is True

    @pytest.mark.parametrize("key", ["", "#@*%", "abc 123", "abc-123"])
    def test_invalid_api_keys(self, key):
        assert is_valid_api_key(key) is False

    def test_username_length_bounds(self):
        assert is_valid_username("a") is True
        assert is_valid_username("a" * 59) is True
        assert is_valid_username("") is False
        assert is_valid_username("a" * 60) is False


class TestCredentials:
    def test_create_valid(self):
        creds = Credentials.create("mockValidUsername", "mockValidApiKey")

        assert creds.username == "mockValidUsername"
        assert creds.api_key == "mockValidApiKey"

    def test_create_sanitizes_before_validating(self):
        creds = Credentials.create("user\x07name", "abc123\n")

        assert creds.username == "username"
        assert creds.api_key == "abc123"

    def test_punctuated_username_accepted(self):
        creds = Credentials.create("\\$=", "mockValidApiKey")

        assert creds.username == "\\$="

    def test_bad_key_rejected(self):
        with pytest.raises(CredentialsInvalid, match="invalid"):
            Credentials.create("\\$=", "#@*%")

    @pytest.mark.parametrize("username", ["", "a" * 60, "\x00\x01"])
    def test_bad_username_rejected(self, username):
        with pytest.raises(CredentialsInvalid):
            Credentials.create(username, "mockValidApiKey")

    def test_non_string_rejected(self):
        with pytest.raises(CredentialsInvalid):
            Credentials.create(None, "mockValidApiKey")

    def test_immutable(self):
        creds = Credentials.create("user", "key")

        with pytest.raises(AttributeError):
            creds.api_key = "other"

    def test_repr_hides_api_key(self):
        creds = Credentials.create("user", "supersecretkey")

        assert "supersecretkey" not in repr(creds)

    def test_query_params(self):
        creds = Credentials.create("user", "key")

        assert creds.query_params() == {"username": "user", "api_key": "key"}
