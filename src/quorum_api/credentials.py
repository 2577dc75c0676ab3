"""Credential sanitization and validation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from .exceptions import CredentialsInvalid

# Usernames may contain dashes, plusses and other punctuation, but not 60+ chars.
MAX_USERNAME_LENGTH = 59

_TAG_RE = re.compile(r"<[^>]*>?")
_UNSAFE_RE = re.compile(r"[^\x20-\x7e]")
_ALNUM_RE = re.compile(r"[A-Za-z0-9]+")


def sanitize(value: str) -> str:
    """Strip HTML tags and every character outside printable ASCII."""
    return _UNSAFE_RE.sub("", _TAG_RE.sub("", value))


def is_valid_api_key(value: str) -> bool:
    """Return True if the key is non-empty and ASCII alphanumeric."""
    return _ALNUM_RE.fullmatch(value) is not None


def is_valid_username(value: str) -> bool:
    """Return True if the username has 1 to 59 characters."""
    return 0 < len(value) <= MAX_USERNAME_LENGTH


@dataclass(frozen=True)
class Credentials:
    """Validated Quorum API credentials.

    Use :meth:`create` rather than the constructor so that the raw input
    goes through sanitization and validation.
    """

    username: str
    api_key: str = field(repr=False)

    @classmethod
    def create(cls, username: Any, api_key: Any) -> Credentials:
        """Sanitize and validate raw credential input.

        Args:
            username: Quorum account username.
            api_key: Quorum API key.

        Returns:
            Validated credentials.

        Raises:
            CredentialsInvalid: If either value fails validation.
        """
        if not isinstance(username, str) or not isinstance(api_key, str):
            raise CredentialsInvalid()

        safe_username = sanitize(username)
        safe_key = sanitize(api_key)
        if not is_valid_api_key(safe_key) or not is_valid_username(safe_username):
            raise CredentialsInvalid()

        return cls(username=safe_username, api_key=safe_key)

    def query_params(self) -> dict[str, str]:
        """Query-string parameters that authenticate a request."""
        return {"username": self.username, "api_key": self.api_key}
