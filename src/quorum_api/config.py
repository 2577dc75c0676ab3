"""Environment-driven settings for the Quorum API client."""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .transport import DEFAULT_TIMEOUT


class QuorumSettings(BaseSettings):
    """Quorum API settings, read from ``QUORUM_*`` variables or a ``.env`` file.

    Credential format is checked by :class:`~quorum_api.credentials.Credentials`,
    not here.
    """

    model_config = SettingsConfigDict(
        env_prefix="QUORUM_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    username: str = Field(description="Quorum account username.")
    api_key: SecretStr = Field(description="Quorum API key.")
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Request timeout in seconds.",
    )
