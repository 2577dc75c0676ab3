"""Quorum API client."""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from .config import QuorumSettings
from .credentials import Credentials
from .response import QuorumResponse
from .transport import HttpxTransport, Transport

logger = structlog.get_logger(__name__)

API_BASE_URL = "https://www.quorum.us/api"


class QuorumClient:
    """Client for the Quorum Public Affairs API.

    Every method returns a :class:`QuorumResponse`, including for 4xx and 5xx
    statuses. Only failures below HTTP raise, as
    :class:`~quorum_api.exceptions.TransportError`.

    Example:
        ```python
        from quorum_api import QuorumClient

        with QuorumClient(username="you@example.com", api_key="abc123") as client:
            if client.validate():
                lists = client.get_lists().json()

            response = client.create_supporter({
                "firstname": "Test",
                "lastname": "User",
                "email": "test@example.com",
            })
            print(response.status_code)
        ```
    """

    def __init__(
        self,
        username: str,
        api_key: str,
        transport: Transport | None = None,
    ):
        """Initialize the Quorum client.

        Args:
            username: Your Quorum account username.
            api_key: Your Quorum API key.
            transport: HTTP transport to use. Defaults to :class:`HttpxTransport`.

        Raises:
            CredentialsInvalid: If the username or API key fails validation.
        """
        self.credentials = Credentials.create(username, api_key)
        self._transport = transport if transport is not None else HttpxTransport()

    @classmethod
    def from_settings(
        cls,
        settings: QuorumSettings | None = None,
        transport: Transport | None = None,
    ) -> QuorumClient:
        """Build a client from :class:`QuorumSettings`.

        Args:
            settings: Settings to use. Read from the environment when omitted.
            transport: HTTP transport to use. Defaults to an
                :class:`HttpxTransport` with the configured timeout.
        """
        settings = settings or QuorumSettings()
        if transport is None:
            transport = HttpxTransport(timeout=settings.timeout_seconds)
        return cls(
            username=settings.username,
            api_key=settings.api_key.get_secret_value(),
            transport=transport,
        )

    def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> QuorumResponse:
        """Make an authenticated API request."""
        start_time = time.time()
        logger.debug("Making API request", method=method, path=path)
        try:
            response = self._transport.perform(
                method,
                API_BASE_URL + path,
                params=self.credentials.query_params(),
                json=json,
            )
        except httpx.HTTPStatusError as e:
            response = e.response

        logger.debug(
            "API request completed",
            method=method,
            path=path,
            status_code=response.status_code,
            duration_seconds=round(time.time() - start_time, 3),
        )
        return QuorumResponse.from_httpx(response)

    def validate(self) -> bool:
        """Check that the API is reachable with these credentials.

        Never raises.

        Returns:
            True if listing lists returns HTTP 200, False otherwise.
        """
        try:
            response = self.get_lists()
        except Exception:
            logger.exception("Quorum API validation failed")
            return False
        if response.status_code != 200:
            logger.warning(
                "Quorum API validation rejected",
                status_code=response.status_code,
            )
            return False
        return True

    def get_lists(self) -> QuorumResponse:
        """Get lists from the Quorum account."""
        return self._request("GET", "/list/")

    def get_custom_tags(self) -> QuorumResponse:
        """Get custom tags (custom supporter fields) from the Quorum account."""
        return self._request("GET", "/customtag/")

    def create_supporter(self, data: Mapping[str, Any]) -> QuorumResponse:
        """Create a new supporter.

        Args:
            data: Supporter fields, e.g. ``firstname``, ``lastname``, ``email``.

        Returns:
            The API response.

        Raises:
            TypeError: If data is not a mapping.
        """
        if not isinstance(data, Mapping):
            msg = f"supporter data must be a mapping, not {type(data).__name__}"
            raise TypeError(msg)
        return self._request("POST", "/supporter/", json=dict(data))

    def close(self) -> None:
        """Close the HTTP transport."""
        self._transport.close()

    def __enter__(self) -> QuorumClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
