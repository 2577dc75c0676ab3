"""HTTP transport used by the Quorum API client."""

from __future__ import annotations

from typing import Any, Protocol

import httpx
import structlog

from .exceptions import TransportError

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30.0

USER_AGENT = "quorum-api-python/0.1.0"


class Transport(Protocol):
    """Anything that can issue a request and hand back an ``httpx.Response``.

    Implementations may raise ``httpx.HTTPStatusError`` for error statuses;
    the client turns those back into ordinary responses. Failures below the
    HTTP layer (including undecodable bodies and redirect loops) must be
    raised as :class:`TransportError`.
    """

    def perform(
        self,
        method: str,
        url: str,
        params: dict[str, Any],
        json: dict[str, Any] | None = None,
    ) -> httpx.Response: ...

    def close(self) -> None: ...


class HttpxTransport:
    """Default transport backed by ``httpx.Client``.

    Example:
        ```python
        import httpx
        from quorum_api import HttpxTransport, QuorumClient

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"objects": []})

        transport = HttpxTransport(
            client=httpx.Client(transport=httpx.MockTransport(handler))
        )
        client = QuorumClient("user", "key123", transport=transport)
        ```
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize the transport.

        Args:
            client: Preconfigured ``httpx.Client``. Owned by the caller and
                left open by :meth:`close`.
            timeout: Request timeout in seconds, used only when no client
                is given.

        Raises:
            ValueError: If timeout is not positive.
        """
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)

        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                headers={
                    "Accept": "application/json",
                    "User-Agent": USER_AGENT,
                },
                timeout=timeout,
            )
        self._client = client

    def perform(
        self,
        method: str,
        url: str,
        params: dict[str, Any],
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send one request and return the response, whatever its status.

        Raises:
            TransportError: If the request could not be completed.
        """
        try:
            return self._client.request(
                method=method,
                url=url,
                params=params,
                json=json,
            )
        except httpx.RequestError as e:
            logger.warning(
                "Transport failure",
                method=method,
                error_type=type(e).__name__,
            )
            raise TransportError(f"{method} request failed: {type(e).__name__}") from e

    def close(self) -> None:
        """Close the underlying ``httpx.Client`` if this transport created it."""
        if self._owns_client:
            self._client.close()
