"""Response value returned by every request method."""

from __future__ import annotations

import json as jsonlib
from dataclasses import dataclass, field
from typing import Any

import httpx


@dataclass(frozen=True)
class QuorumResponse:
    """Status code and raw body of a Quorum API response.

    Returned for every HTTP status, errors included. Inspect
    :attr:`status_code` to tell them apart. Repeated headers such as
    ``Set-Cookie`` are kept; read them with ``headers.get_list()``.
    """

    status_code: int
    content: bytes = b""
    headers: httpx.Headers = field(default_factory=httpx.Headers)

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> QuorumResponse:
        """Build a response value from an ``httpx.Response``."""
        return cls(
            status_code=response.status_code,
            content=response.content,
            headers=httpx.Headers(response.headers),
        )

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.content.decode("utf-8", errors="replace")

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status_code < 300

    @property
    def is_error(self) -> bool:
        """True for 4xx and 5xx statuses."""
        return self.status_code >= 400

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON.
        """
        return jsonlib.loads(self.content)
