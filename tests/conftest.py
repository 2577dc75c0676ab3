"""Shared fixtures."""

from __future__ import annotations

from typing import Any

import httpx
import pytest


class RecordingTransport:
    """Transport that replays canned responses and records each call."""

    def __init__(self, *responses: httpx.Response | Exception):
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def perform(self, method, url, params, json=None):
        self.calls.append({"method": method, "url": url, "params": params, "json": json})
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def close(self):
        self.closed = True


@pytest.fixture
def make_transport():
    return RecordingTransport


@pytest.fixture
def mock_http_client():
    """Build an ``httpx.Client`` whose requests go to a handler function."""
    clients = []

    def factory(handler):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()
