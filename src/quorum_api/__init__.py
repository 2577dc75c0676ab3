"""Quorum Python client - supporter, list and custom tag management."""

from .client import API_BASE_URL, QuorumClient
from .config import QuorumSettings
from .credentials import Credentials
from .response import QuorumResponse
from .transport import HttpxTransport, Transport
from .exceptions import (
    QuorumError,
    CredentialsInvalid,
    TransportError,
)

__version__ = "0.1.0"
__all__ = [
    "API_BASE_URL",
    "QuorumClient",
    "QuorumSettings",
    "Credentials",
    "QuorumResponse",
    "HttpxTransport",
    "Transport",
    "QuorumError",
    "CredentialsInvalid",
    "TransportError",
]
