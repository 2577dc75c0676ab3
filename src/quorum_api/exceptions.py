"""Quorum API client exceptions."""


class QuorumError(Exception):
    """Base exception for the Quorum API client."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class CredentialsInvalid(QuorumError):
    """Raised when the username or API key fails validation."""

    def __init__(self, message: str = "Quorum API client credentials are invalid"):
        super().__init__(message)


class TransportError(QuorumError):
    """Raised when a request fails below the HTTP layer.

    Connection refused, DNS failure and timeouts end up here. HTTP error
    statuses do not; those come back as ordinary responses.
    """

    def __init__(self, message: str = "Request to the Quorum API failed"):
        super().__init__(message)
