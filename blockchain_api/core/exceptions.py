"""Exception hierarchy for the blockchain.info client."""

from typing import Optional


class BlockchainApiError(Exception):
    """Base exception for every error raised by this library."""


# ── Client ────────────────────────────────────────────────────────────────────


class ClientApiError(BlockchainApiError):
    """The caller misused the API. Raised before any network call."""

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.argument = argument


class ArgumentMissingError(ClientApiError, ValueError):
    """A required argument is None, blank or empty."""

    def __init__(self, argument: str, message: Optional[str] = None):
        super().__init__(message or f"{argument} is required", argument)


class ArgumentOutOfRangeError(ClientApiError, ValueError):
    """A numeric or date argument is outside its accepted bounds."""

    def __init__(self, argument: str, message: str):
        super().__init__(message, argument)


class InvalidArgumentError(ClientApiError, ValueError):
    """An argument was rejected because of its content."""

    def __init__(self, argument: str, message: str):
        super().__init__(message, argument)


class InvalidAddressError(InvalidArgumentError):
    """One or more bitcoin addresses were rejected by the service."""


class InvalidApiKeyError(InvalidArgumentError):
    """The service did not accept the API key."""


class InvalidXpubError(InvalidArgumentError):
    """The extended public key was rejected by the service."""


class DuplicateKeyError(ClientApiError):
    """A query string key was added twice."""

    def __init__(self, key: str):
        super().__init__(f"Query string already has a value for {key}", key)
        self.key = key


# ── Server ────────────────────────────────────────────────────────────────────


class ServerApiError(BlockchainApiError):
    """The remote service rejected or failed the request."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.message}"


class BlockNotFoundError(ServerApiError):
    """The service answered with its 'Block Not Found' body."""

    def __init__(self, message: str = "Block Not Found"):
        super().__init__(message, status_code=404)


# ── Decoding ──────────────────────────────────────────────────────────────────


class DecodeError(BlockchainApiError, ValueError):
    """A response value did not match its expected wire shape."""
