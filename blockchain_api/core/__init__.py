"""Transport, query building, response normalization and error types."""

from blockchain_api.core.exceptions import (
    ArgumentMissingError,
    ArgumentOutOfRangeError,
    BlockchainApiError,
    BlockNotFoundError,
    ClientApiError,
    DecodeError,
    DuplicateKeyError,
    InvalidAddressError,
    InvalidApiKeyError,
    InvalidArgumentError,
    InvalidXpubError,
    ServerApiError,
)
from blockchain_api.core.http_client import BlockchainHttpClient
from blockchain_api.core.query_string import QueryString

__all__ = [
    "ArgumentMissingError",
    "ArgumentOutOfRangeError",
    "BlockchainApiError",
    "BlockchainHttpClient",
    "BlockNotFoundError",
    "ClientApiError",
    "DecodeError",
    "DuplicateKeyError",
    "InvalidAddressError",
    "InvalidApiKeyError",
    "InvalidArgumentError",
    "InvalidXpubError",
    "QueryString",
    "ServerApiError",
]
