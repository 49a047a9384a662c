"""
blockchain.info API client

A typed Python client for the blockchain.info block explorer, exchange rate,
statistics, receive payments and wallet service APIs.
"""

__version__ = "1.0.0"
__description__ = "Python client for the blockchain.info web service APIs"

from blockchain_api.core.exceptions import (
    BlockchainApiError,
    ClientApiError,
    ServerApiError,
)
from blockchain_api.core.helper import BlockchainApiHelper
from blockchain_api.core.http_client import BlockchainHttpClient
from blockchain_api.models.bitcoin_value import BitcoinValue
from blockchain_api.models.blockchain import FilterType
from blockchain_api.models.config import ClientConfig

__all__ = [
    "BitcoinValue",
    "BlockchainApiError",
    "BlockchainApiHelper",
    "BlockchainHttpClient",
    "ClientApiError",
    "ClientConfig",
    "FilterType",
    "ServerApiError",
]
