"""Broadcast of signed transactions."""

import structlog

from blockchain_api.core.http_client import BlockchainHttpClient
from blockchain_api.core.validation import require_text

logger = structlog.get_logger(__name__)


class TransactionPusher:
    """Pushes raw transactions to the network through blockchain.info."""

    def __init__(self, http_client: BlockchainHttpClient):
        self.http_client = http_client

    def push_transaction(self, tx_hex: str) -> None:
        """
        Broadcast a signed transaction.

        Args:
            tx_hex: Raw transaction, hex encoded
        """
        require_text(tx_hex, "tx_hex")
        self.http_client.post("pushtx", tx_hex, multipart=True)
        logger.info("Transaction pushed", size_bytes=len(tx_hex) // 2)
