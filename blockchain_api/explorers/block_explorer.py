"""
Block explorer endpoints on the main blockchain.info host.

Covers blocks, transactions, addresses, xpubs and unspent outputs.
"""

import warnings
from datetime import datetime
from typing import Iterable, List

import structlog

from blockchain_api.core.exceptions import (
    ArgumentMissingError,
    ArgumentOutOfRangeError,
    InvalidAddressError,
    InvalidXpubError,
    ServerApiError,
)
from blockchain_api.core.http_client import BlockchainHttpClient
from blockchain_api.core.normalizers import (
    deserialize_block,
    deserialize_blocks,
    deserialize_simple_blocks,
    deserialize_transactions,
    deserialize_unspent_outputs,
    deserialize_xpub,
)
from blockchain_api.core.query_string import QueryString
from blockchain_api.core.validation import require_items, require_range, require_text
from blockchain_api.models.blockchain import (
    Address,
    Block,
    FilterType,
    LatestBlock,
    MultiAddress,
    SimpleBlock,
    Transaction,
    UnspentOutput,
    Xpub,
)
from blockchain_api.utils.time import (
    GENESIS_BLOCK_UNIX_MILLIS,
    datetime_to_unix,
    ensure_utc,
    get_current_utc,
)

logger = structlog.get_logger(__name__)

MAX_TRANSACTIONS_PER_REQUEST = 50
MAX_TRANSACTIONS_PER_MULTI_REQUEST = 100
DEFAULT_UNSPENT_OUTPUTS_PER_REQUEST = 250

GENESIS_MESSAGE = "must not be earlier than the genesis block (2009-01-03T18:15:05+00:00)"


class BlockExplorer:
    """Read-only queries against the block explorer API."""

    def __init__(self, http_client: BlockchainHttpClient):
        self.http_client = http_client

    # ==================== Addresses ====================

    def get_base58_address(self,
                           address: str,
                           limit: int = MAX_TRANSACTIONS_PER_REQUEST,
                           offset: int = 0,
                           filter: FilterType = FilterType.REMOVE_UNSPENDABLE) -> Address:
        """
        Get the summary and a page of transactions for a Base58Check address.

        Args:
            address: Base58Check encoded address
            limit: Transactions to return (1-50)
            offset: Transactions to skip
            filter: Which transactions to include
        """
        return self._get_address(address, limit, offset, filter)

    def get_hash160_address(self,
                            address: str,
                            limit: int = MAX_TRANSACTIONS_PER_REQUEST,
                            offset: int = 0,
                            filter: FilterType = FilterType.REMOVE_UNSPENDABLE) -> Address:
        """Same as get_base58_address, for a hash160 hex address."""
        return self._get_address(address, limit, offset, filter)

    def get_multi_address(self,
                          addresses: Iterable[str],
                          limit: int = MAX_TRANSACTIONS_PER_MULTI_REQUEST,
                          offset: int = 0,
                          filter: FilterType = FilterType.REMOVE_UNSPENDABLE) -> MultiAddress:
        """Get summaries for several addresses plus their combined transactions."""
        address_list = require_items(addresses, "addresses", "No addresses provided")
        require_range(limit, "limit", 1, MAX_TRANSACTIONS_PER_MULTI_REQUEST)
        require_range(offset, "offset", 0)

        query_string = QueryString()
        query_string.add("active", "|".join(address_list))
        query_string.add("limit", limit)
        query_string.add("offset", offset)
        query_string.add("filter", int(filter))
        query_string.add("format", "json")

        try:
            return self.http_client.get("multiaddr", query_string, response_type=MultiAddress)
        except ServerApiError as e:
            if "Invalid Bitcoin Address" in e.message:
                raise InvalidAddressError("addresses", "One or more addresses provided are invalid") from e
            raise

    def get_xpub(self,
                 xpub: str,
                 limit: int = MAX_TRANSACTIONS_PER_MULTI_REQUEST,
                 offset: int = 0,
                 filter: FilterType = FilterType.REMOVE_UNSPENDABLE) -> Xpub:
        """Get the summary and transactions of an extended public key."""
        require_text(xpub, "xpub")
        require_range(limit, "limit", 1, MAX_TRANSACTIONS_PER_MULTI_REQUEST)
        require_range(offset, "offset", 0)

        query_string = QueryString()
        query_string.add("active", xpub)
        query_string.add("limit", limit)
        query_string.add("offset", offset)
        query_string.add("filter", int(filter))
        query_string.add("format", "json")

        try:
            return self.http_client.get("multiaddr", query_string, deserializer=deserialize_xpub)
        except ServerApiError as e:
            if "Invalid Bitcoin Address" in e.message:
                raise InvalidXpubError("xpub", "The xpub provided is invalid") from e
            raise

    def get_unspent_outputs(self,
                            addresses: Iterable[str],
                            limit: int = DEFAULT_UNSPENT_OUTPUTS_PER_REQUEST,
                            confirmations: int = 0) -> List[UnspentOutput]:
        """
        Get the unspent outputs of one or more addresses.

        Addresses with nothing to spend yield an empty list rather than an
        error.
        """
        address_list = require_items(addresses, "addresses", "No addresses provided")
        require_range(limit, "limit", 1, DEFAULT_UNSPENT_OUTPUTS_PER_REQUEST)
        require_range(confirmations, "confirmations", 0)

        query_string = QueryString()
        query_string.add("active", "|".join(address_list))
        query_string.add("limit", limit)
        query_string.add("confirmations", confirmations)
        query_string.add("format", "json")

        try:
            return self.http_client.get("unspent", query_string, deserializer=deserialize_unspent_outputs)
        except ServerApiError as e:
            if "outputs to spend" in e.message:
                logger.debug("No unspent outputs", address_count=len(address_list))
                return []
            if "Invalid Bitcoin Address" in e.message:
                raise InvalidAddressError("addresses", "One or more addresses provided are invalid") from e
            raise

    def _get_address(self, address: str, limit: int, offset: int, filter: FilterType) -> Address:
        require_text(address, "address")
        require_range(limit, "limit", 1, MAX_TRANSACTIONS_PER_REQUEST)
        require_range(offset, "offset", 0)

        query_string = QueryString()
        query_string.add("limit", limit)
        query_string.add("offset", offset)
        query_string.add("filter", int(filter))
        query_string.add("format", "json")

        try:
            return self.http_client.get(f"address/{address}", query_string, response_type=Address)
        except ServerApiError as e:
            if any(fragment in e.message for fragment in ("does not validate", "too short", "Invalid Bitcoin Address")):
                raise InvalidAddressError("address", "The address provided is invalid") from e
            raise

    # ==================== Blocks ====================

    def get_block_by_hash(self, block_hash: str) -> Block:
        require_text(block_hash, "block_hash")
        return self._get_block(block_hash)

    def get_block_by_index(self, index: int) -> Block:
        """Deprecated: look blocks up by hash wherever possible."""
        warnings.warn("get_block_by_index is deprecated, use get_block_by_hash",
                      DeprecationWarning, stacklevel=2)
        require_range(index, "index", 0)
        return self._get_block(str(index))

    def get_blocks_at_height(self, height: int) -> List[Block]:
        """Get every block at a height, orphaned blocks included."""
        require_range(height, "height", 0)

        query_string = QueryString()
        query_string.add("format", "json")
        return self.http_client.get(f"block-height/{height}", query_string, deserializer=deserialize_blocks)

    def get_blocks_by_datetime(self, when: datetime) -> List[SimpleBlock]:
        """
        Get the blocks mined on the day containing ``when``.

        Naive datetimes are taken as UTC.
        """
        if when is None:
            raise ArgumentMissingError("when")

        when = ensure_utc(when)
        unix_millis = datetime_to_unix(when, to_millis=True)
        if unix_millis < GENESIS_BLOCK_UNIX_MILLIS:
            raise ArgumentOutOfRangeError("when", f"Date {GENESIS_MESSAGE}")
        if when > get_current_utc():
            raise ArgumentOutOfRangeError("when", "Date must be in the past")

        return self._get_blocks(str(unix_millis))

    def get_blocks_by_timestamp(self, unix_millis: int) -> List[SimpleBlock]:
        """Get the blocks mined on the day containing a unix millisecond instant."""
        if unix_millis is None:
            raise ArgumentMissingError("unix_millis")
        if unix_millis < GENESIS_BLOCK_UNIX_MILLIS:
            raise ArgumentOutOfRangeError("unix_millis", f"Timestamp {GENESIS_MESSAGE}")
        if unix_millis > datetime_to_unix(get_current_utc(), to_millis=True):
            raise ArgumentOutOfRangeError("unix_millis", "Timestamp must be in the past")

        return self._get_blocks(str(unix_millis))

    def get_blocks_by_pool_name(self, pool_name: str = "") -> List[SimpleBlock]:
        """Get the blocks mined by a pool today."""
        return self._get_blocks(pool_name or "")

    def get_latest_block(self) -> LatestBlock:
        return self.http_client.get("latestblock", response_type=LatestBlock)

    def _get_block(self, hash_or_index: str) -> Block:
        return self.http_client.get(f"rawblock/{hash_or_index}", deserializer=deserialize_block)

    def _get_blocks(self, pool_name_or_timestamp: str) -> List[SimpleBlock]:
        query_string = QueryString()
        query_string.add("format", "json")
        return self.http_client.get(f"blocks/{pool_name_or_timestamp}", query_string,
                                    deserializer=deserialize_simple_blocks)

    # ==================== Transactions ====================

    def get_transaction_by_hash(self, tx_hash: str) -> Transaction:
        require_text(tx_hash, "tx_hash")
        return self._get_transaction(tx_hash)

    def get_transaction_by_index(self, index: int) -> Transaction:
        """Deprecated: look transactions up by hash wherever possible."""
        warnings.warn("get_transaction_by_index is deprecated, use get_transaction_by_hash",
                      DeprecationWarning, stacklevel=2)
        require_range(index, "index", 0)
        return self._get_transaction(str(index))

    def get_unconfirmed_transactions(self) -> List[Transaction]:
        """Get the transactions currently in the mempool."""
        query_string = QueryString()
        query_string.add("format", "json")
        return self.http_client.get("unconfirmed-transactions", query_string,
                                    deserializer=deserialize_transactions)

    def _get_transaction(self, hash_or_index: str) -> Transaction:
        return self.http_client.get(f"rawtx/{hash_or_index}", response_type=Transaction)
