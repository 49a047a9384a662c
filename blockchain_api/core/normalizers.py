"""
Response normalizers.

Each function takes one raw response body and returns typed records. They
reshape the few payloads whose wire layout does not map onto a record
directly (wrapped arrays, block transactions that omit their height, the
xpub summary nested inside ``addresses``).
"""

import json
from typing import Any, Dict, List, Optional

import structlog
from pydantic import TypeAdapter, ValidationError

from blockchain_api.models.bitcoin_value import BitcoinValue
from blockchain_api.models.blockchain import (
    Block,
    SimpleBlock,
    Transaction,
    UnspentOutput,
    Xpub,
)
from blockchain_api.models.fields import to_bitcoin_value, true_trumps_all
from blockchain_api.models.wallet import WalletAddress

logger = structlog.get_logger(__name__)

__all__ = [
    "deserialize_archived",
    "deserialize_block",
    "deserialize_blocks",
    "deserialize_consolidated",
    "deserialize_simple_blocks",
    "deserialize_transactions",
    "deserialize_unarchived",
    "deserialize_unspent_outputs",
    "deserialize_wallet_addresses",
    "deserialize_wallet_balance",
    "deserialize_xpub",
    "parse_number",
    "true_trumps_all",
]

_SIMPLE_BLOCKS = TypeAdapter(List[SimpleBlock])
_TRANSACTIONS = TypeAdapter(List[Transaction])
_UNSPENT_OUTPUTS = TypeAdapter(List[UnspentOutput])
_WALLET_ADDRESSES = TypeAdapter(List[WalletAddress])


def _load_object(text: str) -> Dict[str, Any]:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def _array(data: Dict[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    return value if isinstance(value, list) else []


def _normalize_block(data: Dict[str, Any]) -> Dict[str, Any]:
    """Stamp every transaction of a block with the block height."""
    height = data.get("height")
    transactions = []
    for tx in _array(data, "tx"):
        if isinstance(tx, dict):
            tx = {**tx, "block_height": height, "double_spend": False}
        transactions.append(tx)
    return {**data, "tx": transactions}


# ==================== Blocks ====================


def deserialize_block(text: str) -> Block:
    """Decode a full block, injecting the block height into its transactions."""
    return Block.model_validate(_normalize_block(_load_object(text)))


def deserialize_blocks(text: str) -> List[Block]:
    """
    Decode the ``blocks`` array of a response.

    Elements that do not decode are dropped and logged.
    """
    blocks = []
    for position, element in enumerate(_array(_load_object(text), "blocks")):
        if not isinstance(element, dict):
            logger.warning("Dropping malformed block", position=position, reason="not an object")
            continue
        try:
            blocks.append(Block.model_validate(_normalize_block(element)))
        except ValidationError as e:
            logger.warning("Dropping malformed block",
                           position=position,
                           block_hash=element.get("hash"),
                           errors=e.error_count())
    return blocks


def deserialize_simple_blocks(text: str) -> List[SimpleBlock]:
    return _SIMPLE_BLOCKS.validate_python(_array(_load_object(text), "blocks"))


# ==================== Addresses & transactions ====================


def deserialize_xpub(text: str) -> Xpub:
    """Decode an xpub summary from a multiaddr-shaped response."""
    data = _load_object(text)
    addresses = _array(data, "addresses")
    summary = addresses[0] if addresses and isinstance(addresses[0], dict) else {}
    return Xpub.model_validate({**summary, "txs": data.get("txs")})


def deserialize_transactions(text: str) -> List[Transaction]:
    return _TRANSACTIONS.validate_python(_array(_load_object(text), "txs"))


def deserialize_unspent_outputs(text: str) -> List[UnspentOutput]:
    return _UNSPENT_OUTPUTS.validate_python(_array(_load_object(text), "unspent_outputs"))


# ==================== Wallet ====================


def deserialize_wallet_addresses(text: str) -> List[WalletAddress]:
    return _WALLET_ADDRESSES.validate_python(_array(_load_object(text), "addresses"))


def deserialize_archived(text: str) -> Optional[str]:
    """Address named by an archive response."""
    return _load_object(text).get("archived")


def deserialize_unarchived(text: str) -> Optional[str]:
    """Address named by an unarchive response."""
    return _load_object(text).get("active")


def deserialize_consolidated(text: str) -> List[str]:
    return list(_array(_load_object(text), "consolidated"))


def deserialize_wallet_balance(text: str) -> BitcoinValue:
    """Decode ``{"balance": <satoshis>}``."""
    return to_bitcoin_value(_load_object(text).get("balance"))


# ==================== Plain text ====================


def parse_number(text: str) -> float:
    """Parse a plain-text decimal that may contain thousands separators."""
    cleaned = text.strip().replace(",", "")
    try:
        return float(cleaned)
    except ValueError as e:
        raise ValueError(f"Expected a number, got {text!r}") from e
