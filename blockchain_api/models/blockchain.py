"""Block, transaction and address records."""

from enum import IntEnum
from typing import Any, ClassVar, List, Optional

from pydantic import Field, field_validator, model_validator

from blockchain_api.models.base import ApiModel
from blockchain_api.models.fields import Satoshis, UnixTime, true_trumps_all

DEFAULT_RELAY = "0.0.0.0"


class FilterType(IntEnum):
    """Transaction filter for multi-address and xpub queries."""
    ALL = 4
    CONFIRMED_ONLY = 5
    REMOVE_UNSPENDABLE = 6


class Output(ApiModel):
    """Transaction output."""
    address: Optional[str] = Field(default="", alias="addr")
    n: int
    script: str
    spent: bool
    tx_index: int
    value: Satoshis


class Input(ApiModel):
    """Transaction input. A missing previous output marks a coinbase input."""
    previous_output: Optional[Output] = Field(default=None, alias="prev_out")
    script_signature: str = Field(alias="script")
    sequence: int

    @property
    def is_coinbase(self) -> bool:
        return self.previous_output is None


class Transaction(ApiModel):
    """A transaction. ``block_height`` is -1 (or None) while unconfirmed."""
    block_height: Optional[int] = -1
    double_spend: Optional[bool] = False
    hash: str
    index: int = Field(alias="tx_index")
    inputs: List[Input]
    outputs: List[Output] = Field(alias="out")
    relayed_by: Optional[str] = None
    size: int
    time: UnixTime
    version: int = Field(alias="ver")

    @property
    def is_confirmed(self) -> bool:
        return self.block_height is not None and self.block_height >= 0


class SimpleBlock(ApiModel):
    """Block header fields shared by every block variant."""

    MAIN_CHAIN_DEFAULT: ClassVar[bool] = False

    hash: str
    height: int
    main_chain: bool = Field(default=False, validate_default=True)
    time: UnixTime

    @field_validator("main_chain", mode="before")
    @classmethod
    def _merge_main_chain(cls, value: Any) -> bool:
        return true_trumps_all(cls.MAIN_CHAIN_DEFAULT, value)


class Block(SimpleBlock):
    """A full block including its transactions."""
    bits: int
    fee: Satoshis
    index: int = Field(alias="block_index")
    merkle_root: str = Field(alias="mrkl_root")
    nonce: int
    previous_block_hash: str = Field(alias="prev_block")
    received_time: UnixTime
    relayed_by: str = DEFAULT_RELAY
    size: int
    transactions: List[Transaction] = Field(alias="tx")
    version: int = Field(alias="ver")

    @model_validator(mode="before")
    @classmethod
    def _apply_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        data = dict(data)
        if data.get("received_time") is None:
            data["received_time"] = data.get("time")
        if data.get("relayed_by") is None:
            data["relayed_by"] = DEFAULT_RELAY
        return data


class LatestBlock(SimpleBlock):
    """The latest block on the main chain, with transaction indexes only."""

    MAIN_CHAIN_DEFAULT: ClassVar[bool] = True

    index: int = Field(alias="block_index")
    transaction_indexes: List[int] = Field(alias="txIndexes")


class Address(ApiModel):
    """Balance summary for an address, with an optional page of transactions."""
    address: Optional[str] = None
    hash160: Optional[str] = None
    final_balance: Satoshis
    total_received: Satoshis
    total_sent: Satoshis
    transaction_count: int = Field(alias="n_tx")
    transactions: Optional[List[Transaction]] = Field(default=None, alias="txs")


class Xpub(Address):
    """Address summary of an extended public key."""
    account_index: int = 0
    change_index: int = 0
    gap_limit: int = 0


class MultiAddress(ApiModel):
    """Combined response for several addresses."""
    addresses: List[Address]
    transactions: List[Transaction] = Field(alias="txs")


class UnspentOutput(ApiModel):
    """A spendable output."""
    confirmations: int
    n: int = Field(alias="tx_output_n")
    script: str
    transaction_hash: str = Field(alias="tx_hash")
    transaction_index: int = Field(alias="tx_index")
    value: Satoshis
