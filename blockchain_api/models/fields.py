"""Annotated pydantic field types for blockchain.info wire encodings."""

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, PlainSerializer

from blockchain_api.models.bitcoin_value import BitcoinValue
from blockchain_api.utils.time import (
    datetime_to_epoch_date,
    datetime_to_epoch_date_offset,
    datetime_to_unix,
    epoch_date_offset_to_datetime,
    epoch_date_to_datetime,
    unix_millis_to_datetime,
    unix_to_datetime,
)


def to_bitcoin_value(value: Any) -> BitcoinValue:
    """Decode a satoshi count. Anything that is not an integer decodes to zero."""
    if isinstance(value, BitcoinValue):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BitcoinValue.from_satoshis(value)
    return BitcoinValue.zero()


def true_trumps_all(existing: Optional[bool], incoming: Any) -> bool:
    """
    Merge a boolean read from the wire into a value that may already be set.

    Once True has been seen it stays True. Otherwise the incoming boolean is
    used, and anything that is not a boolean (including an absent value)
    counts as False.
    """
    if existing is True:
        return True
    if isinstance(incoming, bool):
        return incoming
    return False


def _unix_seconds(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    return unix_to_datetime(value)


def _unix_millis(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    return unix_millis_to_datetime(value)


def _epoch_date(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    return epoch_date_to_datetime(value)


def _epoch_date_offset(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    return epoch_date_offset_to_datetime(value)


Satoshis = Annotated[
    BitcoinValue,
    BeforeValidator(to_bitcoin_value),
    PlainSerializer(lambda v: v.satoshis, return_type=int),
]

UnixTime = Annotated[
    datetime,
    BeforeValidator(_unix_seconds),
    PlainSerializer(lambda v: datetime_to_unix(v), return_type=int),
]

UnixTimeMillis = Annotated[
    datetime,
    BeforeValidator(_unix_millis),
    PlainSerializer(lambda v: datetime_to_unix(v, to_millis=True), return_type=int),
]

EpochDate = Annotated[
    datetime,
    BeforeValidator(_epoch_date),
    PlainSerializer(datetime_to_epoch_date, return_type=str),
]

EpochDateOffset = Annotated[
    datetime,
    BeforeValidator(_epoch_date_offset),
    PlainSerializer(datetime_to_epoch_date_offset, return_type=str),
]
