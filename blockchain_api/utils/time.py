"""Timestamp codecs for the encodings used by blockchain.info endpoints."""

import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Union

from blockchain_api.core.exceptions import ArgumentOutOfRangeError, DecodeError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

GENESIS_BLOCK_UNIX_SECONDS = 1231006505
GENESIS_BLOCK_UNIX_MILLIS = GENESIS_BLOCK_UNIX_SECONDS * 1000
GENESIS_BLOCK_TIME = datetime(2009, 1, 3, 18, 15, 5, tzinfo=timezone.utc)

_EPOCH_DATE_PATTERN = re.compile(r"^(?:Date\(([+-]?\d+)\)|/Date\(([+-]?\d+)\)/)$")
_EPOCH_DATE_OFFSET_PATTERN = re.compile(r"^/Date\(([+-]?\d+)([+-])(\d{2})(\d{2})\)/$")

Numeric = Union[int, float, Decimal, str]


def _to_decimal(value: Numeric) -> Decimal:
    if isinstance(value, bool):
        raise DecodeError(f"Expected a unix timestamp, got {value!r}")
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        raise DecodeError(f"Expected a unix timestamp, got {value!r}") from e
    if not number.is_finite():
        raise DecodeError(f"Expected a unix timestamp, got {value!r}")
    return number


def _from_epoch_millis(millis: Union[int, float], value: object) -> datetime:
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as e:
        raise DecodeError(f"Timestamp out of range: {value!r}") from e


def ensure_utc(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


# ==================== Unix seconds / millis ====================


def unix_to_datetime(value: Numeric, from_millis: bool = False) -> datetime:
    """
    Decode a unix timestamp given as a number or numeric string.

    Instants earlier than the genesis block are rejected with
    ArgumentOutOfRangeError.
    """
    millis = _to_decimal(value)
    if not from_millis:
        millis *= 1000

    if millis < GENESIS_BLOCK_UNIX_MILLIS:
        raise ArgumentOutOfRangeError(
            "timestamp",
            "No date can be before the genesis block (2009-01-03T18:15:05+00:00)",
        )

    return _from_epoch_millis(float(millis), value)


def unix_millis_to_datetime(value: Numeric) -> datetime:
    """Decode a unix timestamp in milliseconds."""
    return unix_to_datetime(value, from_millis=True)


def datetime_to_unix(dt: datetime, to_millis: bool = False) -> int:
    """Encode a datetime as unix seconds (or milliseconds)."""
    delta = ensure_utc(dt) - EPOCH
    millis = (delta.days * 86_400_000) + (delta.seconds * 1000) + (delta.microseconds // 1000)
    return millis if to_millis else millis // 1000


# ==================== Date(N) strings ====================


def epoch_date_to_datetime(value: Union[int, str]) -> datetime:
    """
    Decode a millisecond instant given as a bare integer or as ``Date(±N)``.

    The ``/Date(N)/`` wrapper written by :func:`datetime_to_epoch_date` is
    accepted as well.
    """
    if isinstance(value, bool):
        raise DecodeError(f"Unrecognised date value {value!r}")

    if isinstance(value, int):
        formatted = f"Date({value})"
    elif isinstance(value, str):
        formatted = value.strip()
        if formatted.isdigit():
            formatted = f"Date({formatted})"
    else:
        raise DecodeError(f"Unrecognised date value {value!r}")

    match = _EPOCH_DATE_PATTERN.match(formatted)
    if not match:
        raise DecodeError(f"Unrecognised date value {value!r}")

    return _from_epoch_millis(int(match.group(1) or match.group(2)), value)


def datetime_to_epoch_date(dt: datetime) -> str:
    """Encode a datetime as ``/Date(N)/`` where N is unix milliseconds."""
    return f"/Date({datetime_to_unix(dt, to_millis=True)})/"


# ==================== Date(N±hhmm) strings ====================


def epoch_date_offset_to_datetime(value: str) -> datetime:
    """Decode ``/Date(N±hhmm)/`` into an aware datetime in the given offset."""
    if not isinstance(value, str):
        raise DecodeError(f"Unrecognised date value {value!r}")

    match = _EPOCH_DATE_OFFSET_PATTERN.match(value.strip())
    if not match:
        raise DecodeError(f"Unrecognised date value {value!r}")

    millis, sign, hours, minutes = match.groups()
    direction = 1 if sign == "+" else -1
    offset = timedelta(hours=int(hours), minutes=int(minutes)) * direction
    if abs(offset) >= timedelta(days=1):
        raise DecodeError(f"UTC offset out of range in {value!r}")

    instant = _from_epoch_millis(int(millis), value)
    try:
        return instant.astimezone(timezone(offset))
    except OverflowError as e:
        raise DecodeError(f"Timestamp out of range: {value!r}") from e


def datetime_to_epoch_date_offset(dt: datetime) -> str:
    """Encode an aware datetime as ``/Date(N±hhmm)/``."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    offset = dt.utcoffset() or timedelta(0)
    sign = "+" if offset >= timedelta(0) else "-"
    total_minutes = abs(int(offset.total_seconds())) // 60
    hours, minutes = divmod(total_minutes, 60)

    return f"/Date({datetime_to_unix(dt, to_millis=True)}{sign}{hours:02d}{minutes:02d})/"


def get_current_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)
