"""Utility functions and helpers."""

from blockchain_api.utils.logging import setup_logging
from blockchain_api.utils.time import (
    datetime_to_epoch_date,
    datetime_to_epoch_date_offset,
    datetime_to_unix,
    epoch_date_offset_to_datetime,
    epoch_date_to_datetime,
    unix_millis_to_datetime,
    unix_to_datetime,
)

__all__ = [
    "datetime_to_epoch_date",
    "datetime_to_epoch_date_offset",
    "datetime_to_unix",
    "epoch_date_offset_to_datetime",
    "epoch_date_to_datetime",
    "setup_logging",
    "unix_millis_to_datetime",
    "unix_to_datetime",
]
