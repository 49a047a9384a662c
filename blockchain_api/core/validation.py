"""Argument checks shared by the explorers. All run before any network call."""

from typing import Any, Iterable, List, Optional

from blockchain_api.core.exceptions import ArgumentMissingError, ArgumentOutOfRangeError
from blockchain_api.models.bitcoin_value import BitcoinValue


def require_text(value: Optional[str], argument: str) -> str:
    """Reject None and blank strings."""
    if value is None or not str(value).strip():
        raise ArgumentMissingError(argument)
    return value


def require_items(values: Optional[Iterable[Any]], argument: str, message: Optional[str] = None) -> List[Any]:
    """Materialise an iterable, rejecting None and empty input."""
    items = list(values) if values is not None else []
    if not items:
        raise ArgumentMissingError(argument, message)
    return items


def require_range(value: int, argument: str, minimum: int, maximum: Optional[int] = None) -> int:
    """Check ``minimum <= value <= maximum`` (no upper bound when maximum is None)."""
    if value is None:
        raise ArgumentMissingError(argument)
    if value < minimum or (maximum is not None and value > maximum):
        if maximum is None:
            bounds = f"greater than or equal to {minimum}"
        else:
            bounds = f"between {minimum} and {maximum}"
        raise ArgumentOutOfRangeError(argument, f"{argument} must be {bounds}, got {value}")
    return value


def require_positive(value: Any, argument: str) -> Any:
    """Reject None and amounts that are zero or negative."""
    if value is None:
        raise ArgumentMissingError(argument)
    amount = value.btc if isinstance(value, BitcoinValue) else value
    if amount <= 0:
        raise ArgumentOutOfRangeError(argument, f"{argument} must be greater than 0")
    return value
