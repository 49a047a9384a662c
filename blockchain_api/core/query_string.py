"""Ordered query string builder."""

from typing import Any, Dict, Iterator, Tuple

from blockchain_api.core.exceptions import DuplicateKeyError


class QueryString:
    """
    Accumulates query parameters in insertion order.

    Values are rendered with ``str()`` and are not URL-encoded; callers pass
    already encoded components (for example ``|``-joined address lists).
    """

    def __init__(self) -> None:
        self._params: Dict[str, str] = {}

    def add(self, key: str, value: Any) -> "QueryString":
        """Add a parameter. Raises DuplicateKeyError if the key is present."""
        if key in self._params:
            raise DuplicateKeyError(key)
        self._params[key] = str(value)
        return self

    def add_or_update(self, key: str, value: Any) -> "QueryString":
        """Add a parameter, overwriting any previous value."""
        self._params[key] = str(value)
        return self

    def copy(self) -> "QueryString":
        """Independent copy with the same parameters in the same order."""
        duplicate = QueryString()
        for key, value in self:
            duplicate.add(key, value)
        return duplicate

    @property
    def count(self) -> int:
        return len(self._params)

    def get(self, key: str) -> str:
        return self._params[key]

    def __contains__(self, key: object) -> bool:
        return key in self._params

    def __len__(self) -> int:
        return len(self._params)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._params.items())

    def __str__(self) -> str:
        if not self._params:
            return ""
        return "?" + "&".join(f"{key}={value}" for key, value in self._params.items())

    def __repr__(self) -> str:
        return f"QueryString({self._params!r})"
