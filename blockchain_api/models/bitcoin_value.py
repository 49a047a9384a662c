"""Exact bitcoin amounts."""

from decimal import Decimal
from functools import total_ordering
from typing import Any, Union

SATOSHIS_PER_BTC = Decimal("100000000")
BITS_PER_BTC = Decimal("1000000")
MILLIBITS_PER_BTC = Decimal("1000")

Amount = Union[Decimal, int, str]


@total_ordering
class BitcoinValue:
    """
    An immutable bitcoin amount.

    The amount is held as an exact ``Decimal`` count of BTC. It can be read
    back as BTC, millibits, bits or satoshis. Converting to satoshis truncates
    anything below 1e-8 BTC.
    """

    __slots__ = ("_btc",)

    def __init__(self, btc: Amount = 0):
        if isinstance(btc, float):
            btc = str(btc)
        object.__setattr__(self, "_btc", Decimal(btc))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("BitcoinValue is immutable")

    # ==================== Constructors ====================

    @classmethod
    def zero(cls) -> "BitcoinValue":
        return cls(0)

    @classmethod
    def from_btc(cls, btc: Amount) -> "BitcoinValue":
        return cls(btc)

    @classmethod
    def from_millibits(cls, millibits: Amount) -> "BitcoinValue":
        return cls(Decimal(millibits) / MILLIBITS_PER_BTC)

    @classmethod
    def from_bits(cls, bits: Amount) -> "BitcoinValue":
        return cls(Decimal(bits) / BITS_PER_BTC)

    @classmethod
    def from_satoshis(cls, satoshis: int) -> "BitcoinValue":
        return cls(Decimal(int(satoshis)) / SATOSHIS_PER_BTC)

    # ==================== Views ====================

    @property
    def btc(self) -> Decimal:
        return self._btc

    @property
    def millibits(self) -> Decimal:
        return self._btc * MILLIBITS_PER_BTC

    @property
    def bits(self) -> Decimal:
        return self._btc * BITS_PER_BTC

    @property
    def satoshis(self) -> int:
        return int(self._btc * SATOSHIS_PER_BTC)

    # ==================== Arithmetic ====================

    def __add__(self, other: "BitcoinValue") -> "BitcoinValue":
        if not isinstance(other, BitcoinValue):
            return NotImplemented
        return BitcoinValue(self._btc + other._btc)

    def __sub__(self, other: "BitcoinValue") -> "BitcoinValue":
        if not isinstance(other, BitcoinValue):
            return NotImplemented
        return BitcoinValue(self._btc - other._btc)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitcoinValue):
            return NotImplemented
        return self._btc == other._btc

    def __lt__(self, other: "BitcoinValue") -> bool:
        if not isinstance(other, BitcoinValue):
            return NotImplemented
        return self._btc < other._btc

    def __hash__(self) -> int:
        return hash(self._btc)

    def __bool__(self) -> bool:
        return self._btc != 0

    def __str__(self) -> str:
        return str(self._btc)

    def __repr__(self) -> str:
        return f"BitcoinValue({str(self._btc)!r})"
