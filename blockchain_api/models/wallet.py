"""Wallet service records."""

from typing import Optional

from pydantic import Field

from blockchain_api.models.base import ApiModel
from blockchain_api.models.bitcoin_value import BitcoinValue
from blockchain_api.models.fields import Satoshis


class WalletAddress(ApiModel):
    """An address held by a hosted wallet."""
    address: str
    balance: Satoshis = Field(default_factory=BitcoinValue.zero)
    label: Optional[str] = None
    total_received: Satoshis = Field(default_factory=BitcoinValue.zero)


class PaymentResponse(ApiModel):
    """Result of a send or send-many call."""
    message: str
    notice: str = ""
    tx_hash: str


class CreateWalletRequest(ApiModel):
    api_code: Optional[str] = None
    email: Optional[str] = None
    label: Optional[str] = None
    password: Optional[str] = None
    private_key: Optional[str] = Field(default=None, alias="privateKey")


class CreateWalletResponse(ApiModel):
    """A newly created wallet. ``identifier`` is the wallet guid."""
    address: str
    identifier: str = Field(alias="guid")
    label: Optional[str] = None
