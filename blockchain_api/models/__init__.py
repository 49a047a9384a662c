"""Data models and configuration."""

from blockchain_api.models.bitcoin_value import BitcoinValue
from blockchain_api.models.blockchain import (
    Address,
    Block,
    FilterType,
    Input,
    LatestBlock,
    MultiAddress,
    Output,
    SimpleBlock,
    Transaction,
    UnspentOutput,
    Xpub,
)
from blockchain_api.models.config import ClientConfig
from blockchain_api.models.market import ChartResponse, ChartValue, Currency, StatisticsResponse
from blockchain_api.models.receive import (
    BalanceUpdateRequest,
    BalanceUpdateResponse,
    CallbackLog,
    ReceivePaymentResponse,
    XpubGap,
)
from blockchain_api.models.wallet import (
    CreateWalletRequest,
    CreateWalletResponse,
    PaymentResponse,
    WalletAddress,
)

__all__ = [
    "Address",
    "BalanceUpdateRequest",
    "BalanceUpdateResponse",
    "BitcoinValue",
    "Block",
    "CallbackLog",
    "ChartResponse",
    "ChartValue",
    "ClientConfig",
    "CreateWalletRequest",
    "CreateWalletResponse",
    "Currency",
    "FilterType",
    "Input",
    "LatestBlock",
    "MultiAddress",
    "Output",
    "PaymentResponse",
    "ReceivePaymentResponse",
    "SimpleBlock",
    "StatisticsResponse",
    "Transaction",
    "UnspentOutput",
    "WalletAddress",
    "Xpub",
    "XpubGap",
]
