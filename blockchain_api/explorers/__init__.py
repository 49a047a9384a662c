"""Domain explorers, one per blockchain.info API area."""

from blockchain_api.explorers.block_explorer import BlockExplorer
from blockchain_api.explorers.exchange_rates import ExchangeRateExplorer
from blockchain_api.explorers.push_tx import TransactionPusher
from blockchain_api.explorers.receive import BalanceUpdate, Receive
from blockchain_api.explorers.statistics import StatisticsExplorer
from blockchain_api.explorers.wallet import Wallet, WalletCreator

__all__ = [
    "BalanceUpdate",
    "BlockExplorer",
    "ExchangeRateExplorer",
    "Receive",
    "StatisticsExplorer",
    "TransactionPusher",
    "Wallet",
    "WalletCreator",
]
