"""Single entry point wiring the transports to every explorer."""

from contextlib import ExitStack
from typing import List, Optional

import structlog

from blockchain_api.core.exceptions import ClientApiError
from blockchain_api.core.http_client import BlockchainHttpClient
from blockchain_api.explorers.block_explorer import BlockExplorer
from blockchain_api.explorers.exchange_rates import ExchangeRateExplorer
from blockchain_api.explorers.push_tx import TransactionPusher
from blockchain_api.explorers.receive import BalanceUpdate, Receive
from blockchain_api.explorers.statistics import StatisticsExplorer
from blockchain_api.explorers.wallet import Wallet, WalletCreator
from blockchain_api.models.config import ClientConfig

logger = structlog.get_logger(__name__)


class BlockchainApiHelper:
    """
    Owns one transport per host and the explorers built on top of them.

    Hosts:
    - main (blockchain.info): block explorer, exchange rates, pushtx
    - statistics (api.blockchain.info): stats, charts, pools
    - receive (api.blockchain.info/v2): receive payments, balance updates
    - wallet service (optional, self-hosted): wallet creation and wallets

    Explicit arguments win over ``config``; ``config`` defaults to a
    ClientConfig read from the environment.
    """

    def __init__(self,
                 api_code: Optional[str] = None,
                 base_http_client: Optional[BlockchainHttpClient] = None,
                 service_url: Optional[str] = None,
                 service_http_client: Optional[BlockchainHttpClient] = None,
                 config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()

        api_code = api_code if api_code is not None else self.config.api_code
        service_url = service_url if service_url is not None else self.config.service_url

        # Transports built here are closed again if a later one fails to build
        with ExitStack() as owned:
            self.base_http_client = self._adopt(owned, base_http_client, api_code, self.config.base_url)
            self.statistics_http_client = self._adopt(owned, None, api_code, self.config.statistics_url)
            self.receive_http_client = self._adopt(owned, None, api_code, self.config.receive_url)

            if service_http_client is not None or service_url is not None:
                self.service_http_client = self._adopt(owned, service_http_client, api_code, service_url)
            else:
                self.service_http_client = None

            owned.pop_all()

        self.block_explorer = BlockExplorer(self.base_http_client)
        self.exchange_rate_explorer = ExchangeRateExplorer(self.base_http_client)
        self.transaction_pusher = TransactionPusher(self.base_http_client)
        self.statistics_explorer = StatisticsExplorer(self.statistics_http_client)
        self.receive = Receive(self.receive_http_client)
        self.balance_update = BalanceUpdate(self.receive_http_client)
        self.wallet_creator = (
            WalletCreator(self.service_http_client) if self.service_http_client is not None else None
        )

        logger.info("Blockchain API helper initialized",
                    has_api_code=api_code is not None,
                    has_wallet_service=self.service_http_client is not None)

    def _adopt(self,
               owned: ExitStack,
               http_client: Optional[BlockchainHttpClient],
               api_code: Optional[str],
               base_url: str) -> BlockchainHttpClient:
        """Use an injected transport (overriding its api code when one is given) or build one."""
        if http_client is None:
            http_client = BlockchainHttpClient(api_code=api_code, base_url=base_url, user_agent=self.config.user_agent)
            owned.callback(http_client.close)
            return http_client
        if api_code is not None:
            http_client.api_code = api_code
        return http_client

    @property
    def http_clients(self) -> List[BlockchainHttpClient]:
        clients = [self.base_http_client, self.statistics_http_client, self.receive_http_client]
        if self.service_http_client is not None:
            clients.append(self.service_http_client)
        return clients

    def initialize_wallet(self,
                          identifier: str,
                          password: str,
                          second_password: Optional[str] = None) -> Wallet:
        """Get a handle on an existing hosted wallet. Needs a wallet service."""
        if self.service_http_client is None:
            raise ClientApiError(
                "In order to use wallets, you must provide a service_url to BlockchainApiHelper"
            )
        return Wallet(self.service_http_client, identifier, password, second_password)

    def close(self) -> None:
        """
        Close every transport, injected ones included.

        Every transport is closed even when closing an earlier one raises; the
        failure is re-raised afterwards.
        """
        with ExitStack() as stack:
            for http_client in reversed(self.http_clients):
                stack.callback(http_client.close)

    def __enter__(self) -> "BlockchainApiHelper":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
