"""Exchange rate endpoints."""

from typing import Dict

from blockchain_api.core.http_client import BlockchainHttpClient
from blockchain_api.core.normalizers import parse_number
from blockchain_api.core.query_string import QueryString
from blockchain_api.core.validation import require_positive, require_text
from blockchain_api.models.bitcoin_value import BitcoinValue
from blockchain_api.models.market import Currency


class ExchangeRateExplorer:
    """Ticker and currency conversion queries."""

    def __init__(self, http_client: BlockchainHttpClient):
        self.http_client = http_client

    def get_ticker(self) -> Dict[str, Currency]:
        """Get the current price of bitcoin keyed by currency code (USD, EUR, ...)."""
        return self.http_client.get("ticker", response_type=Dict[str, Currency])

    def to_btc(self, currency: str, value: float) -> float:
        """
        Convert an amount of a fiat currency to BTC.

        Args:
            currency: Currency code, as listed by get_ticker
            value: Amount of the currency (must be > 0)
        """
        require_text(currency, "currency")
        require_positive(value, "value")

        query_string = QueryString()
        query_string.add("currency", currency)
        query_string.add("value", value)
        return self.http_client.get("tobtc", query_string, deserializer=parse_number)

    def from_btc(self, btc: BitcoinValue, currency: str = "USD") -> float:
        """Convert a bitcoin amount to a fiat currency."""
        require_positive(btc, "btc")

        query_string = QueryString()
        query_string.add("currency", currency)
        query_string.add("value", btc.satoshis)
        return self.http_client.get("frombtc", query_string, deserializer=parse_number)
