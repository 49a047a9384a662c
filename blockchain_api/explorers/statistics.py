"""Network statistics, charts and mining pool endpoints."""

from typing import Dict, Optional

from blockchain_api.core.exceptions import ArgumentOutOfRangeError, ServerApiError
from blockchain_api.core.http_client import BlockchainHttpClient
from blockchain_api.core.query_string import QueryString
from blockchain_api.core.validation import require_range, require_text
from blockchain_api.models.market import ChartResponse, StatisticsResponse

MIN_POOLS_TIMESPAN_DAYS = 1
MAX_POOLS_TIMESPAN_DAYS = 10


class StatisticsExplorer:
    """Queries against the statistics host (api.blockchain.info)."""

    def __init__(self, http_client: BlockchainHttpClient):
        self.http_client = http_client

    def get_stats(self) -> StatisticsResponse:
        query_string = QueryString()
        query_string.add("format", "json")
        return self.http_client.get("stats", query_string, response_type=StatisticsResponse)

    def get_chart(self,
                  chart_type: str,
                  timespan: Optional[str] = None,
                  rolling_average: Optional[str] = None) -> ChartResponse:
        """
        Get a chart series.

        Args:
            chart_type: Chart name, e.g. "market-price"
            timespan: Period to cover, e.g. "5weeks"
            rolling_average: Averaging window, e.g. "8hours"
        """
        require_text(chart_type, "chart_type")

        query_string = QueryString()
        query_string.add("format", "json")
        if timespan is not None:
            query_string.add("timespan", timespan)
        if rolling_average is not None:
            query_string.add("rollingAverage", rolling_average)

        try:
            return self.http_client.get(f"charts/{chart_type}", query_string, response_type=ChartResponse)
        except ServerApiError as e:
            if "No chart with this name" in e.message or "Not Found" in e.message:
                raise ArgumentOutOfRangeError("chart_type", "This chart name does not exist") from e
            if "Could not parse timestring" in e.message:
                raise ArgumentOutOfRangeError("timespan", "Incorrect timespan format") from e
            raise

    def get_pools(self, timespan: int = 4) -> Dict[str, int]:
        """Get the number of blocks mined by each pool over the last ``timespan`` days."""
        require_range(timespan, "timespan", MIN_POOLS_TIMESPAN_DAYS, MAX_POOLS_TIMESPAN_DAYS)

        query_string = QueryString()
        query_string.add("format", "json")
        query_string.add("timespan", f"{timespan}days")
        return self.http_client.get("pools", query_string, response_type=Dict[str, int])
