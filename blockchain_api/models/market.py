"""Exchange rate and network statistics records."""

from typing import List, Optional

from pydantic import Field

from blockchain_api.models.base import ApiModel
from blockchain_api.models.fields import Satoshis, UnixTimeMillis


class Currency(ApiModel):
    """Ticker entry for one fiat currency."""
    buy: float
    last: float
    price_15m: float = Field(alias="15m")
    sell: float
    symbol: str


class StatisticsResponse(ApiModel):
    """Network snapshot returned by the stats endpoint."""
    blocks_size: int
    btc_mined: Satoshis = Field(alias="n_btc_mined")
    difficulty: float
    estimated_btc_sent: Satoshis
    estimated_transaction_volume_usd: float
    hash_rate: float
    market_price_usd: float
    mined_blocks: int = Field(alias="n_blocks_mined")
    miners_revenue_btc: float
    miners_revenue_usd: float
    minutes_between_blocks: float
    next_retarget: int = Field(alias="nextretarget")
    number_of_transactions: int = Field(alias="n_tx")
    timestamp: UnixTimeMillis
    total_blocks: int = Field(alias="n_blocks_total")
    total_btc: Satoshis = Field(alias="totalbc")
    total_btc_sent: Satoshis
    total_fees_btc: Satoshis
    trade_volume_btc: float
    trade_volume_usd: float


class ChartValue(ApiModel):
    x: float
    y: float


class ChartResponse(ApiModel):
    """Chart series. ``timespan`` is the period the series covers."""
    chart_name: Optional[str] = Field(default=None, alias="name")
    description: Optional[str] = None
    timespan: Optional[str] = Field(default=None, alias="period")
    unit: Optional[str] = None
    values: List[ChartValue] = Field(default_factory=list)
