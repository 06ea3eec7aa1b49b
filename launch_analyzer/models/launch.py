"""
Input data models for token launch analysis.

This module defines the records a caller supplies to the analyzer: launch
metadata, contract audit results, on-chain metrics, market conditions and
historical launch outcomes.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from launch_analyzer.constants import SECONDS_PER_DAY
from launch_analyzer.models.analysis import LaunchAnalysis
from launch_analyzer.models.base import AnalyzerModel, UtcDatetime


class MarketTrend(str, Enum):
    """Direction of the broader market, usually BTC."""

    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class LaunchOutcome(str, Enum):
    """Final result of a historical launch."""

    SUCCESS = "success"
    FAILURE = "failure"
    RUG_PULL = "rug_pull"


class LiquidityPool(AnalyzerModel):
    """Liquidity pool created at launch."""

    address: str
    initial_liquidity: float = Field(ge=0)
    locked_until: Optional[UtcDatetime] = None


class VestingEntry(AnalyzerModel):
    """A single release in a team vesting schedule."""

    timestamp: UtcDatetime
    amount: float = Field(ge=0)


class TeamTokens(AnalyzerModel):
    """Tokens allocated to the team."""

    amount: float = Field(ge=0)
    vesting_schedule: Optional[List[VestingEntry]] = None

    @property
    def is_vested(self) -> bool:
        """Whether the allocation is released on a schedule."""
        return bool(self.vesting_schedule)


class TokenLaunchData(AnalyzerModel):
    """
    Metadata describing a token launch.

    Timestamps accept datetimes, ISO strings or Unix time in seconds or
    milliseconds. Naive datetimes are taken as UTC.
    """

    token_address: str
    name: str
    symbol: str
    total_supply: float = Field(ge=0)
    initial_price: float = Field(ge=0)
    launch_timestamp: UtcDatetime
    creator_address: str
    liquidity_pool: Optional[LiquidityPool] = None
    team_tokens: Optional[TeamTokens] = None

    @property
    def market_value(self) -> float:
        """Value of the full supply at the initial price."""
        return self.total_supply * self.initial_price

    @property
    def liquidity_ratio(self) -> Optional[float]:
        """Initial liquidity relative to market value.

        None when there is no pool or the market value is zero.
        """
        if self.liquidity_pool is None or self.market_value <= 0:
            return None
        return self.liquidity_pool.initial_liquidity / self.market_value

    @property
    def lock_duration_days(self) -> Optional[float]:
        """Days between launch and liquidity unlock, None when unlocked."""
        if self.liquidity_pool is None or self.liquidity_pool.locked_until is None:
            return None
        delta = self.liquidity_pool.locked_until - self.launch_timestamp
        return delta.total_seconds() / SECONDS_PER_DAY

    @property
    def team_percentage(self) -> float:
        """Share of total supply held by the team, in percent."""
        if self.team_tokens is None or self.total_supply <= 0:
            return 0.0
        return self.team_tokens.amount / self.total_supply * 100


class ContractAudit(AnalyzerModel):
    """Results of a smart contract audit."""

    is_verified: bool
    has_proxy_contract: bool = False
    has_mint_function: bool = False
    has_blacklist_function: bool = False
    has_pause_function: bool = False
    has_ownership_renounced: bool = False
    max_transaction_limit: Optional[float] = None
    buy_tax: float = Field(default=0.0, ge=0, le=100)
    sell_tax: float = Field(default=0.0, ge=0, le=100)
    security_score: float = Field(default=0.0, ge=0, le=100)
    vulnerabilities: List[str] = Field(default_factory=list)


class TokenMetrics(AnalyzerModel):
    """On-chain market metrics for a token."""

    market_cap: float = Field(ge=0)
    fully_diluted_valuation: float = Field(default=0.0, ge=0)
    liquidity_ratio: float = Field(default=0.0, ge=0)
    holder_count: int = Field(ge=0)
    top_holders_percentage: float = Field(ge=0, le=100)
    price_volatility: float = Field(default=0.0, ge=0)
    volume_24h: float = Field(default=0.0, ge=0, alias="volume24h")
    transactions_24h: int = Field(default=0, ge=0, alias="transactions24h")


class MarketConditions(AnalyzerModel):
    """Market backdrop for a launch prediction."""

    btc_trend: MarketTrend = MarketTrend.NEUTRAL
    sector_sentiment: float = Field(default=50.0, ge=0, le=100)


class ActualOutcome(AnalyzerModel):
    """What actually happened after a historical launch."""

    max_gain: float
    time_to_max_gain: float = Field(ge=0)
    final_result: LaunchOutcome


class HistoricalLaunch(AnalyzerModel):
    """A past launch analysis paired with its real outcome."""

    analysis: LaunchAnalysis
    actual_outcome: ActualOutcome
