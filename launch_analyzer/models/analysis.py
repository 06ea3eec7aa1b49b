"""
Output data models for token launch analysis.

Every record produced by the analyzer is defined here. Dumping a record
with ``to_json_dict()`` yields camelCase keys (``overallScore``,
``riskLevel``, ``timeToATH``...).
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from launch_analyzer.models.base import AnalyzerModel


class RiskLevel(str, Enum):
    """Risk bucket derived from the overall score."""

    VERY_LOW = "very_low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Recommendation(str, Enum):
    """Action suggested by an analysis."""

    STRONG_BUY = "strong_buy"
    BUY = "buy"
    HOLD = "hold"
    AVOID = "avoid"
    SCAM = "scam"


class Severity(str, Enum):
    """Severity of a red flag."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Importance(str, Enum):
    """Importance of a green flag."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AlertType(str, Enum):
    """Urgency of a monitoring alert."""

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class RedFlag(AnalyzerModel):
    """A negative finding."""

    severity: Severity
    description: str
    impact: str


class GreenFlag(AnalyzerModel):
    """A positive finding."""

    importance: Importance
    description: str


class LaunchAnalysis(AnalyzerModel):
    """Legitimacy and potential assessment of a launch."""

    overall_score: float = Field(ge=0, le=100)
    risk_level: RiskLevel
    legitimacy_score: float = Field(ge=0, le=100)
    potential_score: float = Field(ge=0, le=100)
    red_flags: List[RedFlag] = Field(default_factory=list)
    green_flags: List[GreenFlag] = Field(default_factory=list)
    recommendation: Recommendation
    confidence_level: float = Field(ge=0, le=100)

    @property
    def critical_flags(self) -> List[RedFlag]:
        """Red flags of critical severity."""
        return [flag for flag in self.red_flags if flag.severity == Severity.CRITICAL]

    @property
    def has_critical_flags(self) -> bool:
        return bool(self.critical_flags)


class RugPullProbability(AnalyzerModel):
    """Estimated likelihood of a rug pull."""

    probability: float = Field(ge=0, le=100)
    indicators: List[str] = Field(default_factory=list)
    timeframe: str
    preventative_measures: List[str] = Field(default_factory=list)


class PriceRange(AnalyzerModel):
    """Expected price band."""

    min: float
    max: float


class LaunchPrediction(AnalyzerModel):
    """Predicted performance of a launch."""

    expected_price_range: PriceRange
    time_to_ath: int = Field(alias="timeToATH")  # hours
    expected_return: float  # percent
    success_probability: float = Field(ge=0, le=100)
    factors: List[str] = Field(default_factory=list)


class AverageOutcome(AnalyzerModel):
    """Aggregated outcome of similar historical launches."""

    success_rate: float
    average_gain: float
    average_time: float


class HistoricalComparison(AnalyzerModel):
    """Position of a launch relative to past launches."""

    similar_launches: int
    average_outcome: AverageOutcome
    percentile: float
    ranking: str


class EntryStrategy(AnalyzerModel):
    timing: str
    allocation: float
    price_target: float


class PriceLevel(AnalyzerModel):
    """Portion of a position to close at a price multiple."""

    percentage: float
    price: float


class ExitStrategy(AnalyzerModel):
    take_profit: List[PriceLevel] = Field(default_factory=list)
    stop_loss: PriceLevel


class TradingStrategy(AnalyzerModel):
    """
    Entry, exit and risk rules for a position.

    Prices are multiples of the entry price.
    """

    entry_strategy: EntryStrategy
    exit_strategy: ExitStrategy
    risk_management: List[str] = Field(default_factory=list)


class MonitoringAlert(AnalyzerModel):
    """Condition to watch after launch and the action to take."""

    type: AlertType
    condition: str
    action: str


class LaunchReport(AnalyzerModel):
    """Everything the analyzer can say about one launch."""

    token_address: str
    symbol: str
    analysis: LaunchAnalysis
    rug_pull: RugPullProbability
    prediction: LaunchPrediction
    trading_strategy: TradingStrategy
    monitoring_alerts: List[MonitoringAlert] = Field(default_factory=list)
    honeypot_indicators: List[str] = Field(default_factory=list)
    historical_comparison: Optional[HistoricalComparison] = None
