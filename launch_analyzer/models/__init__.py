"""Data models for the launch analyzer."""

from typing import Any, Type, TypeVar

from launch_analyzer.models.analysis import (
    AlertType,
    AverageOutcome,
    EntryStrategy,
    ExitStrategy,
    GreenFlag,
    HistoricalComparison,
    Importance,
    LaunchAnalysis,
    LaunchPrediction,
    LaunchReport,
    MonitoringAlert,
    PriceLevel,
    PriceRange,
    Recommendation,
    RedFlag,
    RiskLevel,
    RugPullProbability,
    Severity,
    TradingStrategy,
)
from launch_analyzer.models.base import AnalyzerModel
from launch_analyzer.models.launch import (
    ActualOutcome,
    ContractAudit,
    HistoricalLaunch,
    LaunchOutcome,
    LiquidityPool,
    MarketConditions,
    MarketTrend,
    TeamTokens,
    TokenLaunchData,
    TokenMetrics,
    VestingEntry,
)

M = TypeVar("M", bound=AnalyzerModel)


def coerce_model(model_class: Type[M], value: Any) -> M:
    """Return ``value`` as an instance of ``model_class``.

    Instances pass through untouched; mappings are validated.

    Raises:
        pydantic.ValidationError: If the value does not fit the model
    """
    if isinstance(value, model_class):
        return value
    return model_class.model_validate(value)


__all__ = [
    "ActualOutcome",
    "AlertType",
    "AnalyzerModel",
    "AverageOutcome",
    "ContractAudit",
    "EntryStrategy",
    "ExitStrategy",
    "GreenFlag",
    "HistoricalComparison",
    "HistoricalLaunch",
    "Importance",
    "LaunchAnalysis",
    "LaunchOutcome",
    "LaunchPrediction",
    "LaunchReport",
    "LiquidityPool",
    "MarketConditions",
    "MarketTrend",
    "MonitoringAlert",
    "PriceLevel",
    "PriceRange",
    "Recommendation",
    "RedFlag",
    "RiskLevel",
    "RugPullProbability",
    "Severity",
    "TeamTokens",
    "TokenLaunchData",
    "TokenMetrics",
    "TradingStrategy",
    "VestingEntry",
    "coerce_model",
]
