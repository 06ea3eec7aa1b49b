"""Token launch analysis: legitimacy scoring, rug pull risk and launch predictions."""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from launch_analyzer.config import AnalyzerSettings
from launch_analyzer.constants import (
    BASE_LEGITIMACY_SCORE,
    BASE_POTENTIAL_SCORE,
    CANNOT_SELL_KEYWORDS,
    CANNOT_SELL_TAX_THRESHOLD,
    CONCENTRATED_HOLDERS_PERCENTAGE,
    CRITICAL_FLAG_ESCALATION,
    DISTRIBUTED_HOLDERS_PERCENTAGE,
    EXCESSIVE_TAX_THRESHOLD,
    FAIR_TAX_THRESHOLD,
    FIRST_TAKE_PROFIT_MULTIPLE,
    HEAVILY_CONCENTRATED_HOLDERS_PERCENTAGE,
    HIGH_TAX_THRESHOLD,
    HONEYPOT_INDICATORS,
    IMMINENT_UNLOCK_DAYS,
    INITIAL_COMMUNITY_HOLDERS,
    LARGE_TEAM_ALLOCATION,
    LEGITIMACY_WEIGHT,
    LONG_LOCK_DAYS,
    LOW_HOLDER_COUNT,
    LOW_LIQUIDITY_RATIO,
    LOW_RISK_ALLOCATION,
    MAX_SCORE,
    MEDIUM_RISK_ALLOCATION,
    MIN_SCORE,
    POTENTIAL_WEIGHT,
    REFERENCE_PRICE,
    RISK_LEVEL_THRESHOLDS,
    RUG_PULL_PREVENTATIVE_MEASURES,
    SECONDS_PER_DAY,
    SHORT_LOCK_DAYS,
    SIMILARITY_WINDOW,
    STOP_LOSS_MULTIPLE,
    STRONG_COMMUNITY_HOLDERS,
    STRONG_LIQUIDITY_RATIO,
    UNVERIFIED_CONFIDENCE,
    UNVESTED_TEAM_ALLOCATION,
    VERIFIED_CONFIDENCE,
    VERY_LOW_HOLDER_COUNT,
)
from launch_analyzer.decorators import handle_validation_errors, measure_execution_time
from launch_analyzer.logging_config import get_logger, log_with_context
from launch_analyzer.models import (
    AlertType,
    AverageOutcome,
    ContractAudit,
    EntryStrategy,
    ExitStrategy,
    GreenFlag,
    HistoricalComparison,
    HistoricalLaunch,
    Importance,
    LaunchAnalysis,
    LaunchOutcome,
    LaunchPrediction,
    LaunchReport,
    MarketConditions,
    MarketTrend,
    MonitoringAlert,
    PriceLevel,
    PriceRange,
    Recommendation,
    RedFlag,
    RiskLevel,
    RugPullProbability,
    Severity,
    TokenLaunchData,
    TokenMetrics,
    TradingStrategy,
    coerce_model,
)
from launch_analyzer.models.base import ensure_utc
from launch_analyzer.utils.errors import ValidationError

# Set up logging
logger = get_logger(__name__)

ModelInput = Union[Dict[str, Any], Any]
FlagText = Union[str, Callable[[TokenLaunchData, ContractAudit, TokenMetrics], str]]


def _clamp(value: float, low: float = MIN_SCORE, high: float = MAX_SCORE) -> float:
    return max(low, min(high, value))


def _format_number(value: float) -> str:
    """Render a number without trailing zeros (5 -> "5", 2.5 -> "2.5")."""
    return f"{round(value, 2):g}"


def _days_until(moment: datetime, now: datetime) -> float:
    return (moment - now).total_seconds() / SECONDS_PER_DAY


# ===============================================================
# RULE TABLE
# ===============================================================

@dataclass
class _ScoreCard:
    """Running totals while the launch rules are applied."""

    legitimacy: float = BASE_LEGITIMACY_SCORE
    potential: float = BASE_POTENTIAL_SCORE
    red_flags: List[RedFlag] = field(default_factory=list)
    green_flags: List[GreenFlag] = field(default_factory=list)


def _red(severity: Severity, description: FlagText, impact: str):
    def build(launch, audit, metrics) -> RedFlag:
        text = description(launch, audit, metrics) if callable(description) else description
        return RedFlag(severity=severity, description=text, impact=impact)
    return build


def _green(importance: Importance, description: FlagText):
    def build(launch, audit, metrics) -> GreenFlag:
        text = description(launch, audit, metrics) if callable(description) else description
        return GreenFlag(importance=importance, description=text)
    return build


@dataclass(frozen=True)
class LaunchRule:
    """A single check: when ``applies`` holds, adjust scores and raise a flag."""

    name: str
    applies: Callable[[TokenLaunchData, ContractAudit, TokenMetrics], bool]
    legitimacy: float = 0.0
    potential: float = 0.0
    red_flag: Optional[Callable[..., RedFlag]] = None
    green_flag: Optional[Callable[..., GreenFlag]] = None

    def apply(self, card: _ScoreCard, launch: TokenLaunchData,
              audit: ContractAudit, metrics: TokenMetrics) -> bool:
        if not self.applies(launch, audit, metrics):
            return False

        card.legitimacy += self.legitimacy
        card.potential += self.potential
        if self.red_flag is not None:
            card.red_flags.append(self.red_flag(launch, audit, metrics))
        if self.green_flag is not None:
            card.green_flags.append(self.green_flag(launch, audit, metrics))
        return True


def _has_low_liquidity(launch: TokenLaunchData, *_) -> bool:
    ratio = launch.liquidity_ratio
    return ratio is not None and ratio < LOW_LIQUIDITY_RATIO


def _has_strong_liquidity(launch: TokenLaunchData, *_) -> bool:
    ratio = launch.liquidity_ratio
    return ratio is not None and ratio > STRONG_LIQUIDITY_RATIO


def _has_long_lock(launch: TokenLaunchData, *_) -> bool:
    days = launch.lock_duration_days
    return days is not None and days > LONG_LOCK_DAYS


def _has_short_lock(launch: TokenLaunchData, *_) -> bool:
    days = launch.lock_duration_days
    return days is not None and days < SHORT_LOCK_DAYS


def _lock_days(launch: TokenLaunchData) -> int:
    return math.floor(launch.lock_duration_days)


# Order matters only for the order of the produced flags; every rule is
# evaluated independently against the same inputs.
LAUNCH_RULES = (
    # Contract security
    LaunchRule(
        "unverified_contract",
        lambda launch, audit, metrics: not audit.is_verified,
        legitimacy=-30,
        red_flag=_red(Severity.CRITICAL, "Contract is not verified",
                      "Cannot verify contract legitimacy and safety"),
    ),
    LaunchRule(
        "verified_contract",
        lambda launch, audit, metrics: audit.is_verified,
        green_flag=_green(Importance.HIGH, "Contract is verified"),
    ),
    LaunchRule(
        "mint_function",
        lambda launch, audit, metrics: audit.has_mint_function,
        legitimacy=-25,
        red_flag=_red(Severity.HIGH, "Contract has mint function",
                      "Owner can create unlimited tokens, diluting holders"),
    ),
    LaunchRule(
        "blacklist_function",
        lambda launch, audit, metrics: audit.has_blacklist_function,
        legitimacy=-20,
        red_flag=_red(Severity.HIGH, "Contract has blacklist function",
                      "Owner can prevent specific addresses from trading"),
    ),
    LaunchRule(
        "pause_function",
        lambda launch, audit, metrics: audit.has_pause_function,
        legitimacy=-15,
        red_flag=_red(Severity.MEDIUM, "Contract has pause function",
                      "Owner can halt all trading"),
    ),
    LaunchRule(
        "ownership_renounced",
        lambda launch, audit, metrics: audit.has_ownership_renounced,
        legitimacy=10,
        green_flag=_green(Importance.HIGH, "Ownership has been renounced"),
    ),

    # Taxes
    LaunchRule(
        "high_taxes",
        lambda launch, audit, metrics: (audit.buy_tax > HIGH_TAX_THRESHOLD
                                        or audit.sell_tax > HIGH_TAX_THRESHOLD),
        legitimacy=-20,
        red_flag=_red(
            Severity.HIGH,
            lambda launch, audit, metrics: (
                f"High taxes: {_format_number(audit.buy_tax)}% buy / "
                f"{_format_number(audit.sell_tax)}% sell"
            ),
            "High taxes reduce profit potential and may indicate scam",
        ),
    ),
    LaunchRule(
        "fair_taxes",
        lambda launch, audit, metrics: (audit.buy_tax == audit.sell_tax
                                        and audit.buy_tax <= FAIR_TAX_THRESHOLD),
        potential=5,
        green_flag=_green(Importance.MEDIUM, "Fair and balanced tax structure"),
    ),

    # Liquidity
    LaunchRule(
        "low_liquidity",
        _has_low_liquidity,
        legitimacy=-30,
        red_flag=_red(Severity.CRITICAL, "Very low initial liquidity",
                      "High price volatility and manipulation risk"),
    ),
    LaunchRule(
        "strong_liquidity",
        _has_strong_liquidity,
        potential=10,
        green_flag=_green(Importance.HIGH, "Strong initial liquidity"),
    ),
    LaunchRule(
        "long_liquidity_lock",
        _has_long_lock,
        legitimacy=15,
        potential=10,
        green_flag=_green(
            Importance.HIGH,
            lambda launch, audit, metrics: f"Liquidity locked for {_lock_days(launch)} days",
        ),
    ),
    LaunchRule(
        "short_liquidity_lock",
        _has_short_lock,
        legitimacy=-25,
        red_flag=_red(
            Severity.HIGH,
            lambda launch, audit, metrics: f"Liquidity locked for only {_lock_days(launch)} days",
            "Rug pull risk - liquidity can be removed soon",
        ),
    ),
    LaunchRule(
        "unlocked_liquidity",
        lambda launch, audit, metrics: launch.lock_duration_days is None,
        legitimacy=-40,
        red_flag=_red(Severity.CRITICAL, "Liquidity is not locked",
                      "Immediate rug pull risk"),
    ),

    # Holder distribution
    LaunchRule(
        "concentrated_holders",
        lambda launch, audit, metrics: (metrics.top_holders_percentage
                                        > CONCENTRATED_HOLDERS_PERCENTAGE),
        legitimacy=-20,
        red_flag=_red(
            Severity.HIGH,
            lambda launch, audit, metrics: (
                f"Top holders own {metrics.top_holders_percentage:.1f}% of supply"
            ),
            "Centralized ownership increases manipulation risk",
        ),
    ),
    LaunchRule(
        "distributed_holders",
        lambda launch, audit, metrics: (metrics.top_holders_percentage
                                        < DISTRIBUTED_HOLDERS_PERCENTAGE),
        potential=10,
        green_flag=_green(Importance.MEDIUM, "Well-distributed token ownership"),
    ),
    LaunchRule(
        "strong_community",
        lambda launch, audit, metrics: metrics.holder_count > STRONG_COMMUNITY_HOLDERS,
        potential=15,
        green_flag=_green(
            Importance.HIGH,
            lambda launch, audit, metrics: f"{metrics.holder_count} holders shows strong community",
        ),
    ),
    LaunchRule(
        "few_holders",
        lambda launch, audit, metrics: metrics.holder_count < VERY_LOW_HOLDER_COUNT,
        potential=-10,
        red_flag=_red(Severity.MEDIUM, "Very few holders", "Limited community support"),
    ),

    # Team allocation
    LaunchRule(
        "large_team_allocation",
        lambda launch, audit, metrics: (launch.team_tokens is not None
                                        and launch.team_percentage > LARGE_TEAM_ALLOCATION),
        legitimacy=-15,
        red_flag=_red(
            Severity.HIGH,
            lambda launch, audit, metrics: f"Team holds {launch.team_percentage:.1f}% of supply",
            "High sell pressure risk",
        ),
    ),
    LaunchRule(
        "vested_team_tokens",
        lambda launch, audit, metrics: (launch.team_tokens is not None
                                        and launch.team_tokens.is_vested),
        legitimacy=10,
        green_flag=_green(Importance.HIGH, "Team tokens have vesting schedule"),
    ),
    LaunchRule(
        "unvested_team_tokens",
        lambda launch, audit, metrics: (launch.team_tokens is not None
                                        and not launch.team_tokens.is_vested
                                        and launch.team_percentage > UNVESTED_TEAM_ALLOCATION),
        legitimacy=-10,
        red_flag=_red(Severity.MEDIUM, "Team tokens not vested",
                      "Team can dump tokens immediately"),
    ),
)


def risk_level_for(overall_score: float, critical_flag_count: int = 0) -> RiskLevel:
    """Map an overall score to a risk level.

    Multiple critical red flags rate the launch critical whatever its score.
    """
    # An unverified contract with unlocked liquidity must never rate below high,
    # and on its own that launch can still score 40 or more.
    if critical_flag_count >= CRITICAL_FLAG_ESCALATION:
        return RiskLevel.CRITICAL

    for threshold, name in RISK_LEVEL_THRESHOLDS:
        if overall_score >= threshold:
            return RiskLevel(name)
    return RiskLevel.CRITICAL


def recommendation_for(overall_score: float, critical_flag_count: int = 0) -> Recommendation:
    """Map an overall score to a recommendation.

    Any critical red flag rules out buying; multiple ones mark a scam.
    """
    # Unverified launches without any liquidity lock score 25 yet are scams.
    if critical_flag_count >= CRITICAL_FLAG_ESCALATION:
        return Recommendation.SCAM
    if overall_score >= 80 and critical_flag_count == 0:
        return Recommendation.STRONG_BUY
    if overall_score >= 60 and critical_flag_count == 0:
        return Recommendation.BUY
    if overall_score >= 40:
        return Recommendation.HOLD
    if overall_score >= 20:
        return Recommendation.AVOID
    return Recommendation.SCAM


def _ranking_for(percentile: float) -> str:
    if percentile > 90:
        return "Top 10% - Exceptional"
    if percentile > 75:
        return "Top 25% - Very Good"
    if percentile > 50:
        return "Above Average"
    if percentile > 25:
        return "Below Average"
    return "Bottom 25% - Poor"


def _rug_pull_timeframe(probability: float) -> str:
    if probability > 80:
        return "Immediate - within 24 hours"
    if probability > 60:
        return "Short-term - within 7 days"
    if probability > 40:
        return "Medium-term - within 30 days"
    return "Low immediate risk"


# ===============================================================
# ANALYZER
# ===============================================================

class TokenLaunchAnalyzer:
    """Evaluates new token launches for legitimacy and potential.

    All methods are pure: they read their arguments and return new records.
    Arguments may be model instances or plain dictionaries (snake_case or
    camelCase keys); dictionaries are validated and malformed input raises
    ``launch_analyzer.utils.errors.ValidationError``.
    """

    HONEYPOT_INDICATORS = HONEYPOT_INDICATORS

    def __init__(self, similarity_window: float = SIMILARITY_WINDOW,
                 rules: Sequence[LaunchRule] = LAUNCH_RULES):
        """Initialize the analyzer.

        Args:
            similarity_window: Maximum score distance for a historical launch
                to count as similar
            rules: Ordered launch rules applied by ``analyze_launch``
        """
        if similarity_window <= 0:
            raise ValidationError(
                "Similarity window must be positive",
                details={"similarity_window": similarity_window}
            )
        self.similarity_window = similarity_window
        self.rules = tuple(rules)

    @classmethod
    def from_settings(cls, settings: AnalyzerSettings) -> "TokenLaunchAnalyzer":
        """Build an analyzer from runtime settings."""
        return cls(similarity_window=settings.SIMILARITY_WINDOW)

    @handle_validation_errors
    def analyze_launch(self, launch_data: ModelInput, contract_audit: ModelInput,
                       metrics: ModelInput) -> LaunchAnalysis:
        """Comprehensive analysis of a token launch.

        Args:
            launch_data: Launch metadata
            contract_audit: Contract audit results
            metrics: On-chain metrics

        Returns:
            The launch analysis
        """
        launch = coerce_model(TokenLaunchData, launch_data)
        audit = coerce_model(ContractAudit, contract_audit)
        metrics = coerce_model(TokenMetrics, metrics)

        card = _ScoreCard()
        for rule in self.rules:
            if rule.apply(card, launch, audit, metrics):
                logger.debug(f"Rule {rule.name} applied to {launch.symbol}")

        legitimacy_score = _clamp(card.legitimacy)
        potential_score = _clamp(card.potential)
        overall_score = legitimacy_score * LEGITIMACY_WEIGHT + potential_score * POTENTIAL_WEIGHT

        critical_count = sum(1 for flag in card.red_flags if flag.severity == Severity.CRITICAL)
        analysis = LaunchAnalysis(
            overall_score=overall_score,
            risk_level=risk_level_for(overall_score, critical_count),
            legitimacy_score=legitimacy_score,
            potential_score=potential_score,
            red_flags=card.red_flags,
            green_flags=card.green_flags,
            recommendation=recommendation_for(overall_score, critical_count),
            confidence_level=VERIFIED_CONFIDENCE if audit.is_verified else UNVERIFIED_CONFIDENCE,
        )

        log_with_context(
            logger,
            "info",
            f"Launch analysis completed for {launch.symbol}, risk level: {analysis.risk_level.value}",
            token_address=launch.token_address,
            overall_score=round(overall_score, 2),
            red_flags=len(analysis.red_flags),
            green_flags=len(analysis.green_flags)
        )
        return analysis

    @handle_validation_errors
    def calculate_rug_pull_probability(self, launch_data: ModelInput, contract_audit: ModelInput,
                                       metrics: ModelInput,
                                       now: Optional[datetime] = None) -> RugPullProbability:
        """Calculate the probability of a rug pull.

        Args:
            launch_data: Launch metadata
            contract_audit: Contract audit results
            metrics: On-chain metrics
            now: Reference time for the remaining lock period, defaults to now

        Returns:
            Rug pull probability with its indicators
        """
        launch = coerce_model(TokenLaunchData, launch_data)
        audit = coerce_model(ContractAudit, contract_audit)
        metrics = coerce_model(TokenMetrics, metrics)
        now = self._resolve_now(now)

        probability = 0.0
        indicators: List[str] = []

        if not audit.is_verified:
            probability += 30
            indicators.append("Unverified contract")

        locked_until = launch.liquidity_pool.locked_until if launch.liquidity_pool else None
        if locked_until is None:
            probability += 40
            indicators.append("Unlocked liquidity")
        else:
            days_locked = _days_until(locked_until, now)
            if days_locked < SHORT_LOCK_DAYS:
                probability += 25
                if days_locked < 0:
                    indicators.append("Liquidity lock has expired")
                else:
                    indicators.append(f"Liquidity unlocks in {math.floor(days_locked)} days")

        if audit.has_mint_function:
            probability += 20
            indicators.append("Mint function present")

        if metrics.top_holders_percentage > HEAVILY_CONCENTRATED_HOLDERS_PERCENTAGE:
            probability += 15
            indicators.append("Heavily concentrated ownership")

        if audit.buy_tax > EXCESSIVE_TAX_THRESHOLD or audit.sell_tax > EXCESSIVE_TAX_THRESHOLD:
            probability += 20
            indicators.append("Excessive taxes")

        if metrics.holder_count < LOW_HOLDER_COUNT:
            probability += 10
            indicators.append("Very low holder count")

        probability = _clamp(probability)

        preventative_measures = list(RUG_PULL_PREVENTATIVE_MEASURES)
        if locked_until is not None:
            preventative_measures.append("Note liquidity unlock date on calendar")

        return RugPullProbability(
            probability=probability,
            indicators=indicators,
            timeframe=_rug_pull_timeframe(probability),
            preventative_measures=preventative_measures,
        )

    @handle_validation_errors
    def predict_launch_success(self, launch_data: ModelInput, analysis: ModelInput,
                               metrics: ModelInput,
                               market_conditions: Optional[ModelInput] = None) -> LaunchPrediction:
        """Predict launch success and price movement.

        Args:
            launch_data: Launch metadata
            analysis: Result of ``analyze_launch``
            metrics: On-chain metrics
            market_conditions: Market trend and sector sentiment, neutral if omitted

        Returns:
            The launch prediction
        """
        launch = coerce_model(TokenLaunchData, launch_data)
        analysis = coerce_model(LaunchAnalysis, analysis)
        metrics = coerce_model(TokenMetrics, metrics)
        market = coerce_model(MarketConditions, market_conditions or {})

        factors: List[str] = []

        success_probability = analysis.overall_score * 0.5
        factors.append(f"Analysis score: {_format_number(analysis.overall_score)}/100")

        if market.btc_trend == MarketTrend.BULLISH:
            success_probability += 15
            factors.append("Favorable market conditions")
        elif market.btc_trend == MarketTrend.BEARISH:
            success_probability -= 15
            factors.append("Challenging market conditions")

        if market.sector_sentiment > 70:
            success_probability += 10
            factors.append("Strong sector sentiment")
        elif market.sector_sentiment < 30:
            success_probability -= 10
            factors.append("Weak sector sentiment")

        if metrics.holder_count > INITIAL_COMMUNITY_HOLDERS:
            success_probability += 10
            factors.append("Strong initial community")

        if metrics.volume_24h > metrics.market_cap * 0.5:
            success_probability += 10
            factors.append("High trading volume")

        if launch.liquidity_pool is not None and metrics.liquidity_ratio > STRONG_LIQUIDITY_RATIO:
            success_probability += 10
            factors.append("Strong liquidity foundation")

        success_probability = _clamp(success_probability)

        if success_probability > 80:
            expected_return = 500.0
        elif success_probability > 60:
            expected_return = 200.0
        elif success_probability > 40:
            expected_return = 50.0
        else:
            expected_return = -50.0

        current_price = launch.initial_price
        expected_price_range = PriceRange(
            min=current_price * (1 + (expected_return * 0.5) / 100),
            max=current_price * (1 + (expected_return * 1.5) / 100),
        )

        if success_probability > 80:
            time_to_ath = 24
        elif success_probability > 60:
            time_to_ath = 48
        elif success_probability < 40:
            time_to_ath = 168
        else:
            time_to_ath = 72

        return LaunchPrediction(
            expected_price_range=expected_price_range,
            time_to_ath=time_to_ath,
            expected_return=expected_return,
            success_probability=success_probability,
            factors=factors,
        )

    @handle_validation_errors
    def compare_to_historical_launches(self, current_launch: ModelInput,
                                       historical_data: Sequence[ModelInput]) -> HistoricalComparison:
        """Compare a launch analysis to past launches and their outcomes.

        Args:
            current_launch: Analysis of the launch being evaluated
            historical_data: Past analyses paired with actual outcomes

        Returns:
            Outcome statistics of similar launches and the percentile ranking
        """
        current = coerce_model(LaunchAnalysis, current_launch)
        history = [coerce_model(HistoricalLaunch, entry) for entry in historical_data]

        similar = [
            entry for entry in history
            if abs(entry.analysis.overall_score - current.overall_score) < self.similarity_window
        ]

        if similar:
            successes = sum(
                1 for entry in similar
                if entry.actual_outcome.final_result == LaunchOutcome.SUCCESS
            )
            success_rate = successes / len(similar) * 100
            average_gain = sum(entry.actual_outcome.max_gain for entry in similar) / len(similar)
            average_time = sum(
                entry.actual_outcome.time_to_max_gain for entry in similar
            ) / len(similar)
        else:
            success_rate = average_gain = average_time = 0.0

        if history:
            better_than = sum(
                1 for entry in history
                if entry.analysis.overall_score < current.overall_score
            )
            percentile = better_than / len(history) * 100
        else:
            percentile = 0.0

        logger.debug(
            f"Compared launch with score {current.overall_score:.2f} against "
            f"{len(history)} historical launches, {len(similar)} similar"
        )

        return HistoricalComparison(
            similar_launches=len(similar),
            average_outcome=AverageOutcome(
                success_rate=success_rate,
                average_gain=average_gain,
                average_time=average_time,
            ),
            percentile=percentile,
            ranking=_ranking_for(percentile),
        )

    @handle_validation_errors
    def generate_trading_strategy(self, analysis: ModelInput, prediction: ModelInput,
                                  investment_amount: float) -> TradingStrategy:
        """Generate a trading strategy for a new token.

        Entry, stop loss and the first two take-profit levels are multiples of
        the entry price; the last take-profit level is the predicted range maximum.

        Args:
            analysis: Result of ``analyze_launch``
            prediction: Result of ``predict_launch_success``
            investment_amount: Capital available for the position

        Returns:
            Entry, exit and risk management rules
        """
        analysis = coerce_model(LaunchAnalysis, analysis)
        prediction = coerce_model(LaunchPrediction, prediction)

        if investment_amount < 0:
            raise ValidationError(
                "Investment amount must be non-negative",
                details={"investment_amount": investment_amount}
            )

        if analysis.risk_level in (RiskLevel.CRITICAL, RiskLevel.HIGH):
            timing = "AVOID - Too risky"
            allocation = 0.0
        elif analysis.risk_level == RiskLevel.MEDIUM:
            timing = "Small position only, wait for confirmation"
            allocation = investment_amount * MEDIUM_RISK_ALLOCATION
        else:
            timing = "Enter at launch or on first dip"
            allocation = investment_amount * LOW_RISK_ALLOCATION

        take_profit: List[PriceLevel] = []
        if prediction.expected_return > 0:
            take_profit = [
                PriceLevel(percentage=30, price=REFERENCE_PRICE * FIRST_TAKE_PROFIT_MULTIPLE),
                PriceLevel(percentage=40,
                           price=REFERENCE_PRICE * (1 + prediction.expected_return / 200)),
                PriceLevel(percentage=30, price=prediction.expected_price_range.max),
            ]

        stop_loss = PriceLevel(percentage=100, price=REFERENCE_PRICE * STOP_LOSS_MULTIPLE)

        allocation_percentage = allocation / investment_amount * 100 if investment_amount else 0.0
        risk_management = [
            f"Maximum allocation: {allocation_percentage:.0f}%",
            "Never invest more than you can afford to lose",
            "Monitor price and liquidity constantly for first 48 hours",
        ]

        if analysis.has_critical_flags:
            risk_management.append("CRITICAL: Multiple red flags detected - extreme caution advised")

        if not any("locked" in flag.description for flag in analysis.green_flags):
            risk_management.append("WARNING: Check liquidity lock status before investing")

        return TradingStrategy(
            entry_strategy=EntryStrategy(
                timing=timing,
                allocation=allocation,
                price_target=REFERENCE_PRICE,
            ),
            exit_strategy=ExitStrategy(take_profit=take_profit, stop_loss=stop_loss),
            risk_management=risk_management,
        )

    @handle_validation_errors
    def generate_monitoring_alerts(self, launch_data: ModelInput, contract_audit: ModelInput,
                                   now: Optional[datetime] = None) -> List[MonitoringAlert]:
        """Real-time monitoring alerts for a launched token.

        Args:
            launch_data: Launch metadata
            contract_audit: Contract audit results
            now: Reference time for the remaining lock period, defaults to now

        Returns:
            Alerts ordered from liquidity through contract to general checks
        """
        launch = coerce_model(TokenLaunchData, launch_data)
        audit = coerce_model(ContractAudit, contract_audit)
        now = self._resolve_now(now)

        alerts: List[MonitoringAlert] = []

        pool = launch.liquidity_pool
        if pool is not None:
            if pool.locked_until is not None:
                days_until_unlock = _days_until(pool.locked_until, now)
                if days_until_unlock < 0:
                    alerts.append(MonitoringAlert(
                        type=AlertType.CRITICAL,
                        condition="Liquidity lock has expired",
                        action="Exit immediately if liquidity drops significantly",
                    ))
                elif days_until_unlock < IMMINENT_UNLOCK_DAYS:
                    alerts.append(MonitoringAlert(
                        type=AlertType.CRITICAL,
                        condition=f"Liquidity unlocks in {math.floor(days_until_unlock)} days",
                        action="Consider exiting position before unlock date",
                    ))
                elif days_until_unlock < SHORT_LOCK_DAYS:
                    alerts.append(MonitoringAlert(
                        type=AlertType.WARNING,
                        condition=f"Liquidity unlocks in {math.floor(days_until_unlock)} days",
                        action="Monitor closely as unlock date approaches",
                    ))
            else:
                alerts.append(MonitoringAlert(
                    type=AlertType.CRITICAL,
                    condition="Liquidity is not locked",
                    action="Exit immediately if liquidity drops significantly",
                ))

        if audit.has_mint_function:
            alerts.append(MonitoringAlert(
                type=AlertType.WARNING,
                condition="Contract can mint new tokens",
                action="Monitor total supply for unexpected increases",
            ))

        if audit.has_blacklist_function or audit.has_pause_function:
            alerts.append(MonitoringAlert(
                type=AlertType.WARNING,
                condition="Contract has owner control functions",
                action="Watch for ownership actions that could affect trading",
            ))

        alerts.append(MonitoringAlert(
            type=AlertType.INFO,
            condition="Price volatility expected",
            action="Set price alerts at key levels",
        ))
        alerts.append(MonitoringAlert(
            type=AlertType.INFO,
            condition="Early stage token",
            action="Monitor holder count and distribution daily",
        ))

        return alerts

    @handle_validation_errors
    def detect_honeypot_indicators(self, contract_audit: ModelInput) -> List[str]:
        """Match an audit against the known honeypot indicators.

        Returns:
            The matching entries of ``HONEYPOT_INDICATORS``, in that order
        """
        audit = coerce_model(ContractAudit, contract_audit)

        vulnerabilities = [v.lower() for v in audit.vulnerabilities]
        matched = {
            "cannot_sell": (
                audit.sell_tax >= CANNOT_SELL_TAX_THRESHOLD
                or any(keyword in v for v in vulnerabilities for keyword in CANNOT_SELL_KEYWORDS)
            ),
            "high_tax": audit.buy_tax > HIGH_TAX_THRESHOLD or audit.sell_tax > HIGH_TAX_THRESHOLD,
            "blacklist": audit.has_blacklist_function,
            "pause_function": audit.has_pause_function,
        }
        return [indicator for indicator in self.HONEYPOT_INDICATORS if matched[indicator]]

    @measure_execution_time
    @handle_validation_errors
    def build_report(self, launch_data: ModelInput, contract_audit: ModelInput,
                     metrics: ModelInput, market_conditions: Optional[ModelInput] = None,
                     investment_amount: float = 0.0,
                     historical_data: Optional[Sequence[ModelInput]] = None,
                     now: Optional[datetime] = None) -> LaunchReport:
        """Run every analysis for one launch and bundle the results.

        Args:
            launch_data: Launch metadata
            contract_audit: Contract audit results
            metrics: On-chain metrics
            market_conditions: Market trend and sector sentiment, neutral if omitted
            investment_amount: Capital available for the trading strategy
            historical_data: Past launches to compare against, skipped if None
            now: Reference time for lock checks, defaults to now

        Returns:
            The full launch report
        """
        launch = coerce_model(TokenLaunchData, launch_data)
        audit = coerce_model(ContractAudit, contract_audit)
        metrics = coerce_model(TokenMetrics, metrics)
        now = self._resolve_now(now)

        analysis = self.analyze_launch(launch, audit, metrics)
        prediction = self.predict_launch_success(launch, analysis, metrics, market_conditions)

        comparison = None
        if historical_data is not None:
            comparison = self.compare_to_historical_launches(analysis, historical_data)

        return LaunchReport(
            token_address=launch.token_address,
            symbol=launch.symbol,
            analysis=analysis,
            rug_pull=self.calculate_rug_pull_probability(launch, audit, metrics, now=now),
            prediction=prediction,
            trading_strategy=self.generate_trading_strategy(analysis, prediction, investment_amount),
            monitoring_alerts=self.generate_monitoring_alerts(launch, audit, now=now),
            honeypot_indicators=self.detect_honeypot_indicators(audit),
            historical_comparison=comparison,
        )

    @staticmethod
    def _resolve_now(now: Optional[datetime]) -> datetime:
        if now is None:
            return datetime.now(timezone.utc)
        return ensure_utc(now)


# Default instance
token_launch_analyzer = TokenLaunchAnalyzer()
