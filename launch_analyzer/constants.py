"""Constants used throughout the launch analyzer.

This module defines the scoring weights and thresholds in one place so the
rule tables, predictions and alerts stay consistent.
"""

SECONDS_PER_DAY = 24 * 3600

# Score bounds and starting points
MIN_SCORE = 0.0
MAX_SCORE = 100.0
BASE_LEGITIMACY_SCORE = 100.0
BASE_POTENTIAL_SCORE = 50.0

# Weights of the overall score
LEGITIMACY_WEIGHT = 0.6
POTENTIAL_WEIGHT = 0.4

# Risk level lower bounds, checked from the top down
RISK_LEVEL_THRESHOLDS = (
    (80.0, "very_low"),
    (60.0, "low"),
    (40.0, "medium"),
    (20.0, "high"),
)

# Number of critical red flags that rates a launch critical and a scam
CRITICAL_FLAG_ESCALATION = 2

# Confidence in the analysis depending on source verification
VERIFIED_CONFIDENCE = 85
UNVERIFIED_CONFIDENCE = 50

# Contract audit thresholds (percent)
HIGH_TAX_THRESHOLD = 10.0
FAIR_TAX_THRESHOLD = 5.0
EXCESSIVE_TAX_THRESHOLD = 15.0
CANNOT_SELL_TAX_THRESHOLD = 50.0

# Liquidity thresholds
LOW_LIQUIDITY_RATIO = 0.1
STRONG_LIQUIDITY_RATIO = 0.3
LONG_LOCK_DAYS = 365
SHORT_LOCK_DAYS = 30
IMMINENT_UNLOCK_DAYS = 7

# Holder distribution thresholds
CONCENTRATED_HOLDERS_PERCENTAGE = 50.0
HEAVILY_CONCENTRATED_HOLDERS_PERCENTAGE = 60.0
DISTRIBUTED_HOLDERS_PERCENTAGE = 20.0
STRONG_COMMUNITY_HOLDERS = 1000
INITIAL_COMMUNITY_HOLDERS = 500
LOW_HOLDER_COUNT = 100
VERY_LOW_HOLDER_COUNT = 50

# Team allocation thresholds (percent of supply)
LARGE_TEAM_ALLOCATION = 20.0
UNVESTED_TEAM_ALLOCATION = 5.0

# Historical comparison
SIMILARITY_WINDOW = 10.0

# Trading strategy, expressed as multiples of the entry price
REFERENCE_PRICE = 1.0
FIRST_TAKE_PROFIT_MULTIPLE = 1.5
STOP_LOSS_MULTIPLE = 0.7
MEDIUM_RISK_ALLOCATION = 0.3
LOW_RISK_ALLOCATION = 0.7

HONEYPOT_INDICATORS = (
    "cannot_sell",
    "high_tax",
    "blacklist",
    "pause_function",
)

# Vulnerability keywords that indicate holders are unable to sell
CANNOT_SELL_KEYWORDS = ("honeypot", "cannot sell", "cannot_sell", "sell disabled", "sell blocked")

RUG_PULL_PREVENTATIVE_MEASURES = (
    "Only invest what you can afford to lose",
    "Monitor liquidity pool regularly",
    "Set stop-loss orders",
    "Check for contract ownership changes",
    "Join community channels for updates",
)
