"""Common test fixtures for launch analyzer tests.

This module provides fixtures and builders that can be reused across
different test modules.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest

from launch_analyzer.config import get_settings
from launch_analyzer.models import (
    ContractAudit,
    LaunchAnalysis,
    LiquidityPool,
    Recommendation,
    RiskLevel,
    TokenLaunchData,
    TokenMetrics,
)
from launch_analyzer.token_launch_analyzer import TokenLaunchAnalyzer

LAUNCH_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logging():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def analyzer():
    """Create a TokenLaunchAnalyzer instance for testing."""
    return TokenLaunchAnalyzer()


@pytest.fixture
def launch_time():
    return LAUNCH_TIME


@pytest.fixture
def now():
    """One day after launch."""
    return LAUNCH_TIME + timedelta(days=1)


@pytest.fixture
def healthy_launch():
    """Launch with liquidity locked for 400 days at a neutral liquidity ratio."""
    return TokenLaunchData(
        token_address="0x1111111111111111111111111111111111111111",
        name="Healthy Token",
        symbol="HLTH",
        total_supply=1_000_000,
        initial_price=1.0,
        launch_timestamp=LAUNCH_TIME,
        creator_address="0x2222222222222222222222222222222222222222",
        liquidity_pool=LiquidityPool(
            address="0x3333333333333333333333333333333333333333",
            initial_liquidity=200_000,
            locked_until=LAUNCH_TIME + timedelta(days=400),
        ),
    )


@pytest.fixture
def verified_audit():
    return ContractAudit(
        is_verified=True,
        has_ownership_renounced=True,
        buy_tax=2,
        sell_tax=2,
        security_score=92,
    )


@pytest.fixture
def healthy_metrics():
    return TokenMetrics(
        market_cap=1_000_000,
        fully_diluted_valuation=1_000_000,
        liquidity_ratio=0.2,
        holder_count=2000,
        top_holders_percentage=15,
        price_volatility=12,
        volume_24h=100_000,
        transactions_24h=1500,
    )


@pytest.fixture
def risky_launch():
    """Launch without any liquidity pool."""
    return TokenLaunchData(
        token_address="0x4444444444444444444444444444444444444444",
        name="Risky Token",
        symbol="RSKY",
        total_supply=1_000_000_000,
        initial_price=0.0001,
        launch_timestamp=LAUNCH_TIME,
        creator_address="0x5555555555555555555555555555555555555555",
    )


@pytest.fixture
def risky_audit():
    return ContractAudit(
        is_verified=False,
        has_mint_function=True,
        has_ownership_renounced=False,
        buy_tax=5,
        sell_tax=5,
        security_score=20,
        vulnerabilities=["Owner can mint without limit"],
    )


@pytest.fixture
def risky_metrics():
    return TokenMetrics(
        market_cap=100_000,
        liquidity_ratio=0.02,
        holder_count=30,
        top_holders_percentage=70,
        volume_24h=5_000,
        transactions_24h=40,
    )


@pytest.fixture
def sample_document():
    """CLI input document using camelCase keys and millisecond timestamps."""
    launch_ms = int(LAUNCH_TIME.timestamp() * 1000)
    return {
        "launch": {
            "tokenAddress": "0x1111111111111111111111111111111111111111",
            "name": "Healthy Token",
            "symbol": "HLTH",
            "totalSupply": 1_000_000,
            "initialPrice": 1.0,
            "launchTimestamp": launch_ms,
            "creatorAddress": "0x2222222222222222222222222222222222222222",
            "liquidityPool": {
                "address": "0x3333333333333333333333333333333333333333",
                "initialLiquidity": 200_000,
                "lockedUntil": launch_ms + 400 * 24 * 3600 * 1000,
            },
        },
        "audit": {
            "isVerified": True,
            "hasProxyContract": False,
            "hasMintFunction": False,
            "hasBlacklistFunction": False,
            "hasPauseFunction": False,
            "hasOwnershipRenounced": True,
            "maxTransactionLimit": None,
            "buyTax": 2,
            "sellTax": 2,
            "securityScore": 92,
            "vulnerabilities": [],
        },
        "metrics": {
            "marketCap": 1_000_000,
            "fullyDilutedValuation": 1_000_000,
            "liquidityRatio": 0.2,
            "holderCount": 2000,
            "topHoldersPercentage": 15,
            "priceVolatility": 12,
            "volume24h": 100_000,
            "transactions24h": 1500,
        },
        "marketConditions": {"btcTrend": "bullish", "sectorSentiment": 80},
    }


def build_analysis(overall_score: float,
                   risk_level: RiskLevel = RiskLevel.LOW,
                   recommendation: Recommendation = Recommendation.HOLD,
                   red_flags: Optional[List[Dict[str, Any]]] = None,
                   green_flags: Optional[List[Dict[str, Any]]] = None) -> LaunchAnalysis:
    """Build a LaunchAnalysis with only the fields a test cares about."""
    return LaunchAnalysis(
        overall_score=overall_score,
        risk_level=risk_level,
        legitimacy_score=overall_score,
        potential_score=overall_score,
        red_flags=red_flags or [],
        green_flags=green_flags or [],
        recommendation=recommendation,
        confidence_level=85,
    )
