"""Tests for TokenLaunchAnalyzer.calculate_rug_pull_probability."""

from datetime import datetime, timedelta

import pytest

from launch_analyzer.constants import RUG_PULL_PREVENTATIVE_MEASURES
from tests.fixtures.common import LAUNCH_TIME


def with_lock(launch, locked_until):
    return launch.model_copy(update={
        "liquidity_pool": launch.liquidity_pool.model_copy(update={"locked_until": locked_until})
    })


def test_risky_launch_is_capped_at_100(analyzer, risky_launch, risky_audit, risky_metrics, now):
    result = analyzer.calculate_rug_pull_probability(
        risky_launch, risky_audit, risky_metrics, now=now
    )

    assert result.probability == 100
    assert result.indicators == [
        "Unverified contract",
        "Unlocked liquidity",
        "Mint function present",
        "Heavily concentrated ownership",
        "Very low holder count",
    ]
    assert result.timeframe == "Immediate - within 24 hours"
    assert result.preventative_measures == list(RUG_PULL_PREVENTATIVE_MEASURES)


def test_healthy_launch_has_no_indicators(analyzer, healthy_launch, verified_audit,
                                          healthy_metrics, now):
    result = analyzer.calculate_rug_pull_probability(
        healthy_launch, verified_audit, healthy_metrics, now=now
    )

    assert result.probability == 0
    assert result.indicators == []
    assert result.timeframe == "Low immediate risk"
    assert len(result.preventative_measures) == 6
    assert result.preventative_measures[-1] == "Note liquidity unlock date on calendar"


def test_lock_ending_soon_is_counted(analyzer, healthy_launch, verified_audit,
                                     healthy_metrics, now):
    launch = with_lock(healthy_launch, LAUNCH_TIME + timedelta(days=11))

    result = analyzer.calculate_rug_pull_probability(launch, verified_audit, healthy_metrics, now=now)

    assert result.probability == 25
    assert result.indicators == ["Liquidity unlocks in 10 days"]


def test_expired_lock_is_counted(analyzer, healthy_launch, verified_audit, healthy_metrics):
    result = analyzer.calculate_rug_pull_probability(
        healthy_launch, verified_audit, healthy_metrics,
        now=LAUNCH_TIME + timedelta(days=500),
    )

    assert result.probability == 25
    assert result.indicators == ["Liquidity lock has expired"]


def test_pool_without_lock_counts_as_unlocked(analyzer, healthy_launch, verified_audit,
                                              healthy_metrics, now):
    launch = with_lock(healthy_launch, None)

    result = analyzer.calculate_rug_pull_probability(launch, verified_audit, healthy_metrics, now=now)

    assert result.probability == 40
    assert result.indicators == ["Unlocked liquidity"]
    assert result.timeframe == "Low immediate risk"
    assert len(result.preventative_measures) == 5


def test_excessive_taxes(analyzer, healthy_launch, verified_audit, healthy_metrics, now):
    audit = verified_audit.model_copy(update={"sell_tax": 20})

    result = analyzer.calculate_rug_pull_probability(healthy_launch, audit, healthy_metrics, now=now)

    assert result.probability == 20
    assert result.indicators == ["Excessive taxes"]


@pytest.mark.parametrize("audit,expected_probability,expected_timeframe", [
    ({"is_verified": True}, 40, "Low immediate risk"),
    ({"is_verified": True, "has_mint_function": True}, 60, "Medium-term - within 30 days"),
    ({"is_verified": False}, 70, "Short-term - within 7 days"),
    ({"is_verified": False, "has_mint_function": True}, 90, "Immediate - within 24 hours"),
])
def test_timeframe_thresholds(analyzer, risky_launch, healthy_metrics, now,
                              audit, expected_probability, expected_timeframe):
    result = analyzer.calculate_rug_pull_probability(risky_launch, audit, healthy_metrics, now=now)

    assert result.probability == expected_probability
    assert result.timeframe == expected_timeframe


def test_naive_reference_time_is_utc(analyzer, healthy_launch, verified_audit, healthy_metrics):
    launch = with_lock(healthy_launch, LAUNCH_TIME + timedelta(days=11))

    result = analyzer.calculate_rug_pull_probability(
        launch, verified_audit, healthy_metrics, now=datetime(2024, 1, 2)
    )

    assert result.indicators == ["Liquidity unlocks in 10 days"]


def test_accepts_camel_case_dictionaries(analyzer, sample_document, now):
    result = analyzer.calculate_rug_pull_probability(
        sample_document["launch"], sample_document["audit"], sample_document["metrics"], now=now
    )

    assert result.probability == 0
    assert result.to_json_dict()["preventativeMeasures"][0] == RUG_PULL_PREVENTATIVE_MEASURES[0]
