"""Tests for the disruption impact calculator and recommendation rules."""

from __future__ import annotations

import pytest

from analyzer import (
    DisruptionType,
    calculate_disruption_impact,
    generate_recommendations,
)

HIGH_TARIFF = "High tariff barriers detected. Consider immediate market diversification strategies."
LOW_DIVERSIFICATION = "Low market diversification. Prioritize development of alternative export markets."
HEDGING = "Implement hedging strategies for currency and commodity price volatility."
REGIONAL = "Strengthen regional trade agreements and bilateral partnerships."


def test_tariff_impact_uses_elasticity_multiplier():
    analysis = calculate_disruption_impact(1_000_000, 10, [], 5)
    assert analysis.metrics.tariff_impact == pytest.approx(150_000)


def test_reference_metrics():
    analysis = calculate_disruption_impact(1_000_000, 10, ["Vietnam"], 5)
    m = analysis.metrics

    assert analysis.disruption_type is DisruptionType.TARIFF
    assert analysis.disruption_type == "tariff"
    assert m.current_trade_volume == 1_000_000
    assert m.diversification_index == pytest.approx(50)
    assert m.risk_score == pytest.approx(70)
    assert m.alternative_market_potential == pytest.approx(400_000)
    assert analysis.opportunity_score == pytest.approx(40)


@pytest.mark.parametrize("raw, expected", [(50, 100), (10, 100), (3, 30), (0, 0), (-4, 0)])
def test_diversification_index_is_clamped(raw, expected):
    analysis = calculate_disruption_impact(1_000_000, 5, [], raw)
    assert analysis.metrics.diversification_index == pytest.approx(expected)


@pytest.mark.parametrize("rate, diversification", [(80, 0), (500, 10), (-200, 10), (0, 10)])
def test_risk_score_is_clamped(rate, diversification):
    analysis = calculate_disruption_impact(1_000_000, rate, [], diversification)
    assert 0 <= analysis.metrics.risk_score <= 100


def test_risk_score_saturates_at_100():
    analysis = calculate_disruption_impact(1_000_000, 40, [], 1)
    assert analysis.metrics.risk_score == 100


@pytest.mark.parametrize("diversification", [0, 2.5, 7, 10, 1000])
def test_opportunity_score_matches_potential_ratio(diversification):
    analysis = calculate_disruption_impact(2_500_000, 12, [], diversification)
    ratio = analysis.metrics.alternative_market_potential / 2_500_000 * 100
    assert 0 <= analysis.opportunity_score <= 100
    assert analysis.opportunity_score == pytest.approx(ratio)


def test_affected_markets_are_copied():
    markets = ["Vietnam", "India"]
    analysis = calculate_disruption_impact(1_000_000, 10, markets, 5)
    markets.append("Brazil")
    assert analysis.affected_markets == ["Vietnam", "India"]


@pytest.mark.parametrize("volume", [0, -1, -1_000_000, float("nan"), float("inf"), float("-inf")])
def test_non_positive_or_non_finite_volume_is_rejected(volume):
    with pytest.raises(ValueError, match="Trade volume must be positive"):
        calculate_disruption_impact(volume, 10, [], 5)


def test_to_dict_is_json_friendly():
    data = calculate_disruption_impact(1_000_000, 10, ["Vietnam"], 5).to_dict()
    assert data["disruption_type"] == "tariff"
    assert data["metrics"]["tariff_impact"] == pytest.approx(150_000)
    assert data["affected_markets"] == ["Vietnam"]


# ── Recommendations ─────────────────────────────────────────────────────────


def test_recommendations_all_rules_fire_in_order():
    recs = generate_recommendations(25, 20, ["Vietnam", "India", "Mexico", "Brazil"])
    assert recs == [
        HIGH_TARIFF,
        LOW_DIVERSIFICATION,
        "Focus on emerging markets: Vietnam, India, Mexico",
        HEDGING,
        REGIONAL,
    ]


def test_recommendations_only_always_messages():
    assert generate_recommendations(15, 30, []) == [HEDGING, REGIONAL]


def test_recommendation_thresholds_are_strict():
    assert HIGH_TARIFF not in generate_recommendations(15, 50, [])
    assert HIGH_TARIFF in generate_recommendations(15.01, 50, [])
    assert LOW_DIVERSIFICATION not in generate_recommendations(5, 30, [])
    assert LOW_DIVERSIFICATION in generate_recommendations(5, 29.9, [])


def test_focus_markets_with_fewer_than_three():
    recs = generate_recommendations(5, 50, ["Kenya"])
    assert recs[0] == "Focus on emerging markets: Kenya"
    assert recs[-2:] == [HEDGING, REGIONAL]


def test_analysis_recommendations_use_clamped_index():
    analysis = calculate_disruption_impact(1_000_000, 20, ["Chile"], 2)
    assert analysis.recommendations == [
        HIGH_TARIFF,
        LOW_DIVERSIFICATION,
        "Focus on emerging markets: Chile",
        HEDGING,
        REGIONAL,
    ]
