"""
Disruption Impact Engine
========================
Turns a trade volume, a tariff rate and a diversification score into a
``TradeAnalysis``. The math is deliberately linear:

    tariff_impact         = volume × (rate / 100) × |elasticity|
    diversification_index = clip(input × 10, 0, 100)
    risk_score            = clip(rate × 2 + (100 − diversification), 0, 100)
    alt_market_potential  = volume × (diversification / 100) × 0.8
    opportunity_score     = clip(alt_market_potential / volume × 100, 0, 100)

Coefficients live in config.py.
"""

from __future__ import annotations

import logging

import numpy as np

from analyzer.models import DisruptionType, TradeAnalysis, TradeMetrics
from config import (
    ALTERNATIVE_MARKET_CAPTURE,
    DIVERSIFICATION_SCALE,
    HIGH_TARIFF_THRESHOLD,
    LOW_DIVERSIFICATION_THRESHOLD,
    MAX_FOCUS_MARKETS,
    PRICE_ELASTICITY,
    RECOMMENDATION_TEXT,
    RISK_TARIFF_WEIGHT,
    SCORE_MAX,
    SCORE_MIN,
)

logger = logging.getLogger(__name__)


def clip_score(value: float) -> float:
    """Clamp a score to the [0, 100] range and return a plain float."""
    return float(np.clip(value, SCORE_MIN, SCORE_MAX))


def require_positive_volume(volume: float) -> None:
    """Raise ``ValueError`` for a trade volume we would have to divide by zero with.

    Parameters
    ----------
    volume : float
        Trade volume in currency units.

    Raises
    ------
    ValueError
        If ``volume`` is zero, negative, NaN or infinite.
    """
    if not np.isfinite(volume) or volume <= 0:
        raise ValueError(
            f"Trade volume must be positive and finite, got {volume!r}. "
            f"Ratios against a zero, negative or non-finite volume are undefined."
        )


def calculate_disruption_impact(
    current_trade_volume: float,
    tariff_rate: float,
    alternative_markets: list[str],
    market_diversification: float,
) -> TradeAnalysis:
    """Analyse the impact of a tariff on a single trade flow.

    Parameters
    ----------
    current_trade_volume : float
        Current annual trade volume. Must be positive.
    tariff_rate : float
        Tariff rate in percent (``25`` means 25%).
    alternative_markets : list[str]
        Candidate markets to redirect trade towards.
    market_diversification : float
        Raw diversification input; scaled ×10 into the 0–100 index.

    Returns
    -------
    TradeAnalysis
        Metrics, recommendations and opportunity score. The disruption type
        is always ``tariff`` for this entry point.

    Raises
    ------
    ValueError
        If ``current_trade_volume`` is not positive.
    """
    require_positive_volume(current_trade_volume)

    tariff_impact = current_trade_volume * (tariff_rate / 100) * abs(PRICE_ELASTICITY)
    diversification_index = clip_score(market_diversification * DIVERSIFICATION_SCALE)
    risk_score = clip_score(
        tariff_rate * RISK_TARIFF_WEIGHT + (SCORE_MAX - diversification_index)
    )
    alternative_market_potential = (
        current_trade_volume * (diversification_index / 100) * ALTERNATIVE_MARKET_CAPTURE
    )
    opportunity_score = clip_score(
        alternative_market_potential / current_trade_volume * 100
    )

    logger.debug(
        "Disruption impact: volume=%.2f rate=%.2f -> impact=%.2f risk=%.1f opportunity=%.1f",
        current_trade_volume, tariff_rate, tariff_impact, risk_score, opportunity_score,
    )

    markets = list(alternative_markets)
    return TradeAnalysis(
        disruption_type=DisruptionType.TARIFF,
        affected_markets=markets,
        metrics=TradeMetrics(
            current_trade_volume=current_trade_volume,
            tariff_impact=tariff_impact,
            alternative_market_potential=alternative_market_potential,
            diversification_index=diversification_index,
            risk_score=risk_score,
        ),
        recommendations=generate_recommendations(tariff_rate, diversification_index, markets),
        opportunity_score=opportunity_score,
    )


def generate_recommendations(
    tariff_rate: float,
    diversification_index: float,
    alternative_markets: list[str],
) -> list[str]:
    """Return the ordered list of strategic recommendations.

    Rules are evaluated independently and appended in a fixed order; the two
    closing recommendations are always present.
    """
    recommendations = []

    if tariff_rate > HIGH_TARIFF_THRESHOLD:
        recommendations.append(RECOMMENDATION_TEXT["high_tariff"])

    if diversification_index < LOW_DIVERSIFICATION_THRESHOLD:
        recommendations.append(RECOMMENDATION_TEXT["low_diversification"])

    if alternative_markets:
        focus = ", ".join(alternative_markets[:MAX_FOCUS_MARKETS])
        recommendations.append(RECOMMENDATION_TEXT["focus_markets"].format(markets=focus))

    recommendations.append(RECOMMENDATION_TEXT["hedging"])
    recommendations.append(RECOMMENDATION_TEXT["regional"])

    return recommendations
