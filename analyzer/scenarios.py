"""
Scenario Projection
===================
Compound-growth projections of trade volume under three scenarios:

    optimistic  = base × (1 + g + spread)^t
    pessimistic = base × (1 + g − spread)^t × (1 − p × 0.5)
    expected    = base × (1 + g)^t          × (1 − p × 0.3)

where ``g`` is the base growth rate, ``spread`` the scenario spread and
``p`` the disruption probability.
"""

from __future__ import annotations

import pandas as pd

from analyzer.models import ScenarioProjection
from config import (
    BASE_GROWTH_RATE,
    EXPECTED_DISRUPTION_WEIGHT,
    MAX_TIME_HORIZON,
    PESSIMISTIC_DISRUPTION_WEIGHT,
    SCENARIO_RATE_SPREAD,
)


def require_valid_horizon(time_horizon: float) -> None:
    """Raise ``ValueError`` unless ``0 <= time_horizon <= MAX_TIME_HORIZON``."""
    if not 0 <= time_horizon <= MAX_TIME_HORIZON:
        raise ValueError(
            f"Time horizon must be between 0 and {MAX_TIME_HORIZON} periods, "
            f"got {time_horizon!r}."
        )


def predict_trade_scenarios(
    base_volume: float,
    disruption_probability: float,
    time_horizon: float,
) -> ScenarioProjection:
    """Project trade volume ``time_horizon`` periods ahead.

    Parameters
    ----------
    base_volume : float
        Starting trade volume.
    disruption_probability : float
        Probability of disruption, 0–1.
    time_horizon : float
        Number of compounding periods, at most ``MAX_TIME_HORIZON``.

    Returns
    -------
    ScenarioProjection
        Optimistic, pessimistic and expected volumes.

    Raises
    ------
    ValueError
        If ``time_horizon`` is negative, NaN or above ``MAX_TIME_HORIZON``.
    """
    require_valid_horizon(time_horizon)

    disruption_multiplier = 1 - disruption_probability * PESSIMISTIC_DISRUPTION_WEIGHT

    optimistic = base_volume * (1 + BASE_GROWTH_RATE + SCENARIO_RATE_SPREAD) ** time_horizon
    pessimistic = (
        base_volume
        * (1 + BASE_GROWTH_RATE - SCENARIO_RATE_SPREAD) ** time_horizon
        * disruption_multiplier
    )
    expected = (
        base_volume
        * (1 + BASE_GROWTH_RATE) ** time_horizon
        * (1 - disruption_probability * EXPECTED_DISRUPTION_WEIGHT)
    )

    return ScenarioProjection(optimistic=optimistic, pessimistic=pessimistic, expected=expected)


def project_scenario_series(
    base_volume: float,
    disruption_probability: float,
    time_horizon: int,
) -> pd.DataFrame:
    """Compute every period from 0 up to ``time_horizon`` inclusive.

    Returns
    -------
    pd.DataFrame
        Indexed by ``period`` with ``optimistic``, ``pessimistic`` and
        ``expected`` columns.

    Raises
    ------
    ValueError
        If ``time_horizon`` is negative or above ``MAX_TIME_HORIZON``.
    """
    require_valid_horizon(time_horizon)

    rows = [
        predict_trade_scenarios(base_volume, disruption_probability, period).to_dict()
        for period in range(int(time_horizon) + 1)
    ]
    frame = pd.DataFrame(rows, columns=["optimistic", "pessimistic", "expected"])
    frame.index.name = "period"
    return frame
