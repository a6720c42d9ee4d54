"""
Tariff Offset Strategies
========================
Estimates how much of a tariff bill can be clawed back through trade
programs (FTA utilization, duty drawback, bonded imports, SEZs, export
credit). Each mechanism saves a fixed share of the gross tariff:

    savings_i = volume × (rate / 100) × multiplier_i

The FTA mechanism is only offered when origin and target share an agreement
in ``config.FREE_TRADE_AGREEMENTS``.
"""

from __future__ import annotations

import logging

from analyzer.engine import require_positive_volume
from analyzer.models import Feasibility, OffsetMechanism, OffsetResult
from config import FREE_TRADE_AGREEMENTS, OFFSET_MECHANISMS

logger = logging.getLogger(__name__)


def find_free_trade_agreement(country_a: str, country_b: str) -> str | None:
    """Return the name of the first agreement covering both countries, if any."""
    for name, members in FREE_TRADE_AGREEMENTS:
        if country_a in members and country_b in members:
            return name
    return None


def has_free_trade_agreement(country_a: str, country_b: str) -> bool:
    """True when both countries belong to the same agreement group.

    Symmetric in its arguments. Unknown names simply don't match.
    """
    agreement = find_free_trade_agreement(country_a, country_b)
    if agreement is None:
        logger.debug("No FTA between %r and %r", country_a, country_b)
        return False
    return True


def calculate_tariff_offset_strategies(
    tariff_rate: float,
    trade_volume: float,
    country_of_origin: str,
    target_country: str,
) -> OffsetResult:
    """Build the list of applicable offset mechanisms and their totals.

    Parameters
    ----------
    tariff_rate : float
        Tariff rate in percent.
    trade_volume : float
        Trade volume subject to the tariff. Must be positive.
    country_of_origin : str
        Exporting country name.
    target_country : str
        Importing country name.

    Returns
    -------
    OffsetResult
        Included mechanisms, their summed savings, and the net effective
        tariff rate floored at 0.

    Raises
    ------
    ValueError
        If ``trade_volume`` is not positive.
    """
    require_positive_volume(trade_volume)

    gross_tariff = trade_volume * (tariff_rate / 100)
    fta_available = has_free_trade_agreement(country_of_origin, target_country)

    mechanisms = []
    for entry in OFFSET_MECHANISMS:
        if entry["key"] == "fta" and not fta_available:
            continue
        mechanisms.append(
            OffsetMechanism(
                name=entry["name"],
                description=entry["description"],
                potential_savings=gross_tariff * entry["multiplier"],
                feasibility=Feasibility(entry["feasibility"]),
                requirements=list(entry["requirements"]),
            )
        )

    total_potential_offset = sum(m.potential_savings for m in mechanisms)
    net_effective_rate = max(0.0, tariff_rate - (total_potential_offset / trade_volume * 100))

    logger.debug(
        "Offsets %s -> %s: %d mechanisms, total=%.2f, net rate=%.2f%%",
        country_of_origin, target_country, len(mechanisms),
        total_potential_offset, net_effective_rate,
    )

    return OffsetResult(
        offset_mechanisms=mechanisms,
        total_potential_offset=total_potential_offset,
        net_effective_rate=net_effective_rate,
    )
