"""
Result Records
==============
Immutable value objects returned by the calculators. Every record is built
fresh per call and carries a ``to_dict()`` for JSON responses.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum


class DisruptionType(str, Enum):
    TARIFF = "tariff"
    GEOPOLITICAL = "geopolitical"
    SUPPLY_CHAIN = "supply_chain"
    ECONOMIC = "economic"


class Feasibility(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class TradeMetrics:
    current_trade_volume: float
    tariff_impact: float
    alternative_market_potential: float
    diversification_index: float
    risk_score: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TradeAnalysis:
    """Outcome of a single disruption-impact calculation."""

    disruption_type: DisruptionType
    affected_markets: list[str]
    metrics: TradeMetrics
    recommendations: list[str]
    opportunity_score: float

    def to_dict(self) -> dict:
        return {
            "disruption_type": self.disruption_type.value,
            "affected_markets": list(self.affected_markets),
            "metrics": self.metrics.to_dict(),
            "recommendations": list(self.recommendations),
            "opportunity_score": self.opportunity_score,
        }


@dataclass(frozen=True)
class OffsetMechanism:
    name: str
    description: str
    potential_savings: float
    feasibility: Feasibility
    requirements: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "potential_savings": self.potential_savings,
            "feasibility": self.feasibility.value,
            "requirements": list(self.requirements),
        }


@dataclass(frozen=True)
class OffsetResult:
    """Offset mechanisms available for a tariff plus their aggregate effect."""

    offset_mechanisms: list[OffsetMechanism]
    total_potential_offset: float
    net_effective_rate: float

    def to_dict(self) -> dict:
        return {
            "offset_mechanisms": [m.to_dict() for m in self.offset_mechanisms],
            "total_potential_offset": self.total_potential_offset,
            "net_effective_rate": self.net_effective_rate,
        }


@dataclass(frozen=True)
class ScenarioProjection:
    optimistic: float
    pessimistic: float
    expected: float

    def to_dict(self) -> dict:
        return asdict(self)
