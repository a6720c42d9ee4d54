from analyzer.engine import calculate_disruption_impact, generate_recommendations
from analyzer.models import (
    DisruptionType,
    Feasibility,
    OffsetMechanism,
    OffsetResult,
    ScenarioProjection,
    TradeAnalysis,
    TradeMetrics,
)
from analyzer.offsets import (
    calculate_tariff_offset_strategies,
    find_free_trade_agreement,
    has_free_trade_agreement,
)
from analyzer.scenarios import predict_trade_scenarios, project_scenario_series

__all__ = [
    "DisruptionType",
    "Feasibility",
    "OffsetMechanism",
    "OffsetResult",
    "ScenarioProjection",
    "TradeAnalysis",
    "TradeMetrics",
    "calculate_disruption_impact",
    "calculate_tariff_offset_strategies",
    "find_free_trade_agreement",
    "generate_recommendations",
    "has_free_trade_agreement",
    "predict_trade_scenarios",
    "project_scenario_series",
]
