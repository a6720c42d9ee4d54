"""Tests for the dashboard panel builders."""

from __future__ import annotations

import pytest

from analyzer import (
    calculate_disruption_impact,
    calculate_tariff_offset_strategies,
    project_scenario_series,
)
from components.charts import build_scenario_chart
from components.docs import scenario_formulas
from components.formatting import format_millions, format_percent
from components.layout import build_layout
from components.panel import build_disruption_panel
from conftest import collect_text, find_by_class


@pytest.fixture
def analysis():
    return calculate_disruption_impact(1_000_000, 20, ["Vietnam", "India"], 5)


@pytest.fixture
def offsets():
    return calculate_tariff_offset_strategies(20, 1_000_000, "United States", "Canada")


def test_formatting():
    assert format_millions(2_500_000) == "$2.5M"
    assert format_millions(300_000, negative=True) == "-$0.3M"
    assert format_percent(37.5) == "37.5%"
    assert format_percent(90) == "90.0%"


def test_metric_cards(analysis):
    panel = build_disruption_panel(analysis)
    cards = find_by_class(panel, "metric-card")
    assert [collect_text(card) for card in cards] == [
        ["Current Trade Volume", "$1.0M"],
        ["Tariff Impact", "-$0.3M"],
        ["Diversification Index", "50.0%"],
        ["Risk Score", "90.0%"],
    ]


def test_offset_panel_hidden_by_default(analysis, offsets):
    assert find_by_class(build_disruption_panel(analysis), "offset-panel") == []
    hidden = build_disruption_panel(analysis, tariff_offset_data=offsets)
    assert find_by_class(hidden, "offset-panel") == []


def test_offset_panel_requires_data(analysis):
    panel = build_disruption_panel(analysis, show_tariff_offsets=True, tariff_offset_data=None)
    assert find_by_class(panel, "offset-panel") == []


def test_offset_panel_rows(analysis, offsets):
    panel = build_disruption_panel(analysis, show_tariff_offsets=True, tariff_offset_data=offsets)
    assert len(find_by_class(panel, "offset-panel")) == 1

    rows = find_by_class(panel, "offset-row")
    assert len(rows) == len(offsets.offset_mechanisms)
    assert collect_text(rows[0])[0] == "Free Trade Agreement Utilization"

    totals = collect_text(find_by_class(panel, "offset-totals"))
    assert "Total Potential Offset" in totals
    assert "$0.8M" in totals
    assert "0.0%" in totals

    assert len(find_by_class(panel, "feasibility-high")) == 2
    assert len(find_by_class(panel, "feasibility-medium")) == 3


def test_opportunity_bar_width(analysis):
    panel = build_disruption_panel(analysis)
    fill = find_by_class(panel, "opportunity-fill")[0]
    assert fill.style["width"] == f"{analysis.opportunity_score}%"
    assert "40.0%" in collect_text(find_by_class(panel, "opportunity-section"))


def test_recommendations_render_in_order(analysis):
    panel = build_disruption_panel(analysis)
    items = find_by_class(panel, "recommendation-text")
    assert [item.children for item in items] == analysis.recommendations


def test_scenario_chart_traces():
    fig = build_scenario_chart(project_scenario_series(1_000_000, 0.3, 5))
    names = [trace.name for trace in fig.data if trace.name]
    assert names == ["Optimistic", "Expected", "Pessimistic"]
    assert len(fig.data) == 4


def test_layout_has_callback_targets():
    layout = build_layout()
    text = collect_text(layout)
    assert "Analyze" in text
    assert find_by_class(layout, "dashboard")


def test_docs_formulas_follow_configured_rates():
    text = scenario_formulas()
    assert "optimistic  = base × 1.08^t" in text
    assert "pessimistic = base × 0.98^t × (1 − p × 0.5)" in text
    assert "expected    = base × 1.03^t × (1 − p × 0.3)" in text
