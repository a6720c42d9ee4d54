"""Tests for the Dash app wiring."""

from __future__ import annotations

import dash_bootstrap_components as dbc

import app as dashboard
from conftest import find_by_class


def test_parse_markets():
    assert dashboard.parse_markets(" Vietnam, ,India ,") == ["Vietnam", "India"]
    assert dashboard.parse_markets(None) == []


def test_run_analysis_renders_panel_and_chart():
    panel, fig = dashboard.run_analysis(
        1_000_000, 25, "Vietnam, India", 2.5, "United States", "Mexico", True, 0.4, 3,
    )
    assert find_by_class(panel, "trade-disruption-analysis")
    assert find_by_class(panel, "offset-panel")
    assert len(fig.data) == 4


def test_run_analysis_without_offsets():
    panel, _ = dashboard.run_analysis(
        1_000_000, 25, "", 2.5, "United States", "Mexico", False, 0.4, 3,
    )
    assert find_by_class(panel, "offset-panel") == []


def test_run_analysis_rejects_zero_volume():
    panel, fig = dashboard.run_analysis(0, 25, "", 2.5, "", "", True, 0.4, 3)
    assert isinstance(panel, dbc.Alert)
    assert fig == {}


def test_health_endpoint():
    client = dashboard.server.test_client()
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"state": "healthy"}


def test_run_analysis_rejects_horizon_beyond_limit():
    panel, fig = dashboard.run_analysis(
        1_000_000, 25, "", 2.5, "United States", "Mexico", True, 0.4, 10_000,
    )
    assert isinstance(panel, dbc.Alert)
    assert "Time horizon" in panel.children
    assert fig == {}


def test_run_analysis_rejects_non_finite_volume():
    panel, _ = dashboard.run_analysis(
        float("nan"), 25, "", 2.5, "United States", "Mexico", True, 0.4, 3,
    )
    assert isinstance(panel, dbc.Alert)
