"""
Metric Cards
============
Renders the four headline cards of the disruption panel, in two columns:

    ┌──────────────────────┬──────────────────────┐
    │ Current Trade Volume │ Diversification Index│
    │ Tariff Impact        │ Risk Score           │
    └──────────────────────┴──────────────────────┘
"""

from __future__ import annotations

from dash import html

from analyzer.models import TradeMetrics
from components.formatting import format_millions, format_percent
from config import COLORS


def _metric_card(label: str, value: str, *, label_color: str, value_color: str) -> html.Div:
    return html.Div(
        className="metric-card",
        children=[
            html.H4(label, className="metric-label", style={"color": label_color}),
            html.P(value, className="metric-value", style={"color": value_color}),
        ],
    )


def build_metric_cards(metrics: TradeMetrics) -> html.Div:
    """Build the 2×2 grid of metric cards.

    Parameters
    ----------
    metrics : TradeMetrics
        Metrics block of a ``TradeAnalysis``.

    Returns
    -------
    html.Div
        Grid containing two columns of two cards each.
    """
    left = html.Div(
        className="metric-column",
        children=[
            _metric_card(
                "Current Trade Volume",
                format_millions(metrics.current_trade_volume),
                label_color=COLORS["accent"],
                value_color=COLORS["text"],
            ),
            _metric_card(
                "Tariff Impact",
                format_millions(metrics.tariff_impact, negative=True),
                label_color=COLORS["accent_alt"],
                value_color=COLORS["red"],
            ),
        ],
    )
    right = html.Div(
        className="metric-column",
        children=[
            _metric_card(
                "Diversification Index",
                format_percent(metrics.diversification_index),
                label_color=COLORS["accent"],
                value_color=COLORS["text"],
            ),
            _metric_card(
                "Risk Score",
                format_percent(metrics.risk_score),
                label_color=COLORS["accent_alt"],
                value_color=COLORS["yellow"],
            ),
        ],
    )
    return html.Div(className="metric-grid", children=[left, right])
