"""
Trade Disruption Panel
======================
Maps a ``TradeAnalysis`` (and optionally an ``OffsetResult``) onto the full
analysis panel:

    ┌─────────────────────────────────────────────┐
    │  📊 Trade Disruption Analysis               │
    ├──────────────────────┬──────────────────────┤
    │  Metric cards (2 × 2)                       │
    ├─────────────────────────────────────────────┤
    │  Tariff offset mechanisms (optional)        │
    ├─────────────────────────────────────────────┤
    │  Opportunity bar                            │
    ├─────────────────────────────────────────────┤
    │  Strategic recommendations                  │
    └─────────────────────────────────────────────┘

Pure rendering: no numbers are computed here beyond display formatting.
"""

from __future__ import annotations

from dash import html

from analyzer.models import OffsetResult, TradeAnalysis
from components.cards import build_metric_cards
from components.formatting import format_percent
from components.offsets import build_offset_panel
from config import COLORS


def build_opportunity_bar(opportunity_score: float) -> html.Div:
    """Progress bar whose fill width is the opportunity score."""
    return html.Div(
        className="opportunity-section",
        children=[
            html.H4("Opportunity Assessment", className="panel-subtitle"),
            html.Div(
                className="opportunity-box",
                children=[
                    html.Div(
                        className="opportunity-label-row",
                        children=[
                            html.Span("Market Diversification Potential", className="opportunity-label"),
                            html.Span(
                                format_percent(opportunity_score),
                                className="opportunity-value",
                                style={"color": COLORS["accent"]},
                            ),
                        ],
                    ),
                    html.Div(
                        className="opportunity-track",
                        children=[
                            html.Div(
                                className="opportunity-fill",
                                style={"width": f"{opportunity_score}%"},
                            ),
                        ],
                    ),
                ],
            ),
        ],
    )


def build_recommendation_list(recommendations: list[str]) -> html.Div:
    """Bulleted list of recommendations, in the order given."""
    return html.Div(
        className="recommendation-section",
        children=[
            html.H4("Strategic Recommendations", className="panel-subtitle"),
            html.Ul(
                className="recommendation-list",
                children=[
                    html.Li(
                        className="recommendation-item",
                        children=[
                            html.Span("•", className="recommendation-bullet", style={"color": COLORS["accent"]}),
                            html.Span(rec, className="recommendation-text"),
                        ],
                    )
                    for rec in recommendations
                ],
            ),
        ],
    )


def build_disruption_panel(
    analysis: TradeAnalysis,
    *,
    show_tariff_offsets: bool = False,
    tariff_offset_data: OffsetResult | None = None,
) -> html.Div:
    """Render the complete trade disruption analysis panel.

    Parameters
    ----------
    analysis : TradeAnalysis
        Output of ``calculate_disruption_impact``.
    show_tariff_offsets : bool
        Whether to render the offset-mechanism panel.
    tariff_offset_data : OffsetResult | None
        Offsets to render. The panel is skipped when this is ``None`` even if
        ``show_tariff_offsets`` is set.

    Returns
    -------
    html.Div
        Root element of the panel.
    """
    children = [
        html.H3(
            [html.Span("📊", style={"color": COLORS["accent"]}), " Trade Disruption Analysis"],
            className="panel-title",
        ),
        build_metric_cards(analysis.metrics),
    ]

    if show_tariff_offsets and tariff_offset_data is not None:
        children.append(build_offset_panel(tariff_offset_data))

    children.append(build_opportunity_bar(analysis.opportunity_score))
    children.append(build_recommendation_list(analysis.recommendations))

    return html.Div(className="trade-disruption-analysis", children=children)
