"""
Tariff Offset Panel
===================
Totals row (potential offset + net effective rate) followed by one row per
offset mechanism with its savings and a color-coded feasibility badge.
"""

from __future__ import annotations

from dash import html

from analyzer.models import OffsetMechanism, OffsetResult
from components.formatting import format_millions, format_percent
from config import COLORS, FEASIBILITY_COLORS, hex_to_rgba


def _feasibility_badge(feasibility: str) -> html.Span:
    color = FEASIBILITY_COLORS.get(feasibility, COLORS["red"])
    return html.Span(
        feasibility,
        className=f"feasibility-badge feasibility-{feasibility.lower()}",
        style={"color": color, "backgroundColor": hex_to_rgba(color, 0.15)},
    )


def _mechanism_row(mechanism: OffsetMechanism) -> html.Div:
    return html.Div(
        className="offset-row",
        children=[
            html.Div([
                html.Div(mechanism.name, className="offset-name"),
                html.Div(mechanism.description, className="offset-description"),
            ]),
            html.Div(
                className="offset-meta",
                children=[
                    html.Div(
                        format_millions(mechanism.potential_savings),
                        className="offset-savings",
                        style={"color": COLORS["green"]},
                    ),
                    _feasibility_badge(mechanism.feasibility.value),
                ],
            ),
        ],
    )


def build_offset_panel(offsets: OffsetResult) -> html.Div:
    """Build the offset-mechanism panel.

    Parameters
    ----------
    offsets : OffsetResult
        Output of ``calculate_tariff_offset_strategies``.

    Returns
    -------
    html.Div
        Panel with totals and one row per mechanism.
    """
    totals = html.Div(
        className="offset-totals",
        children=[
            html.Div(
                className="offset-total-card",
                children=[
                    html.Div("Total Potential Offset", className="offset-total-label"),
                    html.Div(
                        format_millions(offsets.total_potential_offset),
                        className="offset-total-value",
                        style={"color": COLORS["green"]},
                    ),
                ],
            ),
            html.Div(
                className="offset-total-card",
                children=[
                    html.Div("Net Effective Rate", className="offset-total-label"),
                    html.Div(
                        format_percent(offsets.net_effective_rate),
                        className="offset-total-value",
                        style={"color": COLORS["accent"]},
                    ),
                ],
            ),
        ],
    )

    return html.Div(
        className="offset-panel",
        children=[
            html.H4(
                [html.Span("💰", style={"color": COLORS["accent"]}), " Tariff Offset Mechanisms"],
                className="panel-subtitle",
            ),
            totals,
            html.Div(
                className="offset-list",
                children=[_mechanism_row(m) for m in offsets.offset_mechanisms],
            ),
        ],
    )
