"""
Docs Component
==============
Contains the content for the "How it Works" documentation modal.
"""
from dash import html
import dash_bootstrap_components as dbc

from config import (
    BASE_GROWTH_RATE,
    EXPECTED_DISRUPTION_WEIGHT,
    FREE_TRADE_AGREEMENTS,
    OFFSET_MECHANISMS,
    PESSIMISTIC_DISRUPTION_WEIGHT,
    SCENARIO_RATE_SPREAD,
)


def _formula(text: str) -> html.Pre:
    return html.Pre(
        text,
        style={"backgroundColor": "#111", "padding": "10px", "borderRadius": "5px", "color": "#a5f3fc"},
    )


def scenario_formulas() -> str:
    """Scenario growth formulas with the configured rates filled in."""
    optimistic = 1 + BASE_GROWTH_RATE + SCENARIO_RATE_SPREAD
    pessimistic = 1 + BASE_GROWTH_RATE - SCENARIO_RATE_SPREAD
    expected = 1 + BASE_GROWTH_RATE
    return (
        f"optimistic  = base × {optimistic:g}^t\n"
        f"pessimistic = base × {pessimistic:g}^t × (1 − p × {PESSIMISTIC_DISRUPTION_WEIGHT:g})\n"
        f"expected    = base × {expected:g}^t × (1 − p × {EXPECTED_DISRUPTION_WEIGHT:g})"
    )


def build_docs_modal():
    """Build the methodology documentation modal."""
    mechanism_items = [
        html.Li(f"{m['name']}: {m['multiplier']:.0%} of the gross tariff ({m['feasibility']} feasibility)")
        for m in OFFSET_MECHANISMS
    ]
    fta_items = [
        html.Li(f"{name}: {', '.join(sorted(members))}")
        for name, members in FREE_TRADE_AGREEMENTS
    ]

    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle("How the Trade Disruption Model Works"), className="modal-header"),
            dbc.ModalBody(
                children=[
                    # ── Disruption Impact ────────────────────────────────────
                    html.H4("Disruption Impact", className="text-white mb-3"),
                    html.P(
                        "Every metric is a fixed formula over the inputs you enter. Nothing is fetched "
                        "from outside; the same inputs always give the same answer.",
                        className="text-muted mb-3",
                    ),
                    _formula(
                        "tariff impact         = volume × rate/100 × 1.5\n"
                        "diversification index = min(100, input × 10)\n"
                        "risk score            = min(100, rate × 2 + (100 − diversification))\n"
                        "alt. market potential = volume × diversification/100 × 0.8\n"
                        "opportunity score     = min(100, potential / volume × 100)"
                    ),

                    # ── Offsets ──────────────────────────────────────────────
                    html.H4("Tariff Offsets", className="text-white mb-3 mt-4"),
                    html.Ul(mechanism_items, className="text-muted small mb-3"),
                    html.P(
                        "The FTA mechanism is only offered when origin and target belong to one of "
                        "these agreements:",
                        className="text-muted small",
                    ),
                    html.Ul(fta_items, className="text-muted small mb-3"),
                    _formula("net effective rate = max(0, rate − total offset / volume × 100)"),

                    # ── Scenarios ────────────────────────────────────────────
                    html.H4("Scenario Projection", className="text-white mb-3 mt-4"),
                    _formula(scenario_formulas()),
                ]
            ),
            dbc.ModalFooter(
                dbc.Button("Close", id="docs-modal-close", className="ms-auto", n_clicks=0)
            ),
        ],
        id="docs-modal",
        is_open=False,
        size="xl",
        scrollable=True,
        centered=True,
        className="dark-modal",
    )
