"""
Dashboard Layout
================
Assembles the input form, the analysis panel container and the scenario
chart into the final page layout.

Layout structure:
    ┌─────────────────────────────────────────────┐
    │  Header (title + subtitle + docs/API)       │
    ├───────────────┬─────────────────────────────┤
    │  Inputs form  │  Trade Disruption panel     │
    │               ├─────────────────────────────┤
    │               │  Scenario projection chart  │
    ├───────────────┴─────────────────────────────┤
    │  Footer                                     │
    └─────────────────────────────────────────────┘

The panel and chart are empty here; the ``analyze`` callback in app.py fills
them on first load and on every click of the Analyze button.
"""

from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from components.docs import build_docs_modal
from config import APP_SUBTITLE, APP_TITLE, DEFAULT_INPUTS, MAX_TIME_HORIZON


def _field(label: str, component) -> html.Div:
    return html.Div(
        className="form-field",
        children=[dbc.Label(label, className="form-label"), component],
    )


def build_input_form(defaults: dict | None = None) -> html.Div:
    """Build the calculator input form, pre-filled with ``defaults``."""
    defaults = defaults or DEFAULT_INPUTS

    return html.Div(
        className="input-panel",
        children=[
            html.H3("Inputs", className="panel-title"),

            html.H6("Trade Flow", className="form-section"),
            _field("Trade Volume ($)", dbc.Input(
                id="input-volume", type="number", min=0, step=1000,
                value=defaults["trade_volume"],
            )),
            _field("Tariff Rate (%)", dbc.Input(
                id="input-tariff", type="number", min=0, step=0.5,
                value=defaults["tariff_rate"],
            )),
            _field("Alternative Markets (comma separated)", dbc.Input(
                id="input-markets", type="text",
                value=defaults["alternative_markets"],
            )),
            _field("Market Diversification (0–10)", dbc.Input(
                id="input-diversification", type="number", min=0, step=0.1,
                value=defaults["diversification"],
            )),

            html.H6("Offset Strategy", className="form-section"),
            _field("Country of Origin", dbc.Input(
                id="input-origin", type="text", value=defaults["origin_country"],
            )),
            _field("Target Country", dbc.Input(
                id="input-target", type="text", value=defaults["target_country"],
            )),
            dbc.Switch(
                id="toggle-offsets", label="Show tariff offsets", value=True,
            ),

            html.H6("Scenarios", className="form-section"),
            _field("Disruption Probability", dcc.Slider(
                id="input-probability", min=0, max=1, step=0.05,
                value=defaults["disruption_probability"],
                marks={0: "0", 0.5: "0.5", 1: "1"},
            )),
            _field("Time Horizon (periods)", dbc.Input(
                id="input-horizon", type="number", min=0, max=MAX_TIME_HORIZON, step=1,
                value=defaults["time_horizon"],
            )),

            dbc.Button("Analyze", id="analyze-btn", color="info", className="analyze-btn", n_clicks=0),
        ],
    )


def build_layout() -> html.Div:
    """Construct the full dashboard layout.

    Returns
    -------
    html.Div
        Root layout element for the Dash app.
    """
    return html.Div(
        className="dashboard",
        children=[
            # ── Header ──────────────────────────────────────────────
            html.Header(
                className="dash-header",
                children=[
                    html.Div([
                        html.H1(APP_TITLE, className="app-title"),
                        html.P(APP_SUBTITLE, className="app-subtitle"),
                    ]),
                    html.Div(
                        className="header-meta",
                        children=[
                            dbc.Button(
                                "Docs",
                                id="docs-btn",
                                color="link",
                                className="docs-btn-header",
                                style={"color": "#9ca3af", "fontWeight": "600", "fontSize": "14px", "textDecoration": "none"},
                            ),
                        ],
                    ),
                ],
            ),

            # ── Body (form + results) ───────────────────────────────
            html.Section(
                className="body-row",
                children=[
                    html.Div(className="chart-panel chart-narrow", children=[build_input_form()]),
                    html.Div(
                        className="chart-panel chart-wide",
                        children=[
                            dcc.Loading(html.Div(id="analysis-panel"), type="dot"),
                            dcc.Graph(
                                id="scenario-chart",
                                config={"displayModeBar": False, "responsive": True},
                            ),
                        ],
                    ),
                ],
            ),

            # ── Footer ──────────────────────────────────────────────
            html.Footer(
                className="dash-footer",
                children=[
                    html.P(
                        "Trade Disruption Model  |  Illustrative formulas, not trade advice",
                        className="footer-text",
                    ),
                ],
            ),

            build_docs_modal(),
        ],
    )
