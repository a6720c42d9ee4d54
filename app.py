"""
Trade Disruption Model — Dashboard
==================================
Entry point. Run with:

    python app.py

Then open http://127.0.0.1:8050 in your browser. Host, port and debug mode
can be overridden with ``DASH_HOST``, ``DASH_PORT`` and ``DASH_DEBUG``
(read from the environment or a ``.env`` file).
"""

from __future__ import annotations

import logging
import os

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output, State, ctx
from dotenv import load_dotenv

from analyzer import (
    calculate_disruption_impact,
    calculate_tariff_offset_strategies,
    project_scenario_series,
)
from components.charts import build_scenario_chart
from components.layout import build_layout
from components.panel import build_disruption_panel
from config import APP_TITLE

# Load .env before anything reads server settings
load_dotenv()


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)


def parse_markets(raw: str | None) -> list[str]:
    """Split a comma-separated market list, dropping blanks."""
    if not raw:
        return []
    return [name.strip() for name in raw.split(",") if name.strip()]


def run_analysis(
    trade_volume,
    tariff_rate,
    markets_raw,
    diversification,
    origin,
    target,
    show_offsets,
    probability,
    horizon,
):
    """Run every calculator for one set of form inputs.

    Returns
    -------
    tuple
        ``(panel, figure)``: the rendered disruption panel and the scenario
        chart. On invalid input the panel is an alert and the figure is
        empty.
    """
    try:
        if trade_volume is None or tariff_rate is None or diversification is None:
            raise ValueError("Trade volume, tariff rate and diversification are required.")

        volume = float(trade_volume)
        rate = float(tariff_rate)
        analysis = calculate_disruption_impact(
            volume, rate, parse_markets(markets_raw), float(diversification),
        )
        offsets = None
        if show_offsets:
            offsets = calculate_tariff_offset_strategies(
                rate, volume, (origin or "").strip(), (target or "").strip(),
            )
        projection = project_scenario_series(
            volume, float(probability or 0.0), int(horizon or 0),
        )
    except (ValueError, OverflowError) as e:
        logger.warning("Analysis rejected: %s", e)
        return dbc.Alert(str(e), color="danger", className="analysis-error"), {}

    panel = build_disruption_panel(
        analysis,
        show_tariff_offsets=bool(show_offsets),
        tariff_offset_data=offsets,
    )
    return panel, build_scenario_chart(projection)


def create_app() -> dash.Dash:
    """Factory function that creates and configures the Dash application."""
    app = dash.Dash(
        __name__,
        title=APP_TITLE,
        meta_tags=[
            {"name": "viewport", "content": "width=device-width, initial-scale=1"},
        ],
        external_stylesheets=[
            dbc.themes.DARKLY,
            "https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap",
        ],
        suppress_callback_exceptions=True,
    )

    # ── API & Rate Limiting ──────────────────────────────────────────────
    from api.routes import api_bp, get_limiter

    limiter = get_limiter(app.server)
    app.server.register_blueprint(api_bp)

    import flask

    # Exempt Dash's own endpoints from rate limiting
    @limiter.request_filter
    def ignore_dash_internals():
        return flask.request.path.startswith("/_")

    @app.server.get("/health")
    def health():
        """Liveness endpoint."""
        return flask.jsonify({"state": "healthy"}), 200

    app.layout = build_layout

    # ── Analysis Callback ────────────────────────────────────────────────
    @app.callback(
        Output("analysis-panel", "children"),
        Output("scenario-chart", "figure"),
        Input("analyze-btn", "n_clicks"),
        State("input-volume", "value"),
        State("input-tariff", "value"),
        State("input-markets", "value"),
        State("input-diversification", "value"),
        State("input-origin", "value"),
        State("input-target", "value"),
        State("toggle-offsets", "value"),
        State("input-probability", "value"),
        State("input-horizon", "value"),
    )
    def analyze(_n_clicks, *inputs):
        return run_analysis(*inputs)

    # ── Docs Modal Callback ─────────────────────────────────────────────
    @app.callback(
        Output("docs-modal", "is_open"),
        Input("docs-btn", "n_clicks"),
        Input("docs-modal-close", "n_clicks"),
        prevent_initial_call=True,
    )
    def toggle_docs_modal(open_click, close_click):
        return ctx.triggered_id == "docs-btn"

    return app


# ── Main ────────────────────────────────────────────────────────────────────

# Create the app globally so Gunicorn can find it
app = create_app()
server = app.server  # Expose the Flask server for Gunicorn

if __name__ == "__main__":
    app.run(
        debug=os.environ.get("DASH_DEBUG", "true").lower() == "true",
        host=os.environ.get("DASH_HOST", "127.0.0.1"),
        port=int(os.environ.get("DASH_PORT", "8050")),
    )
