"""
Scenario Chart
==============
Plotly line chart of the optimistic / expected / pessimistic projections
produced by ``project_scenario_series``.
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from config import COLORS, SCENARIO_COLORS, hex_to_rgba

_SCENARIO_LABELS: dict[str, str] = {
    "optimistic":  "Optimistic",
    "expected":    "Expected",
    "pessimistic": "Pessimistic",
}


def build_scenario_chart(projection: pd.DataFrame) -> go.Figure:
    """Build the scenario projection chart.

    Parameters
    ----------
    projection : pd.DataFrame
        Indexed by period with one column per scenario.

    Returns
    -------
    go.Figure
        One line per scenario, with a shaded band between the optimistic
        and pessimistic paths.
    """
    fig = go.Figure()
    periods = list(projection.index)

    # Shaded band: optimistic forward, pessimistic back
    fig.add_trace(
        go.Scatter(
            x=periods + periods[::-1],
            y=list(projection["optimistic"]) + list(projection["pessimistic"])[::-1],
            fill="toself",
            fillcolor=hex_to_rgba(COLORS["accent"], 0.08),
            line={"width": 0},
            hoverinfo="skip",
            showlegend=False,
        )
    )

    for col, label in _SCENARIO_LABELS.items():
        fig.add_trace(
            go.Scatter(
                x=periods,
                y=projection[col].values,
                name=label,
                mode="lines+markers",
                line={"color": SCENARIO_COLORS[col], "width": 2,
                      "dash": "solid" if col == "expected" else "dot"},
                hovertemplate=f"<b>{label}</b><br>"
                              "Period %{x}<br>"
                              "Volume: $%{y:,.0f}<extra></extra>",
            )
        )

    fig.update_layout(
        title={
            "text": "Trade Volume Scenarios",
            "font": {"size": 14, "color": COLORS["text"], "family": "Inter"},
            "x": 0,
            "xanchor": "left",
        },
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font={"family": "Inter", "color": COLORS["text_muted"]},
        margin={"t": 40, "b": 40, "l": 60, "r": 16},
        height=320,
        yaxis={
            "gridcolor": COLORS["grid"],
            "zeroline": False,
            "tickfont": {"size": 10},
            "tickprefix": "$",
            "title": None,
        },
        xaxis={
            "gridcolor": COLORS["grid"],
            "zeroline": False,
            "tickfont": {"size": 10},
            "dtick": 1,
            "title": "Period",
        },
        legend={
            "orientation": "h",
            "yanchor": "top",
            "y": -0.2,
            "xanchor": "center",
            "x": 0.5,
            "font": {"size": 10},
        },
        hovermode="x unified",
    )

    return fig
