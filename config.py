"""
Trade Disruption Model
======================
Central configuration for the calculators and the dashboard.

All formula coefficients, lookup tables, recommendation text, and display
settings live here so you never have to hunt through component code to
change behavior.
"""

# ---------------------------------------------------------------------------
# Disruption Impact Coefficients
# ---------------------------------------------------------------------------
# tariff_impact   = volume × (rate / 100) × |elasticity|
# diversification = min(100, input × DIVERSIFICATION_SCALE)
# alt. potential  = volume × (diversification / 100) × CAPTURE_RATE
# ---------------------------------------------------------------------------

PRICE_ELASTICITY = -1.5          # typical trade elasticity
DIVERSIFICATION_SCALE = 10.0
RISK_TARIFF_WEIGHT = 2.0
ALTERNATIVE_MARKET_CAPTURE = 0.8
SCORE_MIN = 0.0
SCORE_MAX = 100.0

# ---------------------------------------------------------------------------
# Scenario Projection
# ---------------------------------------------------------------------------

BASE_GROWTH_RATE = 0.03          # 3% per period
SCENARIO_RATE_SPREAD = 0.05      # symmetric: optimistic +spread, pessimistic -spread
MAX_TIME_HORIZON = 100           # periods; larger exponents overflow
PESSIMISTIC_DISRUPTION_WEIGHT = 0.5
EXPECTED_DISRUPTION_WEIGHT = 0.3

# ---------------------------------------------------------------------------
# Free Trade Agreements
# ---------------------------------------------------------------------------
# Static membership groups. Two countries "have an FTA" when both names sit
# in the same group. Names are matched exactly.
# ---------------------------------------------------------------------------

FREE_TRADE_AGREEMENTS: tuple[tuple[str, frozenset[str]], ...] = (
    ("USMCA",                     frozenset({"United States", "Canada", "Mexico"})),
    ("EU-UK TCA",                 frozenset({"European Union", "United Kingdom"})),
    ("China-Australia FTA",       frozenset({"China", "Australia"})),
    ("JAEPA",                     frozenset({"Japan", "Australia"})),
    ("SAFTA",                     frozenset({"Singapore", "Australia"})),
    ("KAFTA",                     frozenset({"South Korea", "Australia"})),
    ("China-New Zealand FTA",     frozenset({"China", "New Zealand"})),
    ("Japan-New Zealand EPA",     frozenset({"Japan", "New Zealand"})),
    ("ANZCERTA",                  frozenset({"Australia", "New Zealand"})),
)

# ---------------------------------------------------------------------------
# Tariff Offset Mechanisms
# ---------------------------------------------------------------------------
# Savings = volume × (rate / 100) × multiplier. Order here is display order.
# The "fta" entry is only offered when the country pair shares an agreement.
# ---------------------------------------------------------------------------

OFFSET_MECHANISMS: tuple[dict, ...] = (
    {
        "key": "fta",
        "name": "Free Trade Agreement Utilization",
        "description": "Leverage existing FTA for tariff elimination or reduction",
        "multiplier": 0.90,
        "feasibility": "High",
        "requirements": ("FTA ratification", "Rules of origin compliance", "Certificate of origin"),
    },
    {
        "key": "drawback",
        "name": "Duty Drawback Program",
        "description": "Recover duties paid on imported materials used in export production",
        "multiplier": 0.85,
        "feasibility": "Medium",
        "requirements": ("Export production", "Material traceability", "Customs registration"),
    },
    {
        "key": "tib",
        "name": "Temporary Importation Under Bond",
        "description": "Import goods duty-free for processing and re-export",
        "multiplier": 0.95,
        "feasibility": "Medium",
        "requirements": ("Re-export commitment", "Bond posting", "Processing facility"),
    },
    {
        "key": "sez",
        "name": "Special Economic Zone Benefits",
        "description": "Utilize SEZ incentives for reduced or eliminated tariffs",
        "multiplier": 0.80,
        "feasibility": "High",
        "requirements": ("SEZ location", "Business registration", "Export orientation"),
    },
    {
        "key": "export_credit",
        "name": "Export Credit Financing",
        "description": "Access government-backed export financing to offset costs",
        "multiplier": 0.30,
        "feasibility": "Medium",
        "requirements": ("Credit application", "Export contract", "Bank partnership"),
    },
)

# ---------------------------------------------------------------------------
# Recommendation Rules
# ---------------------------------------------------------------------------

HIGH_TARIFF_THRESHOLD = 15.0         # strictly greater than
LOW_DIVERSIFICATION_THRESHOLD = 30.0 # strictly less than
MAX_FOCUS_MARKETS = 3

RECOMMENDATION_TEXT: dict[str, str] = {
    "high_tariff": "High tariff barriers detected. Consider immediate market diversification strategies.",
    "low_diversification": "Low market diversification. Prioritize development of alternative export markets.",
    "focus_markets": "Focus on emerging markets: {markets}",
    "hedging": "Implement hedging strategies for currency and commodity price volatility.",
    "regional": "Strengthen regional trade agreements and bilateral partnerships.",
}

# ---------------------------------------------------------------------------
# Dashboard Chrome
# ---------------------------------------------------------------------------

APP_TITLE = "Trade Disruption Model"
APP_SUBTITLE = "Tariff impact, offsets & scenario projections"

DEFAULT_INPUTS: dict = {
    "trade_volume": 1_000_000.0,
    "tariff_rate": 25.0,
    "alternative_markets": "Vietnam, India, Mexico, Brazil",
    "diversification": 2.5,
    "origin_country": "United States",
    "target_country": "Canada",
    "disruption_probability": 0.4,
    "time_horizon": 5,
}

# ---------------------------------------------------------------------------
# Color Palette (consistent across all panels and charts)
# ---------------------------------------------------------------------------

COLORS = {
    "bg":           "#0f1117",
    "card":         "#1a1d26",
    "card_border":  "#2a2d3a",
    "text":         "#e1e4ea",
    "text_muted":   "#8a8f9e",
    "accent":       "#06b6d4",   # cyan
    "accent_alt":   "#a16207",   # brown
    "green":        "#00d97e",
    "yellow":       "#f6c343",
    "orange":       "#fd7e14",
    "red":          "#e63757",
    "blue":         "#3b82f6",
    "grid":         "#1e2130",
}

FEASIBILITY_COLORS: dict[str, str] = {
    "High":   COLORS["green"],
    "Medium": COLORS["yellow"],
    "Low":    COLORS["red"],
}

SCENARIO_COLORS: dict[str, str] = {
    "optimistic":  COLORS["green"],
    "expected":    COLORS["accent"],
    "pessimistic": COLORS["red"],
}


def hex_to_rgba(hex_color: str, alpha: float) -> str:
    """Convert a hex color string to an rgba() CSS string.

    Parameters
    ----------
    hex_color : str
        Hex color like ``"#06b6d4"``.
    alpha : float
        Opacity between 0.0 and 1.0.

    Returns
    -------
    str
        CSS ``rgba(r, g, b, a)`` string.
    """
    h = hex_color.lstrip("#")
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    return f"rgba({r},{g},{b},{alpha})"
