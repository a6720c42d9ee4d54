"""Display formatting shared by the dashboard panels."""

from __future__ import annotations


def format_millions(amount: float, *, negative: bool = False) -> str:
    """Format a currency amount in millions, e.g. ``1_500_000`` → ``"$1.5M"``."""
    sign = "-" if negative else ""
    return f"{sign}${amount / 1_000_000:.1f}M"


def format_percent(value: float) -> str:
    """One-decimal percentage, e.g. ``37.5`` → ``"37.5%"``."""
    return f"{value:.1f}%"
