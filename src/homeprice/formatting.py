"""Output formatting for the tutorial's result lines."""

from __future__ import annotations

from homeprice.config import CURRENCY_SYMBOL


def format_currency(amount: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """Render an amount as currency with two decimals and grouping.

    The symbol comes from config, never from the process locale.

    >>> format_currency(276.98, "£")
    '£276.98'
    >>> format_currency(-1234.5, "$")
    '-$1,234.50'
    """
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_prediction_line(
    step: int,
    size: float,
    price: float,
    symbol: str = CURRENCY_SYMBOL,
) -> str:
    """One result line: square footage (size x 1000) and price (x 100) in k."""
    return (
        f"//{step} Predicted price for size: {size * 1000:g} sq ft= "
        f"{format_currency(price * 100, symbol)}k"
    )


__all__ = ["format_currency", "format_prediction_line"]
