"""Numeric clamping and display formatting"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class CurrencyFormat:
    symbol: str
    decimals: int
    thousands_separator: str
    decimal_separator: str


CURRENCY_FORMATS: Dict[str, CurrencyFormat] = {
    "USD": CurrencyFormat(symbol="$", decimals=2, thousands_separator=",", decimal_separator="."),
    "EUR": CurrencyFormat(symbol="€", decimals=2, thousands_separator=".", decimal_separator=","),
    "GBP": CurrencyFormat(symbol="£", decimals=2, thousands_separator=",", decimal_separator="."),
}


def clamp(value: float, low: float, high: float) -> float:
    """Constrain value to the closed interval [low, high]"""
    return max(low, min(high, value))


def format_currency(amount: float, currency: str = "USD") -> str:
    """
    Render an amount with the currency's symbol and separators.

    Examples:
        1234.5 USD  -> "$1,234.50"
        1234.5 EUR  -> "€1.234,50"
        -20 USD     -> "-$20.00"
    """
    try:
        fmt = CURRENCY_FORMATS[currency.upper()]
    except KeyError:
        raise ValueError(f"Unsupported currency: {currency}") from None

    # Format with placeholder separators, then swap in the currency's own
    body = f"{abs(amount):,.{fmt.decimals}f}"
    body = body.replace(",", "\0").replace(".", fmt.decimal_separator).replace("\0", fmt.thousands_separator)

    sign = "-" if amount < 0 and round(abs(amount), fmt.decimals) != 0 else ""
    return f"{sign}{fmt.symbol}{body}"


def format_percentage(value: float, decimals: int = 2) -> str:
    return f"{value:.{decimals}f}%"


def format_number(value: float, decimals: int = 2) -> str:
    return f"{value:.{decimals}f}"


def round_to_nearest(value: float, nearest: float) -> float:
    """Round value to the nearest multiple of `nearest` (e.g. 0.01 for cents)"""
    return round(value / nearest) * nearest
