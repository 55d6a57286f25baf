"""
Currency display in Brazilian convention

    Decimal("1550.3") → "R$ 1.550,30"
    Decimal("99.9"), "USD" → "US$ 99,90"

Dot as thousands separator, comma as decimal separator, symbol first,
separated by a regular space.
"""

from decimal import Decimal
from enum import Enum
from typing import Final

from travel_docs.core.amounts import ZERO, parse_decimal, quantize_cents


class CurrencyCode(str, Enum):
    """Currencies that appear on printed documents."""

    BRL = "BRL"
    USD = "USD"
    EUR = "EUR"


CURRENCY_SYMBOLS: Final[dict[CurrencyCode, str]] = {
    CurrencyCode.BRL: "R$",
    CurrencyCode.USD: "US$",
    CurrencyCode.EUR: "€",
}


def group_thousands(value: Decimal) -> str:
    """
    Absolute value with pt-BR separators.

    Example:
        >>> group_thousands(Decimal("1234567.8"))
        '1.234.567,80'
    """
    us_style = f"{abs(quantize_cents(value)):,.2f}"
    return us_style.replace(",", "_").replace(".", ",").replace("_", ".")


def format_currency(amount: object, currency: CurrencyCode | str = CurrencyCode.BRL) -> str:
    """
    Format an amount for print.

    Unparseable or missing amounts print as zero, the way the reports show
    a reservation whose value was never filled in.

    Args:
        amount: Decimal, number or numeric text
        currency: CurrencyCode or its code string ("BRL", "USD", "EUR")

    Returns:
        e.g. "R$ 1.550,30", "-R$ 10,00"
    """
    code = CurrencyCode(currency)
    value = parse_decimal(amount)
    if value is None:
        value = ZERO

    sign = "-" if quantize_cents(value) < 0 else ""
    return f"{sign}{CURRENCY_SYMBOLS[code]} {group_thousands(value)}"


def format_brl(amount: object) -> str:
    """Shorthand for format_currency(amount, BRL)."""
    return format_currency(amount, CurrencyCode.BRL)
