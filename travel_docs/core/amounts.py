"""
Amounts — parsing and quantization of monetary inputs

Rates, distances and totals arrive from forms as numbers, empty strings, or
text typed in either notation:

    "1234.56"   (dot decimal)
    "1.234,56"  (pt-BR: dot thousands, comma decimal)
    "1234,56"   (pt-BR without thousands separator)

CRITICAL INVARIANTS:
1. parse_decimal never raises; anything unusable is None
2. NaN/Infinity never propagate (treated as unusable)
3. All money leaving this module is quantized to cents, ROUND_HALF_UP
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Final, Optional

CENT: Final[Decimal] = Decimal("0.01")

ZERO: Final[Decimal] = Decimal("0.00")

# Currency markers stripped before parsing
CURRENCY_MARKERS: Final[tuple[str, ...]] = ("R$", "US$", "$", "€")

_SPACES: Final = re.compile(r"\s+")


def parse_decimal(value: object) -> Optional[Decimal]:
    """
    Parse a numeric input into a finite Decimal.

    Examples:
        >>> parse_decimal("1.234,56")
        Decimal('1234.56')
        >>> parse_decimal("R$ 500")
        Decimal('500')
        >>> parse_decimal("") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, (int, float)):
        try:
            parsed = Decimal(str(value))
        except InvalidOperation:
            return None
    elif isinstance(value, str):
        text = value.strip()
        for marker in CURRENCY_MARKERS:
            text = text.replace(marker, "")
        text = _SPACES.sub("", text)
        if not text:
            return None

        if "," in text:
            # pt-BR notation: dots are thousands separators
            text = text.replace(".", "").replace(",", ".")

        try:
            parsed = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    if not parsed.is_finite():
        return None
    return parsed


def quantize_cents(value: Decimal) -> Decimal:
    """Round to 2 fractional digits, half-up."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)
