"""
Money primitives for travel documents.

Verbalization (valor por extenso), trip cost accumulation, amount parsing and
pt-BR currency display.
"""

# Amounts
from travel_docs.core.amounts import (
    CENT,
    ZERO,
    parse_decimal,
    quantize_cents,
)

# Verbalizer
from travel_docs.core.money.verbalizer import (
    MAX_AMOUNT_EXCLUSIVE,
    ZERO_AMOUNT_TEXT,
    AmountOutOfRangeError,
    compile_hundreds,
    to_cents_amount,
    verbalize,
    verbalize_integer,
)

# Formatting
from travel_docs.core.money.formatting import (
    CURRENCY_SYMBOLS,
    CurrencyCode,
    format_brl,
    format_currency,
    group_thousands,
)

# Costs
from travel_docs.core.money.costs import (
    CostBreakdown,
    accumulate,
    accumulate_trip,
    coerce_non_negative,
    inclusive_day_count,
    resolve_day_count,
)

__all__ = [
    # Amounts
    "CENT",
    "ZERO",
    "parse_decimal",
    "quantize_cents",
    # Verbalizer
    "MAX_AMOUNT_EXCLUSIVE",
    "ZERO_AMOUNT_TEXT",
    "AmountOutOfRangeError",
    "compile_hundreds",
    "to_cents_amount",
    "verbalize",
    "verbalize_integer",
    # Formatting
    "CURRENCY_SYMBOLS",
    "CurrencyCode",
    "format_brl",
    "format_currency",
    "group_thousands",
    # Costs
    "CostBreakdown",
    "accumulate",
    "accumulate_trip",
    "coerce_non_negative",
    "inclusive_day_count",
    "resolve_day_count",
]
