"""
Monetary Verbalizer — valor por extenso

Converts a non-negative amount in reais into the written-out Portuguese form
required on payment clauses:

    1550.30 → "mil e quinhentos e cinquenta reais e trinta centavos"

DECOMPOSITION:
    amount → reais (integer) + centavos (0..99), after rounding to cents
    reais  → millions | thousands | 0..999, most significant first
    0..999 → lookup tables, recursive on the hundreds remainder

IRREGULAR CASES (explicit branches, nowhere else):
- 10..19 are single words (onze, doze, ...), never "dez e um"
- exactly 100 is "cem"; 101..199 use "cento"
- exactly one thousand is "mil", never "um mil"
- one million is "milhão", more than one "milhões"

CONNECTOR " e " BETWEEN GROUPS:
    The last nonzero group is joined with " e " to what precedes it.
    Millions followed by thousands with a nonzero trailing group are joined by
    a plain space:  1_002_500 → "um milhão dois mil e quinhentos reais".
    This is the wording already printed on signed contracts and is locked by
    golden vectors in tests/unit/test_verbalizer.py.

CRITICAL INVARIANTS:
1. Pure and deterministic: equal amounts always give equal strings
2. Lookup tables are immutable tuples
3. Scope is 0 <= amount < 1_000_000_000; outside it AmountOutOfRangeError
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Final

# =============================================================================
# LOOKUP TABLES
# =============================================================================

UNITS: Final[tuple[str, ...]] = (
    "", "um", "dois", "três", "quatro", "cinco", "seis", "sete", "oito", "nove",
)

TEENS: Final[tuple[str, ...]] = (
    "dez", "onze", "doze", "treze", "quatorze",
    "quinze", "dezesseis", "dezessete", "dezoito", "dezenove",
)

TENS: Final[tuple[str, ...]] = (
    "", "", "vinte", "trinta", "quarenta",
    "cinquenta", "sessenta", "setenta", "oitenta", "noventa",
)

HUNDREDS: Final[tuple[str, ...]] = (
    "", "cento", "duzentos", "trezentos", "quatrocentos",
    "quinhentos", "seiscentos", "setecentos", "oitocentos", "novecentos",
)

ZERO_AMOUNT_TEXT: Final[str] = "zero reais"

CONNECTOR: Final[str] = "e"

CENT: Final[Decimal] = Decimal("0.01")

# Largest verbalizable amount (exclusive): one billion reais
MAX_AMOUNT_EXCLUSIVE: Final[Decimal] = Decimal("1000000000")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class AmountOutOfRangeError(ValueError):
    """
    Amount cannot be verbalized.

    Raised for negative values, values of one billion or more, NaN/Infinity
    and text that is not a number. Travel invoices stay far below the cap.
    """

    pass


# =============================================================================
# 0..999
# =============================================================================


def compile_hundreds(n: int) -> str:
    """
    Words for 0..999. Zero compiles to an empty string.

    Examples:
        >>> compile_hundreds(100)
        'cem'
        >>> compile_hundreds(115)
        'cento e quinze'
        >>> compile_hundreds(42)
        'quarenta e dois'
    """
    if not 0 <= n <= 999:
        raise AmountOutOfRangeError(f"Group value must be 0..999, got {n}")

    if n < 10:
        return UNITS[n]
    if n < 20:
        return TEENS[n - 10]
    if n < 100:
        unit = n % 10
        return TENS[n // 10] + (f" {CONNECTOR} {UNITS[unit]}" if unit else "")

    if n == 100:
        return "cem"
    rest = n % 100
    return HUNDREDS[n // 100] + (f" {CONNECTOR} {compile_hundreds(rest)}" if rest else "")


# =============================================================================
# INTEGER CARDINAL
# =============================================================================


def _millions_phrase(count: int) -> str:
    if count == 1:
        return f"{compile_hundreds(count)} milhão"
    return f"{compile_hundreds(count)} milhões"


def _thousands_phrase(count: int) -> str:
    if count == 1:
        return "mil"
    return f"{compile_hundreds(count)} mil"


def verbalize_integer(value: int) -> str:
    """
    Cardinal words for 0 < value < 1_000_000_000 (no currency).

    Zero compiles to an empty string; callers decide how to phrase it.

    Examples:
        >>> verbalize_integer(2000)
        'dois mil'
        >>> verbalize_integer(1550)
        'mil e quinhentos e cinquenta'
        >>> verbalize_integer(1_001_000)
        'um milhão e mil'
    """
    if value < 0 or value >= MAX_AMOUNT_EXCLUSIVE:
        raise AmountOutOfRangeError(f"Integer value out of range: {value}")

    millions, rest = divmod(value, 1_000_000)
    thousands, trailing = divmod(rest, 1000)

    parts: list[str] = []

    if millions:
        parts.append(_millions_phrase(millions))

    if thousands:
        if parts and not trailing:
            parts.append(CONNECTOR)
        parts.append(_thousands_phrase(thousands))

    if trailing:
        if parts:
            parts.append(CONNECTOR)
        parts.append(compile_hundreds(trailing))

    return " ".join(parts)


# =============================================================================
# MONEY
# =============================================================================


def to_cents_amount(amount: object) -> Decimal:
    """
    Normalize an amount to a Decimal with exactly 2 fractional digits.

    Floats go through str() so that 0.1 stays 0.10 and not
    0.1000000000000000055...

    Raises:
        AmountOutOfRangeError: For non-numeric, non-finite, negative or
            too-large values
    """
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, bool):
        raise AmountOutOfRangeError(f"Not a monetary amount: {amount!r}")
    elif isinstance(amount, (int, float, str)):
        try:
            value = Decimal(str(amount).strip())
        except InvalidOperation:
            raise AmountOutOfRangeError(f"Not a monetary amount: {amount!r}") from None
    else:
        raise AmountOutOfRangeError(f"Not a monetary amount: {amount!r}")

    if not value.is_finite():
        raise AmountOutOfRangeError(f"Amount must be finite, got {amount!r}")

    value = value.quantize(CENT, rounding=ROUND_HALF_UP)

    if value < 0:
        raise AmountOutOfRangeError(f"Amount cannot be negative: {value}")
    if value >= MAX_AMOUNT_EXCLUSIVE:
        raise AmountOutOfRangeError(
            f"Amount {value} exceeds verbalization scope (< {MAX_AMOUNT_EXCLUSIVE})"
        )

    return value


def verbalize(amount: object) -> str:
    """
    Write a reais amount out in Portuguese.

    Args:
        amount: Decimal, int, float or numeric string; rounded half-up to cents

    Returns:
        Verbalized amount

    Raises:
        AmountOutOfRangeError: Outside 0 <= amount < 1_000_000_000

    Examples:
        >>> verbalize(0)
        'zero reais'
        >>> verbalize(1)
        'um real'
        >>> verbalize(Decimal("1550.30"))
        'mil e quinhentos e cinquenta reais e trinta centavos'
        >>> verbalize(Decimal("0.50"))
        'cinquenta centavos'
    """
    value = to_cents_amount(amount)

    if value == 0:
        return ZERO_AMOUNT_TEXT

    reais = int(value)
    cents = int((value - reais) * 100)

    text = ""
    if reais:
        text = verbalize_integer(reais) + (" real" if reais == 1 else " reais")

    if cents:
        # Cents-only amounts drop the integer segment ("cinquenta centavos"),
        # not "zero reais e cinquenta centavos"
        cents_text = compile_hundreds(cents) + (" centavo" if cents == 1 else " centavos")
        text = f"{text} {CONNECTOR} {cents_text}" if text else cents_text

    return text
