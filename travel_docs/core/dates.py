"""
Dates — parsing, age and Brazilian display formats

Records reach the core with dates in either of the two shapes the back-office
stores: ISO (YYYY-MM-DD, optionally followed by a time part) or the pt-BR form
(DD/MM/YYYY). Everything here is pure: "today" is always an argument.
"""

from datetime import date, datetime
from typing import Final, Optional

# =============================================================================
# CONSTANTS
# =============================================================================

MONTH_NAMES: Final[tuple[str, ...]] = (
    "Janeiro",
    "Fevereiro",
    "Março",
    "Abril",
    "Maio",
    "Junho",
    "Julho",
    "Agosto",
    "Setembro",
    "Outubro",
    "Novembro",
    "Dezembro",
)

ISO_DATE_LENGTH: Final[int] = 10


# =============================================================================
# PARSING
# =============================================================================


def parse_date(value: object) -> Optional[date]:
    """
    Parse a date from a record field.

    Accepts date, datetime, "YYYY-MM-DD" (a trailing time part such as
    "T00:00:00" is ignored) and "DD/MM/YYYY".

    Returns:
        The date, or None when the value is absent or unparseable
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        if "/" in text:
            return datetime.strptime(text, "%d/%m/%Y").date()
        return datetime.strptime(text[:ISO_DATE_LENGTH], "%Y-%m-%d").date()
    except ValueError:
        return None


def compute_age(birth_date: object, today: date) -> Optional[int]:
    """
    Age in completed years on `today`.

    age = today.year - birth.year, minus 1 while this year's birthday
    (month, day) has not been reached. On the birthday itself the year counts.

    Returns:
        Age, or None when the birth date is absent or unparseable
    """
    birth = parse_date(birth_date)
    if birth is None:
        return None

    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


# =============================================================================
# DISPLAY
# =============================================================================


def format_date_br(value: object, placeholder: str = "-") -> str:
    """
    DD/MM/YYYY, or `placeholder` when absent.

    Unparseable text is echoed back unchanged so that nothing typed by the
    operator is silently lost from a printed document.
    """
    parsed = parse_date(value)
    if parsed is None:
        if isinstance(value, str) and value.strip():
            return value.strip()
        return placeholder
    return parsed.strftime("%d/%m/%Y")


def format_day_month(value: object) -> str:
    """DD/MM of a birth date, empty when absent."""
    parsed = parse_date(value)
    if parsed is None:
        return ""
    return parsed.strftime("%d/%m")


def format_date_long(value: date) -> str:
    """
    Long pt-BR date used in document closings.

    Example:
        >>> format_date_long(date(2024, 3, 5))
        '5 de março de 2024'
    """
    return f"{value.day} de {MONTH_NAMES[value.month - 1].lower()} de {value.year}"


def month_name(month: int) -> str:
    """Capitalized pt-BR month name for 1..12."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1..12, got {month}")
    return MONTH_NAMES[month - 1]
