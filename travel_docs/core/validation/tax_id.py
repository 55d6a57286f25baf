"""
CPF — Brazilian individual taxpayer identifier

Validation of the two trailing check digits of an 11-digit CPF, plus the
display mask and the precondition gate used before generating documents.

CHECK DIGIT RULE:
    first  = weighted sum of digits 1..9  with weights 10..2
    second = weighted sum of digits 1..10 with weights 11..2
    remainder = (sum * 10) % 11; remainder in {10, 11} → 0

CRITICAL INVARIANTS:
1. validate_tax_id never raises, for any input
2. Cleaned value must have exactly 11 digits
3. Repeated-digit sequences (000.000.000-00, 111.111.111-11, ...) are invalid
   even though their check digits are arithmetically consistent
"""

import logging
import re
from typing import Final

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

TAX_ID_LENGTH: Final[int] = 11

# Digits covered by the first check digit
FIRST_CHECK_SPAN: Final[int] = 9

INVALID_TAX_ID_MESSAGE: Final[str] = "CPF inválido."

_NON_DIGIT: Final = re.compile(r"\D")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidTaxIdError(ValueError):
    """
    CPF rejected at a generation gate.

    The message is the user-facing text shown next to the CPF field.
    """

    def __init__(self, raw: object):
        super().__init__(INVALID_TAX_ID_MESSAGE)
        self.raw = raw


# =============================================================================
# CHECKSUM
# =============================================================================


def clean_tax_id(raw: object) -> str:
    """
    Strip every non-digit character.

    Returns an empty string for None.

    Examples:
        >>> clean_tax_id("529.982.247-25")
        '52998224725'
        >>> clean_tax_id(None)
        ''
    """
    if raw is None:
        return ""
    return _NON_DIGIT.sub("", str(raw))


def compute_check_digit(digits: str) -> int:
    """
    Check digit for a run of digits.

    The weights start at len(digits) + 1 and descend to 2, so the same
    function covers both the first (9 digits) and second (10 digits) check.

    Args:
        digits: Only decimal digits

    Returns:
        Check digit 0..9
    """
    first_weight = len(digits) + 1
    total = sum(int(d) * (first_weight - i) for i, d in enumerate(digits))
    remainder = (total * 10) % 11
    if remainder >= 10:
        return 0
    return remainder


def validate_tax_id(raw: object) -> bool:
    """
    Validate a CPF.

    Args:
        raw: CPF with or without mask ("529.982.247-25" or "52998224725")

    Returns:
        True only if the cleaned value has 11 digits, is not a repeated-digit
        sequence, and both check digits match

    Examples:
        >>> validate_tax_id("529.982.247-25")
        True
        >>> validate_tax_id("529.982.247-26")
        False
        >>> validate_tax_id("111.111.111-11")
        False
    """
    digits = clean_tax_id(raw)

    if len(digits) != TAX_ID_LENGTH:
        return False

    if len(set(digits)) == 1:
        return False

    first = compute_check_digit(digits[:FIRST_CHECK_SPAN])
    if first != int(digits[FIRST_CHECK_SPAN]):
        return False

    second = compute_check_digit(digits[: FIRST_CHECK_SPAN + 1])
    return second == int(digits[FIRST_CHECK_SPAN + 1])


def require_valid_tax_id(raw: object) -> str:
    """
    Precondition gate: return the cleaned CPF or raise.

    Used before documents that name a contracting party.

    Raises:
        InvalidTaxIdError: If validate_tax_id(raw) is False
    """
    if not validate_tax_id(raw):
        logger.info("Rejected CPF at generation gate (cleaned length=%d)", len(clean_tax_id(raw)))
        raise InvalidTaxIdError(raw)
    return clean_tax_id(raw)


# =============================================================================
# DISPLAY
# =============================================================================


def format_tax_id(raw: object) -> str:
    """
    Apply the 000.000.000-00 mask.

    Values that do not clean to 11 digits are returned as their digits only.

    Examples:
        >>> format_tax_id("52998224725")
        '529.982.247-25'
        >>> format_tax_id("123")
        '123'
    """
    digits = clean_tax_id(raw)
    if len(digits) != TAX_ID_LENGTH:
        return digits
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"
