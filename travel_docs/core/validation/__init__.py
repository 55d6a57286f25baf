"""
Identifier validation.
"""

from travel_docs.core.validation.tax_id import (
    INVALID_TAX_ID_MESSAGE,
    TAX_ID_LENGTH,
    InvalidTaxIdError,
    clean_tax_id,
    compute_check_digit,
    format_tax_id,
    require_valid_tax_id,
    validate_tax_id,
)

__all__ = [
    "INVALID_TAX_ID_MESSAGE",
    "TAX_ID_LENGTH",
    "InvalidTaxIdError",
    "clean_tax_id",
    "compute_check_digit",
    "format_tax_id",
    "require_valid_tax_id",
    "validate_tax_id",
]
