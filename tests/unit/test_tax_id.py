"""
Unit tests for the CPF validator

Covers:
1. Check-digit computation (including the remainder-10 → 0 rule)
2. Rejection of wrong length, repeated digits, None and non-text input
3. Masking for display
4. The generation gate and its user-facing message
"""

import pytest

from travel_docs.core.validation import (
    INVALID_TAX_ID_MESSAGE,
    InvalidTaxIdError,
    clean_tax_id,
    compute_check_digit,
    format_tax_id,
    require_valid_tax_id,
    validate_tax_id,
)


class TestCleanTaxId:
    def test_strips_mask(self) -> None:
        assert clean_tax_id("529.982.247-25") == "52998224725"

    def test_strips_any_non_digit(self) -> None:
        assert clean_tax_id(" 529 982 247 / 25 ") == "52998224725"

    def test_none_is_empty(self) -> None:
        assert clean_tax_id(None) == ""


class TestComputeCheckDigit:
    def test_first_digit(self) -> None:
        assert compute_check_digit("529982247") == 2

    def test_second_digit(self) -> None:
        assert compute_check_digit("5299822472") == 5

    def test_remainder_ten_maps_to_zero(self) -> None:
        """000000006: sum 12, (12*10) % 11 == 10 → 0"""
        assert compute_check_digit("000000006") == 0


class TestValidateTaxId:
    @pytest.mark.parametrize(
        "raw",
        ["52998224725", "529.982.247-25", "11144477735", "00000000191", "00000000604"],
    )
    def test_known_valid(self, raw: str) -> None:
        assert validate_tax_id(raw) is True

    def test_altered_last_digit_is_invalid(self) -> None:
        assert validate_tax_id("52998224726") is False

    def test_altered_first_check_digit_is_invalid(self) -> None:
        assert validate_tax_id("52998224735") is False

    @pytest.mark.parametrize("digit", "0123456789")
    def test_repeated_digits_are_invalid(self, digit: str) -> None:
        assert validate_tax_id(digit * 11) is False

    @pytest.mark.parametrize("raw", ["", "5299822472", "529982247250", "abc"])
    def test_wrong_length_is_invalid(self, raw: str) -> None:
        assert validate_tax_id(raw) is False

    def test_none_is_invalid_without_raising(self) -> None:
        assert validate_tax_id(None) is False

    def test_non_text_input_never_raises(self) -> None:
        assert validate_tax_id([]) is False
        assert validate_tax_id(52998224725) is True


class TestRequireValidTaxId:
    def test_returns_cleaned_digits(self) -> None:
        assert require_valid_tax_id("529.982.247-25") == "52998224725"

    def test_raises_with_user_message(self) -> None:
        with pytest.raises(InvalidTaxIdError) as exc_info:
            require_valid_tax_id("111.111.111-11")
        assert str(exc_info.value) == INVALID_TAX_ID_MESSAGE == "CPF inválido."
        assert exc_info.value.raw == "111.111.111-11"

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            require_valid_tax_id(None)


class TestFormatTaxId:
    def test_mask(self) -> None:
        assert format_tax_id("52998224725") == "529.982.247-25"

    def test_already_masked(self) -> None:
        assert format_tax_id("529.982.247-25") == "529.982.247-25"

    def test_short_value_returns_digits(self) -> None:
        assert format_tax_id("12-3") == "123"

    def test_empty(self) -> None:
        assert format_tax_id(None) == ""
