"""
Unit tests for date parsing, age computation and pt-BR date display
"""

from datetime import date, datetime

import pytest

from travel_docs.core.dates import (
    compute_age,
    format_date_br,
    format_date_long,
    format_day_month,
    month_name,
    parse_date,
)


class TestParseDate:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (date(2024, 1, 15), date(2024, 1, 15)),
            (datetime(2024, 1, 15, 10, 30), date(2024, 1, 15)),
            ("2024-01-15", date(2024, 1, 15)),
            ("2024-01-15T10:00:00", date(2024, 1, 15)),
            ("15/01/2024", date(2024, 1, 15)),
            (" 15/01/2024 ", date(2024, 1, 15)),
        ],
    )
    def test_accepted_forms(self, value: object, expected: date) -> None:
        assert parse_date(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   ", "31/02/2024", "2024-13-01", "ontem", 20240115])
    def test_unparseable_is_none(self, value: object) -> None:
        assert parse_date(value) is None


class TestComputeAge:
    def test_exactly_one_year(self) -> None:
        assert compute_age(date(2023, 3, 15), date(2024, 3, 15)) == 1

    def test_birthday_tomorrow(self) -> None:
        """Naive year difference minus one until the birthday arrives."""
        assert compute_age(date(2000, 3, 16), date(2024, 3, 15)) == 23

    def test_birthday_today(self) -> None:
        assert compute_age(date(2000, 3, 15), date(2024, 3, 15)) == 24

    def test_earlier_month(self) -> None:
        assert compute_age(date(2000, 12, 1), date(2024, 3, 15)) == 23

    def test_leap_day_birth(self) -> None:
        assert compute_age(date(2000, 2, 29), date(2023, 2, 28)) == 22
        assert compute_age(date(2000, 2, 29), date(2023, 3, 1)) == 23

    def test_accepts_text(self) -> None:
        assert compute_age("16/03/2000", date(2024, 3, 15)) == 23

    def test_missing_birth_date(self) -> None:
        assert compute_age(None, date(2024, 3, 15)) is None
        assert compute_age("", date(2024, 3, 15)) is None


class TestFormatting:
    def test_format_date_br(self) -> None:
        assert format_date_br("2024-03-05") == "05/03/2024"
        assert format_date_br(date(2024, 3, 5)) == "05/03/2024"

    def test_format_date_br_placeholder(self) -> None:
        assert format_date_br(None) == "-"
        assert format_date_br("", placeholder="___/___/______") == "___/___/______"

    def test_format_date_br_echoes_unparseable_text(self) -> None:
        assert format_date_br("a combinar") == "a combinar"

    def test_format_day_month(self) -> None:
        assert format_day_month("1990-07-09") == "09/07"
        assert format_day_month(None) == ""

    def test_format_date_long(self) -> None:
        assert format_date_long(date(2024, 3, 5)) == "5 de março de 2024"
        assert format_date_long(date(2024, 12, 25)) == "25 de dezembro de 2024"

    def test_month_name(self) -> None:
        assert month_name(1) == "Janeiro"
        assert month_name(3) == "Março"

    @pytest.mark.parametrize("month", [0, 13])
    def test_month_name_out_of_range(self, month: int) -> None:
        with pytest.raises(ValueError):
            month_name(month)
