"""
Date utility unit tests
"""
import pytest
from datetime import date, datetime

from airac.utils.date import datetime_to_str, to_date, two_digit_year


class TestToDate:
    """to_date coercion"""

    def test_date_passthrough(self):
        dt = date(2022, 5, 19)
        assert to_date(dt) is dt

    def test_datetime_truncated(self):
        result = to_date(datetime(2022, 5, 19, 13, 45))

        assert result == date(2022, 5, 19)
        assert type(result) is date

    @pytest.mark.parametrize("value", ["2022-05-19", "20220519", " 2022-05-19 "])
    def test_string_formats(self, value):
        assert to_date(value) == date(2022, 5, 19)

    def test_unsupported_string(self):
        with pytest.raises(ValueError):
            to_date("May 19, 2022")

    def test_impossible_date_string(self):
        with pytest.raises(ValueError):
            to_date("2021-02-29")

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            to_date(20220519)


class TestFormatting:
    """String helpers"""

    def test_datetime_to_str(self):
        assert datetime_to_str(date(2022, 5, 9)) == "2022-05-09"

    @pytest.mark.parametrize(
        "value, expected",
        [(date(2022, 1, 1), "22"), (date(2005, 1, 1), "05"), (date(2000, 12, 31), "00")],
    )
    def test_two_digit_year(self, value, expected):
        assert two_digit_year(value) == expected
