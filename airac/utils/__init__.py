"""Date and clock helpers shared by the cycle engine."""

from .clock import get_default_clock, reset_default_clock, set_default_clock, utc_today
from .date import datetime_to_str, to_date, two_digit_year

__all__ = [
    "to_date",
    "datetime_to_str",
    "two_digit_year",
    "utc_today",
    "get_default_clock",
    "set_default_clock",
    "reset_default_clock",
]
