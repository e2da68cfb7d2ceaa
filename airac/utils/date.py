from typing import Union
from datetime import datetime, date

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"
SHORT_YEAR_FMT = "%y"

DateLike = Union[str, date, datetime]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, date or datetime to a plain calendar date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    # datetime subclasses date, so it has to be checked first
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like.strip(), fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def datetime_to_str(datetime_date: DateLike) -> str:
    """
    Format a date-like into 'YYYY-MM-DD' string.
    """
    return to_date(datetime_date).strftime(DATE_FMT)


def two_digit_year(date_like: DateLike) -> str:
    """Two-digit year of a date-like, zero padded (2005 -> '05')."""
    return to_date(date_like).strftime(SHORT_YEAR_FMT)
