"""Date helpers shared across the day-count calculations."""

from __future__ import annotations

from datetime import date, datetime

import pandas as pd

DateLike = pd.Timestamp | datetime | date | str

_THIRTY_ONE_DAY_MONTHS = (1, 3, 5, 7, 8, 10, 12)
_THIRTY_DAY_MONTHS = (4, 6, 9, 11)


def to_date(value: DateLike) -> date:
    """Convert an input value to a plain calendar date, dropping time of day."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return pd.Timestamp(value).date()


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap-year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def is_end_of_month(day: int, month: int, year: int) -> bool:
    """True when day is the last day of month in year."""
    if month in _THIRTY_ONE_DAY_MONTHS:
        return day == 31
    if month in _THIRTY_DAY_MONTHS:
        return day == 30
    return day == (29 if is_leap_year(year) else 28)


def is_leap_year_vectorized(years: pd.Series) -> pd.Series:
    """Element-wise leap-year rule for an integer year series."""
    y = years.astype(int)
    return (y % 4 == 0) & ((y % 100 != 0) | (y % 400 == 0))


def year_start_vectorized(years: pd.Series) -> pd.Series:
    """January 1 of each year in the series."""
    y = years.astype(int)
    return pd.to_datetime(pd.DataFrame({'year': y, 'month': 1, 'day': 1}))
