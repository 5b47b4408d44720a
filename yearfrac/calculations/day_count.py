"""Day-count utilities.

Each convention is split into a day count (numerator) and a basis
(denominator). Scalar functions expect start <= end; order normalisation and
sign handling live in ``yearfrac.models.convention``.
"""

from __future__ import annotations

from datetime import date

import numpy as np
import pandas as pd

from yearfrac.utils.date_utils import (
    DateLike,
    days_in_year,
    is_end_of_month,
    is_leap_year,
    is_leap_year_vectorized,
    to_date,
    year_start_vectorized,
)

BASIS_360 = 360.0
BASIS_365 = 365.0


def _days_360(
    start_day: int,
    start_month: int,
    start_year: int,
    end_day: int,
    end_month: int,
    end_year: int,
) -> int:
    return 360 * (end_year - start_year) + 30 * (end_month - start_month) + (end_day - start_day)


def _is_february_end(value: date) -> bool:
    return value.month == 2 and is_end_of_month(value.day, value.month, value.year)


def days_30_360(start_date: DateLike, end_date: DateLike) -> int:
    """Compute day count using the US/NASD 30/360 convention."""
    start = to_date(start_date)
    end = to_date(end_date)

    d1 = start.day
    d2 = end.day
    start_feb_end = _is_february_end(start)

    if start_feb_end and _is_february_end(end):
        d2 = 30
    if d2 == 31 and d1 >= 30:
        d2 = 30
    if d1 == 31:
        d1 = 30
    if start_feb_end:
        d1 = 30

    return _days_360(d1, start.month, start.year, d2, end.month, end.year)


def days_30_360_eur(start_date: DateLike, end_date: DateLike) -> int:
    """Compute day count using the European 30/360 convention."""
    start = to_date(start_date)
    end = to_date(end_date)
    return _days_360(
        min(start.day, 30),
        start.month,
        start.year,
        min(end.day, 30),
        end.month,
        end.year,
    )


def actual_days(start_date: DateLike, end_date: DateLike) -> int:
    """Calendar days from start to end."""
    return (to_date(end_date) - to_date(start_date)).days


def actual_actual_basis(start_date: DateLike, end_date: DateLike) -> float:
    """Year length used by the spreadsheet Actual/Actual convention.

    Same-year spans use that year's length. Spans shorter than a year that
    cross one year boundary use 366 only when a February 29 falls inside.
    Anything longer averages the lengths of every calendar year touched.
    """
    start = to_date(start_date)
    end = to_date(end_date)

    if start.year == end.year:
        return float(days_in_year(start.year))

    shorter_than_year = end.year - 1 == start.year and (
        start.month > end.month or (start.month == end.month and start.day > end.day)
    )
    if shorter_than_year:
        if is_leap_year(start.year):
            covers_leap_day = start.month < 2 or (start.month == 2 and start.day <= 29)
            return 366.0 if covers_leap_day else 365.0
        if is_leap_year(end.year):
            covers_leap_day = end.month > 2 or (end.month == 2 and end.day == 29)
            return 366.0 if covers_leap_day else 365.0
        return 365.0

    total_days = sum(days_in_year(year) for year in range(start.year, end.year + 1))
    return total_days / (end.year - start.year + 1)


def year_fraction_30_360(start_date: DateLike, end_date: DateLike) -> float:
    return days_30_360(start_date, end_date) / BASIS_360


def year_fraction_30_360_eur(start_date: DateLike, end_date: DateLike) -> float:
    return days_30_360_eur(start_date, end_date) / BASIS_360


def year_fraction_act_360(start_date: DateLike, end_date: DateLike) -> float:
    return actual_days(start_date, end_date) / BASIS_360


def year_fraction_act_365(start_date: DateLike, end_date: DateLike) -> float:
    return actual_days(start_date, end_date) / BASIS_365


def year_fraction_act_act(start_date: DateLike, end_date: DateLike) -> float:
    return actual_days(start_date, end_date) / actual_actual_basis(start_date, end_date)


def actual_actual_isda(start_date: DateLike, end_date: DateLike) -> float:
    """Actual/Actual (ISDA): apportion the span across calendar years.

    The start year contributes the days up to January 1 of the next year over
    its own length, every year strictly in between contributes 1.0, and the
    end year contributes the days since its January 1 over its own length.
    """
    start = to_date(start_date)
    end = to_date(end_date)

    if start.year == end.year:
        return (end - start).days / days_in_year(start.year)

    head = (date(start.year + 1, 1, 1) - start).days / days_in_year(start.year)
    whole_years = end.year - start.year - 1
    tail = (end - date(end.year, 1, 1)).days / days_in_year(end.year)
    return head + whole_years + tail


def _aligned(start_dates: pd.Series, end_dates: pd.Series) -> tuple[pd.Series, pd.Series]:
    start = pd.to_datetime(pd.Series(start_dates)).dt.normalize()
    end = pd.to_datetime(pd.Series(end_dates)).dt.normalize()
    return start, end.set_axis(start.index)


def days_30_360_vectorized(start_dates: pd.Series, end_dates: pd.Series) -> pd.Series:
    """Vectorized US/NASD 30/360 day count for aligned start/end date series."""
    start, end = _aligned(start_dates, end_dates)

    d1 = start.dt.day.astype(int)
    d2 = end.dt.day.astype(int)
    start_feb_end = (start.dt.month == 2) & start.dt.is_month_end
    end_feb_end = (end.dt.month == 2) & end.dt.is_month_end

    d2 = d2.where(~(start_feb_end & end_feb_end), 30)
    d2 = d2.where(~((d2 == 31) & (d1 >= 30)), 30)
    d1 = d1.where(d1 != 31, 30)
    d1 = d1.where(~start_feb_end, 30)

    return (
        360 * (end.dt.year - start.dt.year)
        + 30 * (end.dt.month - start.dt.month)
        + (d2 - d1)
    ).astype(int)


def days_30_360_eur_vectorized(start_dates: pd.Series, end_dates: pd.Series) -> pd.Series:
    """Vectorized European 30/360 day count for aligned start/end date series."""
    start, end = _aligned(start_dates, end_dates)

    d1 = start.dt.day.astype(int).clip(upper=30)
    d2 = end.dt.day.astype(int).clip(upper=30)

    return (
        360 * (end.dt.year - start.dt.year)
        + 30 * (end.dt.month - start.dt.month)
        + (d2 - d1)
    ).astype(int)


def actual_days_vectorized(start_dates: pd.Series, end_dates: pd.Series) -> pd.Series:
    start, end = _aligned(start_dates, end_dates)
    return (end - start).dt.days.astype(int)


def actual_actual_basis_vectorized(start_dates: pd.Series, end_dates: pd.Series) -> pd.Series:
    """Vectorized counterpart of ``actual_actual_basis``."""
    start, end = _aligned(start_dates, end_dates)

    y1, m1, d1 = start.dt.year, start.dt.month, start.dt.day
    y2, m2, d2 = end.dt.year, end.dt.month, end.dt.day
    start_leap = is_leap_year_vectorized(y1)
    end_leap = is_leap_year_vectorized(y2)

    same_year = y1 == y2
    shorter_than_year = (y2 - 1 == y1) & ((m1 > m2) | ((m1 == m2) & (d1 > d2)))
    covers_leap_day = (start_leap & ((m1 < 2) | ((m1 == 2) & (d1 <= 29)))) | (
        end_leap & ((m2 > 2) | ((m2 == 2) & (d2 == 29)))
    )

    total_days = (year_start_vectorized(y2 + 1) - year_start_vectorized(y1)).dt.days
    average = total_days / (y2 - y1 + 1)

    basis = np.where(
        same_year,
        np.where(start_leap, 366.0, 365.0),
        np.where(shorter_than_year, np.where(covers_leap_day, 366.0, 365.0), average),
    )
    return pd.Series(basis, index=start.index, dtype=float)
