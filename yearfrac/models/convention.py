"""Day-count convention selector and dispatch."""

from __future__ import annotations

from enum import Enum
from numbers import Integral
from typing import Any, Callable

import numpy as np
import pandas as pd

from yearfrac.calculations import day_count
from yearfrac.data.validator import validate_date_pairs
from yearfrac.utils.date_utils import DateLike, to_date
from yearfrac.utils.logging import get_logger

LOGGER = get_logger(__name__)


class InvalidConvention(ValueError):
    """Raised when a convention code or name is not recognised."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f'Invalid day-count convention: {value!r}. Has to be one of '
            f'{", ".join(CANONICAL_NAMES)} (by name) or in the range 0-4 (by code).'
        )


class DayCountConvention(Enum):
    """The five spreadsheet day-count conventions, valued by their integer code."""

    US30360 = 0
    ACT_ACT = 1
    ACT_360 = 2
    ACT_365 = 3
    EU30360 = 4

    @classmethod
    def from_code(cls, code: int) -> DayCountConvention:
        if isinstance(code, bool) or not isinstance(code, Integral):
            raise InvalidConvention(code)
        try:
            return cls(int(code))
        except ValueError as exc:
            raise InvalidConvention(code) from exc

    @classmethod
    def from_name(cls, name: str) -> DayCountConvention:
        """Case-insensitive lookup by canonical name or alias."""
        if not isinstance(name, str):
            raise InvalidConvention(name)
        try:
            return NAME_MAP[name.strip().lower()]
        except KeyError as exc:
            raise InvalidConvention(name) from exc

    @classmethod
    def coerce(cls, value: DayCountConvention | int | str) -> DayCountConvention:
        """Accept a member, an integer code or a name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        return cls.from_code(value)

    @property
    def code(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return CANONICAL_NAMES[self.value]

    def __str__(self) -> str:
        return self.label

    def day_count(self, start_date: DateLike, end_date: DateLike) -> int:
        """Day count numerator for start <= end (30/360 days or actual days)."""
        return _DAY_COUNT_FUNCS[self](start_date, end_date)

    def year_fraction(self, start_date: DateLike, end_date: DateLike) -> float:
        """Unsigned year fraction; the dates may be given in either order."""
        start = to_date(start_date)
        end = to_date(end_date)
        if start == end:
            return 0.0
        if start > end:
            LOGGER.debug('Swapping start/end for %s: %s, %s', self.label, start, end)
            start, end = end, start
        return _YEAR_FRACTION_FUNCS[self](start, end)

    def year_fraction_signed(self, start_date: DateLike, end_date: DateLike) -> float:
        """Year fraction that is negative when start_date is after end_date."""
        start = to_date(start_date)
        end = to_date(end_date)
        magnitude = self.year_fraction(start, end)
        return -magnitude if start > end else magnitude

    def year_fraction_vectorized(
        self,
        start_dates: pd.Series,
        end_dates: pd.Series,
        signed: bool = False,
    ) -> pd.Series:
        """Row-wise year fractions for aligned start/end date series."""
        validate_date_pairs(start_dates, end_dates)
        start = pd.to_datetime(pd.Series(start_dates)).dt.normalize()
        end = pd.to_datetime(pd.Series(end_dates)).dt.normalize().set_axis(start.index)
        if start.empty:
            return pd.Series(dtype=float, index=start.index)

        reversed_mask = start > end
        lo = start.where(~reversed_mask, end)
        hi = end.where(~reversed_mask, start)

        numerator = _VECTORIZED_DAY_COUNT_FUNCS[self](lo, hi).astype(float)
        if self is DayCountConvention.ACT_ACT:
            basis = day_count.actual_actual_basis_vectorized(lo, hi)
        elif self is DayCountConvention.ACT_365:
            basis = day_count.BASIS_365
        else:
            basis = day_count.BASIS_360

        out = numerator / basis
        if signed:
            out = pd.Series(np.where(reversed_mask, -out, out), index=start.index, dtype=float)
        return out


# Indexed by convention code.
CANONICAL_NAMES = ('nasd360', 'act/act', 'act360', 'act365', 'eur360')

NAME_MAP = {
    'nasd360': DayCountConvention.US30360,
    'nasd30/360': DayCountConvention.US30360,
    '30/360': DayCountConvention.US30360,
    'us30360': DayCountConvention.US30360,
    'act/act': DayCountConvention.ACT_ACT,
    'act360': DayCountConvention.ACT_360,
    'act365': DayCountConvention.ACT_365,
    'eur360': DayCountConvention.EU30360,
    'eur30/360': DayCountConvention.EU30360,
}

_DAY_COUNT_FUNCS: dict[DayCountConvention, Callable[[DateLike, DateLike], int]] = {
    DayCountConvention.US30360: day_count.days_30_360,
    DayCountConvention.ACT_ACT: day_count.actual_days,
    DayCountConvention.ACT_360: day_count.actual_days,
    DayCountConvention.ACT_365: day_count.actual_days,
    DayCountConvention.EU30360: day_count.days_30_360_eur,
}

_YEAR_FRACTION_FUNCS: dict[DayCountConvention, Callable[[DateLike, DateLike], float]] = {
    DayCountConvention.US30360: day_count.year_fraction_30_360,
    DayCountConvention.ACT_ACT: day_count.year_fraction_act_act,
    DayCountConvention.ACT_360: day_count.year_fraction_act_360,
    DayCountConvention.ACT_365: day_count.year_fraction_act_365,
    DayCountConvention.EU30360: day_count.year_fraction_30_360_eur,
}

_VECTORIZED_DAY_COUNT_FUNCS: dict[DayCountConvention, Callable[[pd.Series, pd.Series], pd.Series]] = {
    DayCountConvention.US30360: day_count.days_30_360_vectorized,
    DayCountConvention.ACT_ACT: day_count.actual_days_vectorized,
    DayCountConvention.ACT_360: day_count.actual_days_vectorized,
    DayCountConvention.ACT_365: day_count.actual_days_vectorized,
    DayCountConvention.EU30360: day_count.days_30_360_eur_vectorized,
}
