"""DataFrame helpers for year-fraction columns."""

from __future__ import annotations

import pandas as pd

from yearfrac.data.validator import validate_date_pairs
from yearfrac.models.convention import DayCountConvention
from yearfrac.utils.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_COLUMN = 'year_fraction'


def add_year_fraction_column(
    df: pd.DataFrame,
    start_col: str,
    end_col: str,
    convention: DayCountConvention | int | str,
    signed: bool = False,
    column: str = DEFAULT_COLUMN,
) -> pd.DataFrame:
    """Return a copy of df with a year-fraction column between two date columns."""
    missing = [col for col in (start_col, end_col) if col not in df.columns]
    if missing:
        raise ValueError(f'Missing required date columns: {missing}')

    conv = DayCountConvention.coerce(convention)

    for warning in validate_date_pairs(df[start_col], df[end_col]):
        LOGGER.warning(warning)

    out = df.copy()
    out[column] = conv.year_fraction_vectorized(df[start_col], df[end_col], signed=signed)
    return out
