"""Input validation for vectorized year-fraction calculations."""

from __future__ import annotations

import pandas as pd


def validate_date_pairs(start_dates: pd.Series, end_dates: pd.Series) -> list[str]:
    """Validate aligned start/end date series and return non-fatal warnings."""
    start = pd.Series(start_dates)
    end = pd.Series(end_dates)

    if len(start) != len(end):
        raise ValueError(
            f'Start and end date series must have the same length: {len(start)} != {len(end)}.'
        )

    try:
        start = pd.to_datetime(start)
        end = pd.to_datetime(end)
    except (TypeError, ValueError) as exc:
        raise ValueError(f'Date series could not be converted to datetime: {exc}') from exc

    if start.isna().any() or end.isna().any():
        raise ValueError('Date series contain nulls.')

    warnings: list[str] = []

    reversed_pairs = int((start.to_numpy() > end.to_numpy()).sum())
    if reversed_pairs:
        warnings.append(f'{reversed_pairs} rows have start date after end date.')

    return warnings
