from datetime import date

import pandas as pd
import pytest

from yearfrac.calculations.day_count import (
    actual_actual_basis,
    actual_actual_isda,
    actual_days,
    days_30_360,
    days_30_360_eur,
    days_30_360_vectorized,
    days_30_360_eur_vectorized,
    year_fraction_act_act,
)


def test_same_day_returns_zero() -> None:
    assert days_30_360('2025-01-31', '2025-01-31') == 0


def test_end_of_month_handling() -> None:
    assert days_30_360('2025-01-31', '2025-02-28') == 28


def test_cross_year() -> None:
    assert days_30_360('2024-12-15', '2025-01-15') == 30


def test_february_end_start_counts_as_thirtieth() -> None:
    assert days_30_360('2025-02-28', '2025-03-31') == 31
    assert days_30_360('2024-02-29', '2024-03-30') == 30


def test_february_end_to_february_end() -> None:
    assert days_30_360('2019-02-28', '2020-02-29') == 360
    assert days_30_360('2020-02-29', '2021-02-28') == 360


def test_february_end_date_only_when_start_is_not_month_end() -> None:
    assert days_30_360('2025-01-15', '2025-02-28') == 43


def test_both_thirty_first() -> None:
    assert days_30_360('2021-01-31', '2021-03-31') == 60


def test_end_thirty_first_kept_when_start_before_thirtieth() -> None:
    assert days_30_360('2021-01-29', '2021-03-31') == 62


def test_european_clamps_both_days() -> None:
    assert days_30_360_eur('2025-01-31', '2025-02-28') == 28
    assert days_30_360_eur('2021-01-29', '2021-03-31') == 61
    assert days_30_360_eur('2025-02-28', '2025-03-31') == 32


def test_actual_days() -> None:
    assert actual_days(date(2020, 1, 1), date(2021, 1, 1)) == 366
    assert actual_days('1978-02-28', '2020-05-17') == 15419


def test_act_act_same_year_uses_year_length() -> None:
    assert actual_actual_basis('2020-01-01', '2020-07-01') == 366.0
    assert actual_actual_basis('2021-01-01', '2021-07-01') == 365.0


def test_act_act_short_span_covering_leap_day() -> None:
    assert actual_actual_basis('2019-06-01', '2020-03-01') == 366.0
    assert year_fraction_act_act('2019-06-01', '2020-03-01') == pytest.approx(274 / 366, abs=1e-12)


def test_act_act_short_span_missing_leap_day() -> None:
    assert actual_actual_basis('2019-06-01', '2020-02-28') == 365.0
    assert actual_actual_basis('2020-03-01', '2021-02-01') == 365.0
    assert year_fraction_act_act('2019-06-01', '2020-02-28') == pytest.approx(272 / 365, abs=1e-12)


def test_act_act_exact_year_averages_both_years() -> None:
    assert actual_actual_basis('2019-03-01', '2020-03-01') == 365.5
    assert year_fraction_act_act('2019-03-01', '2020-03-01') == pytest.approx(366 / 365.5, abs=1e-12)


def test_act_act_multi_year_average() -> None:
    assert actual_actual_basis('2019-01-01', '2021-01-01') == pytest.approx(1096 / 3, abs=1e-12)


def test_isda_same_year_matches_direct_ratio() -> None:
    assert actual_actual_isda('2020-01-01', '2020-07-01') == pytest.approx(182 / 366, abs=1e-12)
    assert actual_actual_isda('2021-03-01', '2021-09-01') == pytest.approx(184 / 365, abs=1e-12)


def test_isda_whole_years_are_exact() -> None:
    assert actual_actual_isda('2019-01-01', '2022-01-01') == 3.0
    assert actual_actual_isda('2020-01-01', '2021-01-01') == 1.0


def test_isda_splits_across_leap_boundary() -> None:
    result = actual_actual_isda('2019-06-01', '2020-03-01')
    assert result == pytest.approx(214 / 365 + 60 / 366, abs=1e-12)


def test_isda_long_span() -> None:
    result = actual_actual_isda('1978-02-28', '2020-05-17')
    assert result == pytest.approx(307 / 365 + 41 + 137 / 366, abs=1e-12)


def test_vectorized_matches_scalar_for_mixed_cases() -> None:
    starts = pd.Series(pd.to_datetime(['2025-01-31', '2024-12-15', '2025-02-28', '2019-02-28', '2021-01-29']))
    ends = pd.Series(pd.to_datetime(['2025-02-28', '2025-01-15', '2025-03-31', '2020-02-29', '2021-03-31']))
    vec = days_30_360_vectorized(starts, ends)
    expected = pd.Series([days_30_360(s, e) for s, e in zip(starts, ends)], dtype=int)
    assert vec.reset_index(drop=True).equals(expected.reset_index(drop=True))


def test_vectorized_same_day_returns_zero() -> None:
    starts = pd.Series(pd.to_datetime(['2025-01-31', '2025-02-15']))
    ends = pd.Series(pd.to_datetime(['2025-01-31', '2025-02-15']))
    vec = days_30_360_vectorized(starts, ends)
    assert vec.tolist() == [0, 0]


def test_european_vectorized_matches_scalar() -> None:
    starts = pd.Series(pd.to_datetime(['2025-01-31', '2021-01-29', '2025-02-28']))
    ends = pd.Series(pd.to_datetime(['2025-02-28', '2021-03-31', '2025-03-31']))
    vec = days_30_360_eur_vectorized(starts, ends)
    assert vec.tolist() == [days_30_360_eur(s, e) for s, e in zip(starts, ends)]
