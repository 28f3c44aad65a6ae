from datetime import date

import pytest

from loan_interest.calculations.accrual import (
    accrued_interest_to_date,
    accruals_frame,
    build_accrual_result,
    compute,
    compute_daily_accruals,
    compute_total_interest,
    daily_rate,
)
from loan_interest.models.loan import Loan, LoanParams


def _loan(start: date, end: date, principal: float = 1000.0, base_rate: float = 0.05, margin: float = 0.01) -> Loan:
    return Loan.from_params(
        LoanParams(
            start_date=start,
            end_date=end,
            principal=principal,
            currency='USD',
            base_rate=base_rate,
            margin=margin,
        )
    )


def test_reference_scenario_four_days() -> None:
    loan = compute(_loan(date(2020, 1, 1), date(2020, 1, 5)))

    assert loan.total_interest == pytest.approx(1000 * 0.06 / 365 * 4)
    assert round(loan.total_interest, 4) == 0.6575
    assert list(loan.daily_accruals) == [date(2020, 1, 2), date(2020, 1, 3), date(2020, 1, 4), date(2020, 1, 5)]
    assert [a.days_elapsed for a in loan.daily_accruals.values()] == [1, 2, 3, 4]
    for accrual in loan.daily_accruals.values():
        assert round(accrual.interest_with_margin, 5) == 0.16438
        assert round(accrual.interest_without_margin, 5) == 0.13699


def test_same_day_has_no_accruals() -> None:
    loan = compute(_loan(date(2021, 6, 30), date(2021, 6, 30)))
    assert loan.daily_accruals == {}
    assert loan.total_interest == 0.0


def test_entry_count_matches_calendar_days_across_leap_year() -> None:
    loan = compute(_loan(date(2024, 2, 27), date(2024, 3, 2)))
    assert len(loan.daily_accruals) == 4
    assert date(2024, 2, 29) in loan.daily_accruals
    assert loan.daily_accruals[date(2024, 3, 2)].days_elapsed == 4


def test_total_is_computed_directly() -> None:
    loan = compute(_loan(date(2020, 1, 1), date(2020, 12, 31), principal=123456.78, base_rate=0.0375, margin=0.0125))
    days = 365
    assert loan.total_interest == 123456.78 * ((0.0375 + 0.0125) / 365) * days
    summed = sum(a.interest_with_margin for a in loan.daily_accruals.values())
    assert loan.total_interest == pytest.approx(summed, rel=1e-12)


def test_reversed_range_keeps_negative_total_without_entries() -> None:
    loan = compute(_loan(date(2020, 1, 5), date(2020, 1, 1)))
    assert loan.daily_accruals == {}
    assert loan.total_interest == pytest.approx(-1000 * 0.06 / 365 * 4)


def test_compute_replaces_previous_derived_state() -> None:
    loan = compute(_loan(date(2020, 1, 1), date(2020, 1, 10)))
    loan.end_date = date(2020, 1, 3)
    compute(loan)
    assert list(loan.daily_accruals) == [date(2020, 1, 2), date(2020, 1, 3)]
    assert loan.total_interest == pytest.approx(1000 * 0.06 / 365 * 2)


def test_pure_helpers_agree_with_compute() -> None:
    params = LoanParams(date(2022, 3, 1), date(2022, 3, 4), 500.0, 'EUR', 0.02, 0.005)
    total, accruals = build_accrual_result(params)
    assert total == compute_total_interest(500.0, 0.02, 0.005, 3)
    assert accruals == compute_daily_accruals(date(2022, 3, 1), 3, 500.0, 0.02, 0.005)
    assert daily_rate(0.365) == pytest.approx(0.001)


def test_zero_margin_gives_equal_figures() -> None:
    loan = compute(_loan(date(2020, 1, 1), date(2020, 1, 3), margin=0.0))
    for accrual in loan.daily_accruals.values():
        assert accrual.interest_with_margin == accrual.interest_without_margin


def test_accruals_frame_columns_and_running_totals() -> None:
    loan = compute(_loan(date(2020, 1, 1), date(2020, 1, 5)))
    frame = accruals_frame(loan)
    assert frame['days_elapsed'].tolist() == [1, 2, 3, 4]
    assert frame['date'].iloc[0].date() == date(2020, 1, 2)
    assert round(float(frame['cumulative_with_margin'].iloc[-1]), 10) == round(loan.total_interest, 10)
    margin_daily = 1000 * 0.01 / 365
    assert float(frame['margin_interest'].iloc[0]) == pytest.approx(margin_daily)


def test_accruals_frame_empty_loan() -> None:
    frame = accruals_frame(compute(_loan(date(2020, 1, 1), date(2020, 1, 1))))
    assert frame.empty
    assert 'interest_with_margin' in frame.columns


def test_accrued_interest_to_date_is_inclusive() -> None:
    loan = compute(_loan(date(2020, 1, 1), date(2020, 1, 5)))
    per_day = 1000 * (0.06 / 365)
    assert accrued_interest_to_date(loan, '2020-01-01') == 0.0
    assert accrued_interest_to_date(loan, date(2020, 1, 3)) == pytest.approx(2 * per_day)
    assert accrued_interest_to_date(loan, '2021-01-01') == pytest.approx(4 * per_day)
