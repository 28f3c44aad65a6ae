from datetime import date
import logging
import threading

import pytest

from loan_interest.exceptions import LoanNotFoundError
from loan_interest.models.loan import LoanParams
from loan_interest.models.registry import LoanRegistry


def _params(end: date = date(2020, 1, 5), principal: float = 1000.0) -> LoanParams:
    return LoanParams(
        start_date=date(2020, 1, 1),
        end_date=end,
        principal=principal,
        currency='USD',
        base_rate=0.05,
        margin=0.01,
    )


def test_empty_registry_lists_nothing() -> None:
    registry = LoanRegistry()
    assert registry.list() == []
    assert len(registry) == 0
    assert registry.next_id == 1
    assert registry.summary_frame().empty


def test_create_returns_increasing_ids_and_computes() -> None:
    registry = LoanRegistry()
    ids = [registry.create(_params()) for _ in range(3)]
    assert ids == [1, 2, 3]
    assert registry.next_id == 4
    loan = registry.get(1)
    assert loan is not None
    assert round(loan.total_interest, 4) == 0.6575
    assert len(loan.daily_accruals) == 4


def test_update_unknown_id_raises_and_leaves_registry_unchanged() -> None:
    registry = LoanRegistry()
    registry.create(_params())
    before = registry.list()
    with pytest.raises(LoanNotFoundError, match='Loan with ID 999 not found'):
        registry.update(999, _params(principal=5.0))
    assert registry.list() == before
    assert registry.next_id == 2


def test_not_found_is_a_key_error() -> None:
    registry = LoanRegistry()
    with pytest.raises(KeyError):
        registry.update(1, _params())
    with pytest.raises(LoanNotFoundError) as info:
        registry.require(7)
    assert info.value.loan_id == 7


def test_update_replaces_terms_and_derived_fields() -> None:
    registry = LoanRegistry()
    loan_id = registry.create(_params(end=date(2020, 1, 10)))
    registry.update(loan_id, _params(end=date(2020, 1, 3), principal=2000.0))
    loan = registry.get(loan_id)
    assert loan.principal == 2000.0
    assert list(loan.daily_accruals) == [date(2020, 1, 2), date(2020, 1, 3)]
    assert loan.total_interest == pytest.approx(2000 * 0.06 / 365 * 2)
    assert date(2020, 1, 10) not in loan.daily_accruals


def test_update_does_not_allocate_ids() -> None:
    registry = LoanRegistry()
    first = registry.create(_params())
    registry.update(first, _params(principal=10.0))
    assert registry.create(_params()) == first + 1


def test_get_unknown_returns_none() -> None:
    assert LoanRegistry().get(1) is None


def test_reads_return_copies() -> None:
    registry = LoanRegistry()
    loan_id = registry.create(_params())
    loan = registry.get(loan_id)
    loan.principal = 0.0
    loan.daily_accruals.clear()
    listed = registry.list()[0][1]
    listed.total_interest = -1.0
    stored = registry.get(loan_id)
    assert stored.principal == 1000.0
    assert len(stored.daily_accruals) == 4
    assert round(stored.total_interest, 4) == 0.6575


def test_list_orders_by_id() -> None:
    registry = LoanRegistry()
    for principal in (300.0, 100.0, 200.0):
        registry.create(_params(principal=principal))
    registry.update(1, _params(principal=50.0))
    assert [loan_id for loan_id, _ in registry.list()] == [1, 2, 3]
    assert [loan.principal for _, loan in registry.list()] == [50.0, 100.0, 200.0]
    assert 2 in registry
    assert 4 not in registry


def test_summary_frame_rows() -> None:
    registry = LoanRegistry()
    registry.create(_params())
    registry.create(_params(end=date(2020, 1, 1)))
    summary = registry.summary_frame()
    assert summary['loan_id'].tolist() == [1, 2]
    assert summary['days'].tolist() == [4, 0]
    assert summary['total_rate'].iloc[0] == pytest.approx(0.06)
    assert summary['total_interest'].iloc[1] == 0.0


def test_concurrent_creates_allocate_unique_ids() -> None:
    registry = LoanRegistry()
    results: list[int] = []
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(20):
            loan_id = registry.create(_params())
            with lock:
                results.append(loan_id)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sorted(results) == list(range(1, 81))


def test_update_unknown_id_logs_warning(caplog) -> None:
    registry = LoanRegistry()
    with caplog.at_level(logging.WARNING, logger='loan_interest'):
        with pytest.raises(LoanNotFoundError):
            registry.update(3, _params())
    assert 'loan with ID 3 not found' in caplog.text
