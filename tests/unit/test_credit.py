"""Unit tests for credit overpayment, schedule and repayment"""

import random
import pytest
from datetime import date
from personal_ledger.domain.exceptions import InvalidArgumentError
from personal_ledger.domain.models import Credit, FailureReason


def test_overpayment(credit):
    assert credit.overpayment() == pytest.approx(90000.0)


def test_payment_schedule(credit):
    schedule = credit.payment_schedule()

    assert len(schedule) == credit.loan_term
    assert schedule[0].due_date == credit.start_date
    assert schedule[1].due_date == date(2024, 2, 15)
    assert schedule[0].amount == pytest.approx(57500.0 / 12)


def test_payment_schedule_is_recomputed_identically(credit):
    first = credit.payment_schedule()
    second = credit.payment_schedule()

    assert first == second
    assert first is not second


def test_payment_schedule_ignores_repayments(credit):
    before = credit.payment_schedule()
    credit.repay_partial(10000.0)
    assert credit.payment_schedule() == before


def test_repay_partial_accumulates(credit):
    """5000 then 20000 both fit under the 50000 cap"""
    first = credit.repay_partial(5000.0)
    second = credit.repay_partial(20000.0)

    assert first.success is True
    assert second.success is True
    assert credit.paid_amount == 25000.0
    assert credit.remaining_amount == 25000.0
    assert second.paid_amount == 25000.0
    assert second.remaining_amount == 25000.0


def test_repay_partial_exceeding_remaining(credit):
    credit.repay_partial(45000.0)

    result = credit.repay_partial(5000.01)

    assert result.success is False
    assert result.reason is FailureReason.EXCESSIVE_REPAYMENT
    assert credit.paid_amount == 45000.0


def test_repay_partial_exact_remaining(credit):
    credit.repay_partial(20000.0)

    assert credit.repay_partial(30000.0).success is True
    assert credit.paid_amount == credit.loan_amount
    assert credit.is_repaid is True


def test_repay_full(credit):
    credit.repay_partial(5000.0)

    result = credit.repay_full()

    assert result.success is True
    assert result.amount == 45000.0
    assert credit.paid_amount == credit.loan_amount
    assert credit.remaining_amount == 0.0


def test_repay_full_is_idempotent(credit):
    credit.repay_full()
    second = credit.repay_full()

    assert second.success is True
    assert second.amount == 0.0
    assert credit.paid_amount == 50000.0


def test_repay_partial_after_full_repayment(credit):
    credit.repay_full()

    assert credit.repay_partial(0.01).success is False
    assert credit.paid_amount == 50000.0


def test_credit_starts_unpaid(credit):
    assert credit.paid_amount == 0.0
    assert credit.is_repaid is False


@pytest.mark.parametrize(
    "loan_amount, interest_rate, loan_term",
    [
        (0.0, 15.0, 12),  # no principal
        (-100.0, 15.0, 12),
        (50000.0, 15.0, 0),  # zero term
        (50000.0, -1.0, 12),  # negative rate
    ],
)
def test_credit_rejects_invalid_arguments(tinkoff, loan_amount, interest_rate, loan_term):
    with pytest.raises(InvalidArgumentError):
        Credit(tinkoff, loan_amount, interest_rate, loan_term, date(2024, 1, 1))


def test_credit_rejects_paid_amount_above_loan(tinkoff):
    with pytest.raises(InvalidArgumentError):
        Credit(tinkoff, 1000.0, 10.0, 6, date(2024, 1, 1), paid_amount=1000.5)


def test_repay_partial_rejects_negative_amount(credit):
    credit.repay_partial(5000.0)

    with pytest.raises(InvalidArgumentError) as exc_info:
        credit.repay_partial(-1000.0)

    assert exc_info.value.argument == "amount"
    assert credit.paid_amount == 5000.0
    assert 0 <= credit.paid_amount <= credit.loan_amount


def test_repay_partial_zero_amount_changes_nothing(credit):
    result = credit.repay_partial(0.0)

    assert result.success is True
    assert credit.paid_amount == 0.0


def test_repaying_exact_remainder_never_overshoots(tinkoff):
    """Paying off what remains lands exactly on the loan amount despite float rounding"""
    rng = random.Random(20240115)
    for _ in range(500):
        loan_amount = round(rng.uniform(1.0, 100000.0), 2)
        credit = Credit(tinkoff, loan_amount, 10.0, 6, date(2024, 1, 1))

        credit.repay_partial(round(rng.uniform(0.0, loan_amount), 2))
        result = credit.repay_partial(credit.loan_amount - credit.paid_amount)

        assert result.success is True
        assert credit.paid_amount == credit.loan_amount
        assert credit.remaining_amount == 0.0
        assert credit.is_repaid is True
