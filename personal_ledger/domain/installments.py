"""Payment schedule generation for credit repayment"""

from dataclasses import dataclass
from datetime import date
from typing import List

from personal_ledger.domain.exceptions import InvalidArgumentError
from personal_ledger.domain.interest import calculate_monthly_payment
from personal_ledger.utils.date_utils import generate_monthly_dates


@dataclass
class Installment:
    """Single payment in a credit schedule"""

    due_date: date
    amount: float


def generate_payment_schedule(
    loan_amount: float,
    interest_rate: float,
    loan_term: int,
    start_date: date,
) -> List[Installment]:
    """
    Generate equal monthly installments for a credit.

    Requirements:
    - Exactly `loan_term` installments
    - First due date is `start_date`, each next one a calendar month later
      (day clamped to the month's last day when it does not exist)
    - Every installment carries the same amount, no remainder redistribution

    Example:
        50000 at 15% over 12 months, starting 2024-01-31
        → 12 × 4791.67 due 2024-01-31, 2024-02-29, 2024-03-29, ...
    """
    if loan_term <= 0:
        raise InvalidArgumentError("loan_term", loan_term, "must be positive")

    monthly_payment = calculate_monthly_payment(loan_amount, interest_rate, loan_term)

    return [
        Installment(due_date=due_date, amount=monthly_payment)
        for due_date in generate_monthly_dates(start_date, loan_term)
    ]
