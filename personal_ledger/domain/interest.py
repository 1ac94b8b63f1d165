"""Flat-rate interest formulas for deposits and credits"""

from personal_ledger.domain.exceptions import InvalidArgumentError


def calculate_deposit_income(balance: float, interest_rate: float, period_months: int) -> float:
    """
    Projected income on a deposit over its whole period.

    income = balance * (interest_rate / 100) * period_months

    The rate is applied once per month of the period as given; it is not
    annualized and not compounded. A negative rate is accepted as-is.
    """
    if period_months < 0:
        raise InvalidArgumentError("deposit_period", period_months, "must not be negative")

    return balance * (interest_rate / 100) * period_months


def calculate_overpayment(loan_amount: float, interest_rate: float, term_months: int) -> float:
    """
    Total interest paid over the life of a credit.

    total = loan_amount * (1 + interest_rate / 100 * term_months)
    overpayment = total - loan_amount
    """
    if term_months <= 0:
        raise InvalidArgumentError("loan_term", term_months, "must be positive")

    total_payment = loan_amount * (1 + interest_rate / 100 * term_months)
    return total_payment - loan_amount


def calculate_monthly_payment(loan_amount: float, interest_rate: float, term_months: int) -> float:
    """
    Equal installment amount for a payment schedule.

    Principal is split evenly across the term, plus a single-period interest
    charge (loan_amount * interest_rate / 100) also split evenly. Note this
    does not match calculate_overpayment for terms other than one month.
    """
    if term_months <= 0:
        raise InvalidArgumentError("loan_term", term_months, "must be positive")

    return loan_amount / term_months + (loan_amount * interest_rate / 100) / term_months
