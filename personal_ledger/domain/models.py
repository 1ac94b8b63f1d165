"""Domain models - pure Python dataclasses representing banks, accounts and credits"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from personal_ledger.domain.exceptions import InvalidArgumentError
from personal_ledger.domain.installments import Installment, generate_payment_schedule
from personal_ledger.domain.interest import calculate_deposit_income, calculate_overpayment
from personal_ledger.infrastructure.observability.logging import log_repayment, log_transfer
from personal_ledger.infrastructure.observability.metrics import record_repayment, record_transfer


@dataclass(frozen=True)
class Bank:
    """Bank shared by reference across accounts and credits"""

    name: str
    short_name: str
    interest_rate: float  # % on current-account balances, expected 0.1 - 2.0


class AccountType(str, Enum):
    CURRENT = "CURRENT"
    CREDIT = "CREDIT"
    DEPOSIT = "DEPOSIT"


ACCOUNT_TYPE_LABELS: Dict[AccountType, str] = {
    AccountType.CURRENT: "current",
    AccountType.CREDIT: "credit",
    AccountType.DEPOSIT: "deposit",
}


class FailureReason(str, Enum):
    INSUFFICIENT_FUNDS = "insufficient_funds"
    EXCESSIVE_REPAYMENT = "excessive_repayment"


@dataclass
class TransferResult:
    """Outcome of moving funds between two accounts"""

    success: bool
    message: str
    amount: float
    source_balance: float
    target_balance: float
    reason: Optional[FailureReason] = None


@dataclass
class RepaymentResult:
    """Outcome of a credit repayment"""

    success: bool
    message: str
    amount: float
    paid_amount: float
    remaining_amount: float
    reason: Optional[FailureReason] = None


@dataclass(eq=False)
class BankAccount:
    """
    Common part of every account variant.

    Not instantiated directly: use CurrentAccount, CreditAccount or
    DepositAccount, each of which fixes `account_type`.
    """

    bank: Bank
    balance: float
    account_type: AccountType = field(init=False)

    def transfer(self, target: "BankAccount", amount: float) -> TransferResult:
        """
        Move `amount` from this account to `target`.

        Fails with INSUFFICIENT_FUNDS and leaves both balances untouched when
        this account's balance is below `amount`. A negative amount raises
        InvalidArgumentError; zero amounts and transfers across banks are allowed.
        """
        if amount < 0:
            raise InvalidArgumentError("amount", amount, "must not be negative")

        source_label = ACCOUNT_TYPE_LABELS[self.account_type]
        target_label = ACCOUNT_TYPE_LABELS[target.account_type]

        if self.balance >= amount:
            # Debit and credit are applied together; a self-transfer nets to zero
            if target is not self:
                new_source_balance = self.balance - amount
                new_target_balance = target.balance + amount
                self.balance = new_source_balance
                target.balance = new_target_balance

            result = TransferResult(
                success=True,
                message=(
                    f"Transfer completed: {amount:.2f} to {target_label} account "
                    f"at {target.bank.short_name}"
                ),
                amount=amount,
                source_balance=self.balance,
                target_balance=target.balance,
            )
        else:
            result = TransferResult(
                success=False,
                message=(
                    f"Insufficient funds for transfer: balance {self.balance:.2f}, "
                    f"requested {amount:.2f}"
                ),
                amount=amount,
                source_balance=self.balance,
                target_balance=target.balance,
                reason=FailureReason.INSUFFICIENT_FUNDS,
            )

        log_transfer(
            success=result.success,
            message=result.message,
            amount=amount,
            source_type=source_label,
            target_type=target_label,
            target_bank=target.bank.short_name,
            source_balance=result.source_balance,
            target_balance=result.target_balance,
            reason=result.reason.value if result.reason else None,
        )
        record_transfer(result.success, amount)
        return result


@dataclass(eq=False)
class CurrentAccount(BankAccount):
    account_type: AccountType = field(default=AccountType.CURRENT, init=False)


@dataclass(eq=False)
class CreditAccount(BankAccount):
    """Credit-card style account; unrelated to the Credit loan entity"""

    loan_amount: float
    account_type: AccountType = field(default=AccountType.CREDIT, init=False)


@dataclass(eq=False)
class DepositAccount(BankAccount):
    """Term deposit. Withdrawal and renewal flags are stored only."""

    interest_rate: float  # % per month of the period
    deposit_period: int  # months
    is_withdrawable: bool
    is_renewable: bool
    account_type: AccountType = field(default=AccountType.DEPOSIT, init=False)

    def __post_init__(self) -> None:
        if self.deposit_period < 0:
            raise InvalidArgumentError("deposit_period", self.deposit_period, "must not be negative")

    def project_income(self) -> float:
        """Expected income over the deposit period (flat, not compounded)"""
        return calculate_deposit_income(self.balance, self.interest_rate, self.deposit_period)


@dataclass(eq=False)
class Credit:
    """Loan issued by a bank, repaid partially or in full"""

    bank: Bank
    loan_amount: float
    interest_rate: float
    loan_term: int  # months
    start_date: date
    paid_amount: float = 0.0

    def __post_init__(self) -> None:
        if self.loan_amount <= 0:
            raise InvalidArgumentError("loan_amount", self.loan_amount, "must be positive")
        if self.loan_term <= 0:
            raise InvalidArgumentError("loan_term", self.loan_term, "must be positive")
        if self.interest_rate < 0:
            raise InvalidArgumentError("interest_rate", self.interest_rate, "must not be negative")
        if not 0 <= self.paid_amount <= self.loan_amount:
            raise InvalidArgumentError(
                "paid_amount", self.paid_amount, f"must be between 0 and {self.loan_amount}"
            )

    @property
    def remaining_amount(self) -> float:
        return self.loan_amount - self.paid_amount

    @property
    def is_repaid(self) -> bool:
        return self.paid_amount >= self.loan_amount

    def overpayment(self) -> float:
        return calculate_overpayment(self.loan_amount, self.interest_rate, self.loan_term)

    def payment_schedule(self) -> List[Installment]:
        """Equal monthly installments starting at `start_date`, recomputed on every call"""
        return generate_payment_schedule(
            self.loan_amount, self.interest_rate, self.loan_term, self.start_date
        )

    def repay_partial(self, amount: float) -> RepaymentResult:
        """
        Pay `amount` towards the loan.

        Fails with EXCESSIVE_REPAYMENT, without changing `paid_amount`, when
        the amount exceeds what is still owed. A zero amount succeeds and
        changes nothing; a negative one raises InvalidArgumentError.
        """
        if amount < 0:
            raise InvalidArgumentError("amount", amount, "must not be negative")

        remaining = self.loan_amount - self.paid_amount
        if amount <= remaining:
            # Paying off the remainder settles the loan exactly, whatever the float rounding
            if amount == remaining:
                self.paid_amount = self.loan_amount
            else:
                self.paid_amount = min(self.paid_amount + amount, self.loan_amount)
            result = RepaymentResult(
                success=True,
                message=f"Partial repayment completed: {amount:.2f}",
                amount=amount,
                paid_amount=self.paid_amount,
                remaining_amount=self.remaining_amount,
            )
        else:
            result = RepaymentResult(
                success=False,
                message=(
                    f"Repayment of {amount:.2f} exceeds remaining loan balance "
                    f"{self.remaining_amount:.2f}"
                ),
                amount=amount,
                paid_amount=self.paid_amount,
                remaining_amount=self.remaining_amount,
                reason=FailureReason.EXCESSIVE_REPAYMENT,
            )

        self._report("partial", result)
        return result

    def repay_full(self) -> RepaymentResult:
        """Settle the loan. Always succeeds; repeating it changes nothing."""
        settled = self.loan_amount - self.paid_amount
        self.paid_amount = self.loan_amount
        result = RepaymentResult(
            success=True,
            message="Credit fully repaid",
            amount=settled,
            paid_amount=self.paid_amount,
            remaining_amount=self.remaining_amount,
        )

        self._report("full", result)
        return result

    def _report(self, kind: str, result: RepaymentResult) -> None:
        log_repayment(
            kind=kind,
            success=result.success,
            message=result.message,
            amount=result.amount,
            paid_amount=result.paid_amount,
            remaining_amount=result.remaining_amount,
            bank=self.bank.short_name,
            reason=result.reason.value if result.reason else None,
        )
        record_repayment(kind, result.success)


@dataclass
class Person:
    """Account holder; a plain container, operations run on the accounts themselves"""

    full_name: str
    inn: str  # 12-digit taxpayer number
    passport_number: str
    passport_series: str
    accounts: List[BankAccount] = field(default_factory=list)
    credits: List[Credit] = field(default_factory=list)
    deposits: List[DepositAccount] = field(default_factory=list)
