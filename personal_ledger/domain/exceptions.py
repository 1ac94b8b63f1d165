"""Domain-specific exceptions"""

from typing import Any


class LedgerError(Exception):
    """Base exception for the ledger domain"""

    pass


class InvalidArgumentError(LedgerError, ValueError):
    """
    Input violates a precondition: zero term, negative rate, non-positive
    loan, negative period or a negative transfer/repayment amount.
    """

    def __init__(self, argument: str, value: Any, requirement: str) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"{argument} {requirement}, got {value!r}")
