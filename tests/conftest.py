"""Pytest fixtures for testing"""

import pytest
from datetime import date
from personal_ledger.domain.factories import create_bank, create_person
from personal_ledger.domain.models import Bank, Credit, CurrentAccount, DepositAccount, Person


@pytest.fixture
def sber() -> Bank:
    return create_bank("Sberbank", "Sber", 1.5)


@pytest.fixture
def tinkoff() -> Bank:
    return create_bank("Tinkoff Bank", "Tinkoff", 2.0)


@pytest.fixture
def person() -> Person:
    return create_person("Ivanov Ivan Ivanovich", "123456789012", "1234 567890", "12 34 567890")


@pytest.fixture
def current_account(sber: Bank) -> CurrentAccount:
    return CurrentAccount(sber, 1000.0)


@pytest.fixture
def deposit(sber: Bank) -> DepositAccount:
    """10000 at 18% for 12 months, withdrawable and renewable"""
    return DepositAccount(sber, 10000.0, 18.0, 12, True, True)


@pytest.fixture
def credit(tinkoff: Bank) -> Credit:
    """50000 at 15% over 12 months"""
    return Credit(tinkoff, 50000.0, 15.0, 12, date(2024, 1, 15))
