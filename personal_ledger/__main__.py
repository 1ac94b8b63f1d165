"""Replay a sample customer's activity with structured logging: `python -m personal_ledger`"""

import logging
from datetime import date

from personal_ledger.config import settings
from personal_ledger.domain.factories import create_bank, create_person
from personal_ledger.domain.models import Credit, CurrentAccount, DepositAccount
from personal_ledger.infrastructure.observability.logging import setup_logging

logger = logging.getLogger("personal_ledger.demo")


def main(start_date: date | None = None) -> None:
    setup_logging(settings.log_level)

    sber = create_bank("Sberbank", "Sber", 1.5)
    tinkoff = create_bank("Tinkoff Bank", "Tinkoff", 2.0)
    person = create_person("Ivanov Ivan Ivanovich", "123456789012", "1234 567890", "12 34 567890")

    person.accounts.extend(
        [CurrentAccount(sber, 1000.0), CurrentAccount(sber, 500.0), CurrentAccount(tinkoff, 2000.0)]
    )
    person.accounts[0].transfer(person.accounts[1], 200.0)

    deposit = DepositAccount(sber, 10000.0, 18.0, 12, True, True)
    person.deposits.append(deposit)
    logger.info("Projected deposit income", extra={"step": "deposit_income", "amount": deposit.project_income()})

    credit = Credit(tinkoff, 50000.0, 15.0, 12, start_date or date.today())
    person.credits.append(credit)
    logger.info("Credit overpayment", extra={"step": "overpayment", "amount": credit.overpayment()})
    for installment in credit.payment_schedule():
        logger.info(
            "Scheduled installment",
            extra={"step": "schedule", "due_date": installment.due_date.isoformat(), "amount": installment.amount},
        )

    credit.repay_partial(5000.0)
    credit.repay_partial(20000.0)
    credit.repay_full()


if __name__ == "__main__":
    main()
