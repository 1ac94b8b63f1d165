"""Assembly helpers for banks and account holders"""

import logging

from personal_ledger.config import settings
from personal_ledger.domain.models import Bank, Person

logger = logging.getLogger(__name__)


def create_bank(name: str, short_name: str, interest_rate: float) -> Bank:
    """Build a Bank from the given values; an out-of-range rate is only logged"""
    if not settings.bank_rate_min <= interest_rate <= settings.bank_rate_max:
        logger.warning(
            "Bank rate outside expected range",
            extra={
                "bank": short_name,
                "interest_rate": interest_rate,
                "rate_min": settings.bank_rate_min,
                "rate_max": settings.bank_rate_max,
            },
        )

    return Bank(name=name, short_name=short_name, interest_rate=interest_rate)


def create_person(full_name: str, inn: str, passport_number: str, passport_series: str) -> Person:
    """Build a Person with empty account, credit and deposit lists. Formats are not checked."""
    return Person(
        full_name=full_name,
        inn=inn,
        passport_number=passport_number,
        passport_series=passport_series,
    )
