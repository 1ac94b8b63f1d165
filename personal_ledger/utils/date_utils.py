"""Date manipulation utilities"""

import calendar
from datetime import date
from typing import List


def add_months(from_date: date, months: int) -> date:
    """Add calendar months, clamping the day to the end of a shorter month"""
    month_index = from_date.month - 1 + months
    year = from_date.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(from_date.day, last_day))


def generate_monthly_dates(start: date, count: int) -> List[date]:
    """
    Generate `count` dates, each one calendar month after the previous.

    Each step is applied to the previous (possibly clamped) date, so
    Jan 31 -> Feb 28 -> Mar 28.
    """
    dates = []
    current = start
    for _ in range(count):
        dates.append(current)
        current = add_months(current, 1)
    return dates
