# /src/shared/utils/dates.py
"""
Calendar helpers. All "current month" decisions are made in UTC.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Callable, Optional

Today = Callable[[], date]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def utc_today() -> date:
    return utcnow().date()


def month_key(day: date) -> str:
    """2024-03-15 -> '2024-03'"""
    return day.strftime("%Y-%m")


def current_month(today: Optional[Today] = None) -> str:
    return month_key((today or utc_today)())


def months_of_year(year: int) -> list[str]:
    return [f"{year:04d}-{m:02d}" for m in range(1, 13)]
