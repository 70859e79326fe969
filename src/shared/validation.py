"""
Declarative request validation.

Each entity declares an explicit ``Schema``: an ordered list of
``Rule(field, check, message)``. Every rule is evaluated (no short-circuit),
so the caller receives the complete, ordered list of failures.

Usage:
    GROUP_SCHEMA = Schema([
        Rule("name", not_blank, "Group name is required"),
        Rule("monthly_fee", is_number_at_least(0), "Monthly fee must be a positive number"),
    ])
    GROUP_SCHEMA.enforce(payload)   # raises ValidationError
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from email_validator import EmailNotValidError, validate_email

from src.shared.exceptions import ValidationError

Check = Callable[[Any], bool]

MONTH_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")
YEAR_PATTERN = re.compile(r"^\d{4}$")
ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}")

# Integer PK/FK columns are signed 32-bit
MAX_ID = 2**31 - 1
# Numeric(10, 2)
MAX_AMOUNT = Decimal("99999999.99")


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class Rule:
    field: str
    check: Check
    message: str

    def evaluate(self, payload: Mapping[str, Any]) -> Optional[FieldError]:
        try:
            ok = self.check(payload.get(self.field))
        except (TypeError, ValueError):
            ok = False
        return None if ok else FieldError(self.field, self.message)


class Schema:
    def __init__(self, rules: Sequence[Rule]) -> None:
        self.rules = list(rules)

    def validate(self, payload: Optional[Mapping[str, Any]]) -> List[FieldError]:
        data = payload if isinstance(payload, Mapping) else {}
        return [err for err in (rule.evaluate(data) for rule in self.rules) if err is not None]

    def enforce(self, payload: Optional[Mapping[str, Any]]) -> None:
        errors = self.validate(payload)
        if errors:
            raise ValidationError([e.to_dict() for e in errors])


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def not_blank(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def not_empty(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def min_length(n: int, *, strip: bool = False) -> Check:
    def _check(value: Any) -> bool:
        if not isinstance(value, str):
            return False
        return len(value.strip() if strip else value) >= n
    return _check


def max_length(n: int, *, strip: bool = False) -> Check:
    """Measures the stored text form; presence and type are other rules' job."""
    def _check(value: Any) -> bool:
        if value is None:
            return True
        text = value if isinstance(value, str) else str(value)
        return len(text.strip() if strip else text) <= n
    return _check


def is_int(value: Any) -> bool:
    """Integer (or integer string) that fits a signed 32-bit id column."""
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        if re.fullmatch(r"[+-]?\d+", value.strip()) is None:
            return False
        value = int(value.strip())
    if not isinstance(value, int):
        return False
    return -MAX_ID - 1 <= value <= MAX_ID


def to_decimal(value: Any) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise ValueError("not a number")
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ValueError("not a number") from e
    if not result.is_finite():
        raise ValueError("not a finite number")
    return result


def is_number_at_least(minimum: float) -> Check:
    def _check(value: Any) -> bool:
        return to_decimal(value) >= Decimal(str(minimum))
    return _check


def is_number_at_most(maximum: Any) -> Check:
    """Upper bound only; a value that is not a number passes here."""
    def _check(value: Any) -> bool:
        try:
            number = to_decimal(value)
        except ValueError:
            return True
        return number <= Decimal(str(maximum))
    return _check


def parse_iso_date(value: Any) -> date:
    """Accept ``YYYY-MM-DD`` or a full ISO-8601 timestamp; return the calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("not an ISO date")
    text = value.strip()
    # Calendar dates only; fromisoformat also takes week dates on 3.11+
    if ISO_DATE_PATTERN.match(text) is None:
        raise ValueError("not an ISO date")
    if len(text) == 10:
        return date.fromisoformat(text)
    return datetime.fromisoformat(text.replace("Z", "+00:00")).date()


def is_iso_date(value: Any) -> bool:
    parse_iso_date(value)
    return True


def matches(pattern: "re.Pattern[str]") -> Check:
    def _check(value: Any) -> bool:
        return isinstance(value, str) and pattern.match(value) is not None
    return _check


def one_of(*choices: str) -> Check:
    def _check(value: Any) -> bool:
        return value in choices
    return _check


def is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def optional(check: Check) -> Check:
    """Pass when the field is absent/null/empty, otherwise delegate."""
    def _check(value: Any) -> bool:
        if value is None or value == "":
            return True
        return check(value)
    return _check


def blank_to_none(value: Any) -> Optional[str]:
    """Optional text fields: empty strings are stored as NULL."""
    if value is None:
        return None
    text = str(value)
    return text if text != "" else None


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------

MONTH_QUERY_SCHEMA = Schema([
    Rule("month", optional(matches(MONTH_PATTERN)), "Month must be in YYYY-MM format"),
])

YEAR_QUERY_SCHEMA = Schema([
    Rule("year", optional(matches(YEAR_PATTERN)), "Year must be a four-digit number"),
])


def month_query(month: Optional[str]) -> Optional[str]:
    MONTH_QUERY_SCHEMA.enforce({"month": month})
    return month or None


def year_query(year: Optional[str]) -> Optional[int]:
    YEAR_QUERY_SCHEMA.enforce({"year": year})
    return int(year) if year else None
