"""
Pure domain entities (POPOs).
No dependency on Django or the ORM.
"""

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from uuid import uuid4, UUID

from apps.purchases.domain.errors import ValidationError
from apps.purchases.domain.money import round_half_even, to_decimal

DESCRIPTION_MAX_LENGTH = 50
RATE_WINDOW_MONTHS = 6


@dataclass(frozen=True)
class PurchaseTransaction:
    """
    A purchase recorded in the base currency (USD).

    The description is stored trimmed and the amount is stored rounded
    to cents with banker's rounding. Instances never change after
    construction.
    """

    description: str
    transaction_date: date
    amount: Decimal
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self):
        if self.description is None or not str(self.description).strip():
            raise ValidationError("description required")
        description = str(self.description).strip()
        if len(description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError("description too long")

        transaction_date = self.transaction_date
        if isinstance(transaction_date, datetime):
            transaction_date = transaction_date.date()
        if not isinstance(transaction_date, date) or transaction_date == date.min:
            raise ValidationError("date required")

        try:
            amount = to_decimal(self.amount)
            if not amount.is_finite() or amount <= 0:
                raise ValidationError("amount must be positive")
        except InvalidOperation:
            raise ValidationError("amount must be positive")

        try:
            amount = round_half_even(amount, 2)
        except InvalidOperation:
            raise ValidationError("amount too large")

        object.__setattr__(self, "description", description)
        object.__setattr__(self, "transaction_date", transaction_date)
        object.__setattr__(self, "amount", amount)


@dataclass(frozen=True)
class RateObservation:

    country: str
    currency: str
    exchange_rate: Decimal
    record_date: date


@dataclass(frozen=True)
class RateWindow:
    """Closed date range in which a rate observation is valid."""

    start: date
    end: date

    @classmethod
    def ending_on(cls, end: date, months: int = RATE_WINDOW_MONTHS) -> "RateWindow":
        return cls(start=subtract_months(end, months), end=end)

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end

    def __str__(self):
        return f"{self.start.isoformat()} to {self.end.isoformat()}"


@dataclass(frozen=True)
class ConversionResult:

    transaction_id: UUID
    description: str
    transaction_date: date
    amount: Decimal
    exchange_rate: Decimal
    converted_amount: Decimal
    country: str
    currency: str
    record_date: date


def subtract_months(value: date, months: int) -> date:
    """
    Move a date back by whole calendar months.

    The day of month is kept when the target month has it, otherwise it
    is clamped to the last day of that month (2025-08-31 -> 2025-02-28).
    """
    month_index = value.year * 12 + (value.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))
