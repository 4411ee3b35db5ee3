"""
Data Transfer Objects for the application layer.
DTOs decouple internal domain models from external API contracts.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from apps.purchases.domain.models import ConversionResult


@dataclass
class CreatePurchaseTransactionDTO:
    """Request DTO for recording a purchase."""
    description: str
    transaction_date: date
    amount: Decimal


@dataclass
class ConversionRequestDTO:
    """Request DTO for converting a stored purchase."""
    transaction_id: UUID
    country: str
    currency: str


@dataclass
class ConvertedPurchaseDTO:
    """Result DTO for a converted purchase."""
    id: UUID
    description: str
    transaction_date: date
    amount_usd: Decimal
    exchange_rate: Decimal
    converted_amount: Decimal
    country: str
    currency: str
    record_date: date

    @classmethod
    def from_result(cls, result: ConversionResult) -> "ConvertedPurchaseDTO":
        return cls(
            id=result.transaction_id,
            description=result.description,
            transaction_date=result.transaction_date,
            amount_usd=result.amount,
            exchange_rate=result.exchange_rate,
            converted_amount=result.converted_amount,
            country=result.country,
            currency=result.currency,
            record_date=result.record_date,
        )
