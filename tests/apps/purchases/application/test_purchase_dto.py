from decimal import Decimal
from datetime import date
from uuid import uuid4

from apps.purchases.application.dto import (
    ConversionRequestDTO,
    ConvertedPurchaseDTO,
    CreatePurchaseTransactionDTO,
)
from apps.purchases.domain.models import ConversionResult


class TestDataTransferObjects:
    """Tests for DTOs - mainly structure validation."""

    def test_create_purchase_transaction_dto(self):
        dto = CreatePurchaseTransactionDTO(
            description="Laptop",
            transaction_date=date(2025, 9, 30),
            amount=Decimal("1000.00")
        )

        assert dto.description == "Laptop"
        assert dto.transaction_date == date(2025, 9, 30)
        assert dto.amount == Decimal("1000.00")

    def test_conversion_request_dto(self):
        transaction_id = uuid4()
        dto = ConversionRequestDTO(transaction_id=transaction_id, country="Brazil", currency="Real")

        assert dto.transaction_id == transaction_id
        assert dto.country == "Brazil"
        assert dto.currency == "Real"

    def test_converted_purchase_dto_from_result(self):
        """Test that the result DTO exposes the amount as amount_usd."""
        transaction_id = uuid4()
        result = ConversionResult(
            transaction_id=transaction_id,
            description="Laptop",
            transaction_date=date(2025, 9, 30),
            amount=Decimal("1000.00"),
            exchange_rate=Decimal("5.10"),
            converted_amount=Decimal("5100.00"),
            country="Brazil",
            currency="Real",
            record_date=date(2025, 9, 30),
        )

        dto = ConvertedPurchaseDTO.from_result(result)

        assert dto.id == transaction_id
        assert dto.amount_usd == Decimal("1000.00")
        assert dto.exchange_rate == Decimal("5.10")
        assert dto.converted_amount == Decimal("5100.00")
        assert dto.record_date == date(2025, 9, 30)
