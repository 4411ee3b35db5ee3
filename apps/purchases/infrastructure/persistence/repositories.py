"""
Repository pattern implementation.
Abstracts database access to decouple domain logic from persistence.
"""

from typing import List, Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError

from apps.purchases.domain.interfaces import BaseTransactionRepository
from apps.purchases.domain.models import PurchaseTransaction
from apps.purchases.infrastructure.persistence.models import PurchaseTransactionRecord


class PurchaseTransactionRepository(BaseTransactionRepository):
    """Repository for PurchaseTransaction aggregate."""

    @staticmethod
    def to_domain(record: PurchaseTransactionRecord) -> PurchaseTransaction:
        """Rebuild the immutable entity from a stored row."""
        return PurchaseTransaction(
            id=record.id,
            description=record.description,
            transaction_date=record.transaction_date,
            amount=record.amount_usd,
        )

    def get(self, transaction_id: UUID) -> Optional[PurchaseTransaction]:
        """Get transaction by id."""
        try:
            record = PurchaseTransactionRecord.objects.get(id=transaction_id)
        except (PurchaseTransactionRecord.DoesNotExist, DjangoValidationError):
            return None
        return self.to_domain(record)

    def add(self, transaction: PurchaseTransaction) -> PurchaseTransaction:
        """Persist a new transaction."""
        if transaction is None:
            raise ValueError("transaction is required")

        PurchaseTransactionRecord.objects.create(
            id=transaction.id,
            description=transaction.description,
            transaction_date=transaction.transaction_date,
            amount_usd=transaction.amount,
        )
        return transaction

    def list_recent(self, limit: int = 50) -> List[PurchaseTransaction]:
        """Get the most recent transactions, newest transaction date first."""
        return [
            self.to_domain(record)
            for record in PurchaseTransactionRecord.objects.all()[:limit]
        ]
