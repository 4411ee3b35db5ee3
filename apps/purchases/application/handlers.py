"""
Application handlers.
Entry points used by the API and management commands; they wire the
default repository and the configured rate provider into the domain.
"""

import logging
from typing import Optional
from uuid import UUID

from apps.purchases.application.dto import ConversionRequestDTO, CreatePurchaseTransactionDTO
from apps.purchases.domain.interfaces import BaseExchangeRateProvider, BaseTransactionRepository
from apps.purchases.domain.models import PurchaseTransaction
from apps.purchases.domain.outcomes import ConversionOutcome
from apps.purchases.domain.services import ConversionService
from apps.purchases.infrastructure.persistence.repositories import PurchaseTransactionRepository
from apps.purchases.infrastructure.providers.registry import get_rate_provider

logger = logging.getLogger(__name__)


def create_purchase_transaction(
    request: CreatePurchaseTransactionDTO,
    repository: Optional[BaseTransactionRepository] = None
) -> UUID:
    """
    Record a new purchase and return its id.

    Raises:
        ValueError: if request is None
        ValidationError: if the purchase breaks an entity rule
    """
    if request is None:
        raise ValueError("request is required")

    repository = repository or PurchaseTransactionRepository()

    transaction = PurchaseTransaction(
        description=request.description,
        transaction_date=request.transaction_date,
        amount=request.amount,
    )
    repository.add(transaction)

    logger.info("Purchase transaction created: %s", transaction.id)
    return transaction.id


def convert_purchase(
    request: ConversionRequestDTO,
    repository: Optional[BaseTransactionRepository] = None,
    provider: Optional[BaseExchangeRateProvider] = None
) -> ConversionOutcome:
    """Convert a stored purchase with the configured rate provider."""
    service = ConversionService(
        repository=repository or PurchaseTransactionRepository(),
        provider=provider or get_rate_provider(),
    )
    return service.convert(request.transaction_id, request.country, request.currency)
