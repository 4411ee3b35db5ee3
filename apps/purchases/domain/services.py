"""
Domain services - Core business logic.
Resolves the historical exchange rate valid for a purchase and converts its amount.
"""

import logging
from datetime import date, datetime
from decimal import InvalidOperation
from uuid import UUID

from apps.purchases.domain.interfaces import BaseExchangeRateProvider, BaseTransactionRepository
from apps.purchases.domain.models import ConversionResult, RateWindow
from apps.purchases.domain.money import round_half_even, to_decimal
from apps.purchases.domain.outcomes import (
    ConversionOutcome,
    Converted,
    InvalidArgument,
    NotFound,
    RateUnavailable,
)

logger = logging.getLogger(__name__)


class ConversionService:
    """
    Domain service that converts a stored purchase into a foreign currency.

    Resolution rules:
    1. Reject blank country/currency before touching any collaborator
    2. Load the transaction; a missing one is a NotFound outcome
    3. Ask the provider for the newest rate in the six month window
       ending on the transaction date
    4. Re-check the returned record date against that window
    5. Round amount * rate to cents, half to even

    The service holds no state between calls.
    """

    def __init__(
        self,
        repository: BaseTransactionRepository,
        provider: BaseExchangeRateProvider
    ):
        self.repository = repository
        self.provider = provider

    def convert(self, transaction_id: UUID, country: str, currency: str) -> ConversionOutcome:
        """
        Convert a purchase using the rate published for country/currency.

        Args:
            transaction_id: Id of the stored purchase
            country: Country name as published by the rate source (e.g. "Brazil")
            currency: Currency name as published by the rate source (e.g. "Real")

        Returns:
            Converted, NotFound, InvalidArgument or RateUnavailable

        Example:
            >>> outcome = service.convert(purchase.id, "Brazil", "Real")
            >>> if isinstance(outcome, Converted):
            ...     print(outcome.result.converted_amount)
        """
        if not isinstance(country, str) or not country.strip():
            return InvalidArgument("country is required")
        if not isinstance(currency, str) or not currency.strip():
            return InvalidArgument("currency is required")

        transaction = self.repository.get(transaction_id)
        if transaction is None:
            return NotFound(transaction_id)

        window = RateWindow.ending_on(transaction.transaction_date)

        try:
            observation = self.provider.latest(country, currency, transaction.transaction_date)
        except Exception as e:
            logger.warning(
                "Rate lookup failed for %s/%s (%s): %s",
                country, currency, window, e
            )
            return RateUnavailable(
                f"Error querying the exchange rate service for {country}/{currency}: {e}"
            )

        if observation is None:
            logger.warning("No rate for %s/%s between %s", country, currency, window)
            return RateUnavailable(
                f"Could not find a valid exchange rate for {country}/{currency} "
                f"within the 6 months before the transaction date "
                f"({window.end.isoformat()}), window {window}."
            )

        record_date = observation.record_date
        if isinstance(record_date, datetime):
            record_date = record_date.date()
        if not isinstance(record_date, date):
            logger.warning(
                "Rate source returned invalid record_date %r for %s/%s",
                record_date, country, currency
            )
            return RateUnavailable(
                f"The exchange rate service returned an invalid record_date for "
                f"{country}/{currency}: {record_date!r}"
            )

        if not window.contains(record_date):
            logger.warning(
                "Rate source returned record_date %s outside %s for %s/%s",
                record_date, window, country, currency
            )
            return RateUnavailable(
                f"The exchange rate found (record_date: {record_date.isoformat()}) "
                f"is outside the valid period (between {window.start.isoformat()} "
                f"and {window.end.isoformat()})."
            )

        invalid_rate = RateUnavailable(
            f"The exchange rate service returned an invalid rate for {country}/{currency}: "
            f"{observation.exchange_rate!r}"
        )
        try:
            exchange_rate = to_decimal(observation.exchange_rate)
        except InvalidOperation:
            return invalid_rate
        # Rates are foreign units per USD, always positive
        if not exchange_rate.is_finite() or exchange_rate <= 0:
            logger.warning(
                "Rate source returned non-positive rate %s for %s/%s",
                exchange_rate, country, currency
            )
            return invalid_rate

        try:
            converted_amount = round_half_even(transaction.amount * exchange_rate, 2)
        except InvalidOperation:
            return invalid_rate

        return Converted(ConversionResult(
            transaction_id=transaction.id,
            description=transaction.description,
            transaction_date=transaction.transaction_date,
            amount=transaction.amount,
            exchange_rate=exchange_rate,
            converted_amount=converted_amount,
            country=observation.country,
            currency=observation.currency,
            record_date=record_date,
        ))
