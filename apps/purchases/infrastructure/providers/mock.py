"""
Mock provider for development and testing.
Serves fixed exchange rates without calling the Treasury API.
"""

import logging
from decimal import Decimal
from datetime import date

from apps.purchases.domain.interfaces import BaseExchangeRateProvider
from apps.purchases.domain.models import RateObservation

logger = logging.getLogger(__name__)


class MockProvider(BaseExchangeRateProvider):
    """
    Mock provider that returns a fixed rate dated on the requested day.
    Useful for:
    - Testing without external API calls
    - Development without network access
    """

    # Foreign currency units per 1 USD (approximate real-world values)
    RATES = {
        ("Brazil", "Real"): Decimal("5.434"),
        ("Canada", "Dollar"): Decimal("1.392"),
        ("Euro Zone", "Euro"): Decimal("0.852"),
        ("Japan", "Yen"): Decimal("147.9"),
        ("Mexico", "Peso"): Decimal("18.354"),
        ("United Kingdom", "Pound"): Decimal("0.744"),
    }

    def latest(self, country: str, currency: str, as_of: date) -> RateObservation | None:
        """
        Look up a fixed rate for country/currency.

        Args:
            country: Country name (case-insensitive)
            currency: Currency name (case-insensitive)
            as_of: Purchase date, used as the record date

        Returns:
            RateObservation, or None for an unknown country/currency pair
        """
        for (known_country, known_currency), rate in self.RATES.items():
            if known_country.lower() == country.strip().lower() and known_currency.lower() == currency.strip().lower():
                return RateObservation(
                    country=known_country,
                    currency=known_currency,
                    exchange_rate=rate,
                    record_date=as_of,
                )

        logger.info("MockProvider: unsupported country/currency %s/%s", country, currency)
        return None
