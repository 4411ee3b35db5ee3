"""
Provider Registry - Maps ProviderName enum to adapter classes.
The EXCHANGE_RATE_PROVIDER setting picks the adapter used for conversions.
"""

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import models

from apps.purchases.domain.interfaces import BaseExchangeRateProvider
from apps.purchases.infrastructure.providers.mock import MockProvider
from apps.purchases.infrastructure.providers.treasury import TreasuryRatesProvider

logger = logging.getLogger(__name__)


class ProviderName(models.TextChoices):
    """
    Enum with available providers.
    To add a new provider:
    1. Add an entry here
    2. Implement the BaseExchangeRateProvider interface
    3. Register it in PROVIDER_REGISTRY
    """

    TREASURY = "treasury", "U.S. Treasury Fiscal Data"
    MOCK = "mock", "Mock"


# Registry: Maps ProviderName enum to the corresponding adapter class
PROVIDER_REGISTRY: dict[str, type[BaseExchangeRateProvider]] = {
    ProviderName.TREASURY: TreasuryRatesProvider,
    ProviderName.MOCK: MockProvider,
}


def get_provider_instance(provider_name: str) -> BaseExchangeRateProvider | None:
    """
    Get an instance of a provider by its name.

    Args:
        provider_name: The provider name from ProviderName enum

    Returns:
        Instance of the provider adapter, or None if not found
    """
    provider_class = PROVIDER_REGISTRY.get(provider_name)

    if provider_class is None:
        logger.warning("Provider '%s' not found in registry", provider_name)
        return None

    return provider_class()


def get_rate_provider() -> BaseExchangeRateProvider:
    """
    Get the provider configured by settings.EXCHANGE_RATE_PROVIDER.

    Raises:
        ImproperlyConfigured: if the setting names an unknown provider
    """
    provider_name = getattr(settings, "EXCHANGE_RATE_PROVIDER", ProviderName.TREASURY)
    provider = get_provider_instance(provider_name)

    if provider is None:
        raise ImproperlyConfigured(
            f"EXCHANGE_RATE_PROVIDER '{provider_name}' is not one of {list(ProviderName.values)}"
        )

    return provider
