from abc import ABC, abstractmethod
from datetime import date
from uuid import UUID

from apps.purchases.domain.models import PurchaseTransaction, RateObservation


class BaseExchangeRateProvider(ABC):
    @abstractmethod
    def latest(self, country: str, currency: str, as_of: date) -> RateObservation | None:
        """
        Return the newest observation for country/currency recorded on or
        before as_of and no earlier than six months before it.

        Raises:
            RateSourceError: if the source cannot be queried
        """
        pass


class BaseTransactionRepository(ABC):
    @abstractmethod
    def get(self, transaction_id: UUID) -> PurchaseTransaction | None:
        pass

    @abstractmethod
    def add(self, transaction: PurchaseTransaction) -> PurchaseTransaction:
        pass
