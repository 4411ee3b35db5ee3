# Django discovers app models here; the definitions live in the persistence layer.
from apps.purchases.infrastructure.persistence.models import PurchaseTransactionRecord  # noqa: F401
