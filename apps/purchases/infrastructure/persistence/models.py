"""
Django ORM models for persistence.
Infrastructure layer, technical storage detail.
"""

import uuid
from django.db import models


class BaseModel(models.Model):

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class PurchaseTransactionRecord(BaseModel):

    description = models.CharField(max_length=50)
    transaction_date = models.DateField(db_index=True)
    amount_usd = models.DecimalField(
        decimal_places=2,
        max_digits=18,
    )

    class Meta:
        db_table = "purchases_purchase_transaction"
        ordering = ["-transaction_date", "-created_at"]

    def __str__(self):
        return f"{self.description} | {self.transaction_date} | {self.amount_usd} USD"
