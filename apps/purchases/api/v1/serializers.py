"""
Serializers for the purchases bounded context.
Handles validation and transformation between API and application layers.
"""

from decimal import Decimal

from rest_framework import serializers

from apps.purchases.application.dto import CreatePurchaseTransactionDTO


class CreatePurchaseTransactionSerializer(serializers.Serializer):
    description = serializers.CharField(
        max_length=50,
        error_messages={
            "required": "Description is required.",
            "blank": "Description is required.",
            "max_length": "Description cannot exceed 50 characters.",
        },
    )
    transaction_date = serializers.DateField(
        error_messages={"required": "Transaction date is required."},
    )
    amount = serializers.DecimalField(
        max_digits=18,
        decimal_places=6,
        min_value=Decimal("0.01"),
        error_messages={
            "required": "Amount in USD is required.",
            "min_value": "Amount in USD must be greater than zero.",
        },
    )

    def to_dto(self) -> CreatePurchaseTransactionDTO:
        return CreatePurchaseTransactionDTO(**self.validated_data)


class PurchaseTransactionSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    description = serializers.CharField(read_only=True)
    transaction_date = serializers.DateField(read_only=True)
    amount = serializers.DecimalField(max_digits=18, decimal_places=2, read_only=True)


class ConvertedPurchaseSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    description = serializers.CharField()
    transaction_date = serializers.DateField()
    amount_usd = serializers.DecimalField(max_digits=18, decimal_places=2)
    exchange_rate = serializers.DecimalField(max_digits=18, decimal_places=6)
    converted_amount = serializers.DecimalField(max_digits=24, decimal_places=2)
    country = serializers.CharField()
    currency = serializers.CharField()
    record_date = serializers.DateField()
