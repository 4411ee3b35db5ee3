"""
ViewSets for the purchases API v1.
Records purchases and converts them using historical Treasury exchange rates.
"""

import logging
from uuid import UUID

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes

from apps.purchases.api.v1.serializers import (
    ConvertedPurchaseSerializer,
    CreatePurchaseTransactionSerializer,
    PurchaseTransactionSerializer,
)
from apps.purchases.application.dto import ConversionRequestDTO, ConvertedPurchaseDTO
from apps.purchases.application.handlers import convert_purchase, create_purchase_transaction
from apps.purchases.domain.errors import ValidationError
from apps.purchases.domain.outcomes import Converted, InvalidArgument, NotFound, RateUnavailable
from apps.purchases.infrastructure.persistence.repositories import PurchaseTransactionRepository

logger = logging.getLogger(__name__)

UUID_REGEX = r"[0-9a-fA-F]{8}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{12}"


@extend_schema(tags=['Transactions'])
class PurchaseTransactionViewSet(viewsets.ViewSet):

    lookup_value_regex = UUID_REGEX

    @extend_schema(responses=PurchaseTransactionSerializer(many=True))
    def list(self, request):
        """List the most recent purchases."""
        transactions = PurchaseTransactionRepository().list_recent()
        serializer = PurchaseTransactionSerializer(transactions, many=True)
        return Response(serializer.data)

    @extend_schema(
        request=CreatePurchaseTransactionSerializer,
        responses={
            201: OpenApiResponse(description="Transaction created, body is {\"id\": ...}"),
            400: OpenApiResponse(description="Invalid data"),
            422: OpenApiResponse(description="Domain validation error"),
        },
        description="Record a purchase transaction in USD"
    )
    def create(self, request):
        """
        Record a purchase transaction.

        Body:
        - description: up to 50 characters (required)
        - transaction_date: YYYY-MM-DD (required)
        - amount: USD amount greater than zero (required)
        """
        serializer = CreatePurchaseTransactionSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"error": "Invalid data", "details": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            transaction_id = create_purchase_transaction(serializer.to_dto())
        except ValidationError as e:
            logger.warning("Validation error creating transaction: %s", e)
            return Response(
                {"error": str(e)},
                status=status.HTTP_422_UNPROCESSABLE_ENTITY
            )
        except Exception:
            logger.exception("Error creating transaction")
            return Response(
                {"error": "An error occurred while processing the request."},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response({"id": str(transaction_id)}, status=status.HTTP_201_CREATED)

    @extend_schema(
        parameters=[
            OpenApiParameter("country", OpenApiTypes.STR, required=True, description="Country name (e.g. Brazil)"),
            OpenApiParameter("currency", OpenApiTypes.STR, required=True, description="Currency name (e.g. Real)"),
        ],
        responses={
            200: ConvertedPurchaseSerializer,
            400: OpenApiResponse(description="Missing country or currency"),
            404: OpenApiResponse(description="Transaction not found"),
            422: OpenApiResponse(description="Exchange rate not available for the period"),
        },
        description="Convert a purchase to the currency of a country using the Treasury rate of exchange"
    )
    @action(detail=True, methods=['get'], url_path='convert')
    def convert(self, request, pk=None):
        """
        Convert a purchase transaction to a foreign currency.

        Query params:
        - country: Country name as published by the Treasury (required)
        - currency: Currency name as published by the Treasury (required)
        """
        conversion_request = ConversionRequestDTO(
            transaction_id=UUID(pk),
            country=request.query_params.get('country'),
            currency=request.query_params.get('currency'),
        )

        try:
            outcome = convert_purchase(conversion_request)
        except Exception:
            logger.exception("Error converting transaction %s", pk)
            return Response(
                {"error": "An error occurred while processing the request."},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        if isinstance(outcome, InvalidArgument):
            return Response({"error": outcome.message}, status=status.HTTP_400_BAD_REQUEST)

        if isinstance(outcome, NotFound):
            logger.warning("Transaction not found. Id: %s", outcome.transaction_id)
            return Response(
                {"error": f"Transaction with Id {outcome.transaction_id} was not found."},
                status=status.HTTP_404_NOT_FOUND
            )

        if isinstance(outcome, RateUnavailable):
            return Response(
                {"error": "Exchange rate not available", "detail": outcome.message},
                status=status.HTTP_422_UNPROCESSABLE_ENTITY
            )

        if isinstance(outcome, Converted):
            logger.info(
                "Conversion performed. Id: %s, Country: %s, Currency: %s",
                pk, conversion_request.country, conversion_request.currency
            )
            serializer = ConvertedPurchaseSerializer(ConvertedPurchaseDTO.from_result(outcome.result))
            return Response(serializer.data)

        logger.error("Unexpected conversion outcome for %s: %r", pk, outcome)
        return Response(
            {"error": "An error occurred while processing the request."},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
