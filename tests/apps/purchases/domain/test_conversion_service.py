import pytest
from decimal import Decimal
from datetime import date, datetime
from unittest.mock import MagicMock
from uuid import uuid4

from apps.purchases.domain.errors import RateSourceError
from apps.purchases.domain.interfaces import BaseTransactionRepository
from apps.purchases.domain.models import PurchaseTransaction, RateObservation
from apps.purchases.domain.outcomes import Converted, InvalidArgument, NotFound, RateUnavailable
from apps.purchases.domain.services import ConversionService


class InMemoryTransactionRepository(BaseTransactionRepository):

    def __init__(self):
        self.transactions = {}

    def get(self, transaction_id):
        return self.transactions.get(transaction_id)

    def add(self, transaction):
        self.transactions[transaction.id] = transaction
        return transaction


@pytest.fixture
def repository():
    return InMemoryTransactionRepository()


@pytest.fixture
def provider():
    return MagicMock()


@pytest.fixture
def service(repository, provider):
    return ConversionService(repository=repository, provider=provider)


@pytest.fixture
def purchase(repository):
    """A 1000.00 USD purchase dated 2025-09-30."""
    return repository.add(
        PurchaseTransaction("Laptop", date(2025, 9, 30), Decimal("1000.00"))
    )


def observation(rate="5.10", record_date=date(2025, 9, 30)):
    return RateObservation(
        country="Brazil",
        currency="Real",
        exchange_rate=Decimal(rate),
        record_date=record_date,
    )


class TestConversionService:
    """Tests for ConversionService.convert."""

    def test_convert_success(self, service, provider, purchase):
        """
        Test a 1000.00 USD purchase converted at 5.10 gives 5100.00.
        """
        provider.latest.return_value = observation()

        outcome = service.convert(purchase.id, "Brazil", "Real")

        assert isinstance(outcome, Converted)
        result = outcome.result
        assert result.transaction_id == purchase.id
        assert result.description == "Laptop"
        assert result.transaction_date == date(2025, 9, 30)
        assert result.amount == Decimal("1000.00")
        assert result.exchange_rate == Decimal("5.10")
        assert result.converted_amount == Decimal("5100.00")
        assert result.country == "Brazil"
        assert result.currency == "Real"
        assert result.record_date == date(2025, 9, 30)
        provider.latest.assert_called_once_with("Brazil", "Real", date(2025, 9, 30))

    def test_converted_amount_is_rounded_half_even(self, service, provider, repository):
        """
        Test that 123.45 * 5.123 = 632.42835 rounds to 632.43.
        """
        purchase = repository.add(
            PurchaseTransaction("Books", date(2025, 9, 30), Decimal("123.45"))
        )
        provider.latest.return_value = observation(rate="5.123")

        outcome = service.convert(purchase.id, "Brazil", "Real")

        assert outcome.result.converted_amount == Decimal("632.43")

    @pytest.mark.parametrize("country, currency, message", [
        ("", "Real", "country is required"),
        ("   ", "Real", "country is required"),
        (None, "Real", "country is required"),
        ("Brazil", "", "currency is required"),
        ("Brazil", None, "currency is required"),
        (76, "Real", "country is required"),
        ("Brazil", 986, "currency is required"),
    ])
    def test_blank_arguments_fail_fast(self, provider, country, currency, message):
        """
        Test that blank country/currency never reach the store or the rate source.
        """
        repository = MagicMock()
        service = ConversionService(repository=repository, provider=provider)

        outcome = service.convert(uuid4(), country, currency)

        assert outcome == InvalidArgument(message)
        repository.get.assert_not_called()
        provider.latest.assert_not_called()

    def test_unknown_transaction_is_not_found(self, service, provider):
        transaction_id = uuid4()

        outcome = service.convert(transaction_id, "Brazil", "Real")

        assert outcome == NotFound(transaction_id)
        provider.latest.assert_not_called()

    def test_no_rate_in_window(self, service, provider, purchase):
        provider.latest.return_value = None

        outcome = service.convert(purchase.id, "Brazil", "Real")

        assert isinstance(outcome, RateUnavailable)
        assert "Brazil/Real" in outcome.message
        assert "2025-03-30 to 2025-09-30" in outcome.message

    def test_rate_exactly_six_months_before_is_accepted(self, service, provider, purchase):
        provider.latest.return_value = observation(record_date=date(2025, 3, 30))

        outcome = service.convert(purchase.id, "Brazil", "Real")

        assert isinstance(outcome, Converted)
        assert outcome.result.record_date == date(2025, 3, 30)

    def test_rate_one_day_before_window_is_rejected(self, service, provider, purchase):
        provider.latest.return_value = observation(record_date=date(2025, 3, 29))

        outcome = service.convert(purchase.id, "Brazil", "Real")

        assert isinstance(outcome, RateUnavailable)
        assert "record_date: 2025-03-29" in outcome.message
        assert "between 2025-03-30 and 2025-09-30" in outcome.message

    def test_rate_older_than_window_is_rejected(self, service, provider, purchase):
        """
        Test that a record dated 2025-03-01 is rejected for a 2025-09-30 purchase
        even though the rate source returned it.
        """
        provider.latest.return_value = observation(record_date=date(2025, 3, 1))

        outcome = service.convert(purchase.id, "Brazil", "Real")

        assert isinstance(outcome, RateUnavailable)

    def test_rate_after_transaction_date_is_rejected(self, service, provider, purchase):
        provider.latest.return_value = observation(record_date=date(2025, 10, 1))

        outcome = service.convert(purchase.id, "Brazil", "Real")

        assert isinstance(outcome, RateUnavailable)

    @pytest.mark.parametrize("error", [
        RateSourceError("Treasury API timeout after 30s"),
        ConnectionError("connection reset"),
        RuntimeError("boom"),
    ])
    def test_rate_source_failure_is_rate_unavailable(self, service, provider, purchase, error):
        provider.latest.side_effect = error

        outcome = service.convert(purchase.id, "Brazil", "Real")

        assert isinstance(outcome, RateUnavailable)
        assert "Error querying the exchange rate service for Brazil/Real" in outcome.message
        assert str(error) in outcome.message

    def test_invalid_rate_value_is_rate_unavailable(self, service, provider, purchase):
        provider.latest.return_value = RateObservation(
            country="Brazil",
            currency="Real",
            exchange_rate="not-a-number",
            record_date=date(2025, 9, 30),
        )

        outcome = service.convert(purchase.id, "Brazil", "Real")

        assert isinstance(outcome, RateUnavailable)
        assert "invalid rate" in outcome.message

    def test_service_is_stateless_between_calls(self, service, provider, purchase):
        provider.latest.side_effect = [None, observation()]

        first = service.convert(purchase.id, "Brazil", "Real")
        second = service.convert(purchase.id, "Brazil", "Real")

        assert isinstance(first, RateUnavailable)
        assert isinstance(second, Converted)

    @pytest.mark.parametrize("record_date", [None, "2025-09-30", 20250930])
    def test_invalid_record_date_is_rate_unavailable(self, service, provider, purchase, record_date):
        """
        Test that a record date that is not a date is reported, not compared.
        """
        provider.latest.return_value = observation(record_date=record_date)

        outcome = service.convert(purchase.id, "Brazil", "Real")

        assert isinstance(outcome, RateUnavailable)
        assert "invalid record_date" in outcome.message

    def test_datetime_record_date_is_reduced_to_date(self, service, provider, purchase):
        provider.latest.return_value = observation(record_date=datetime(2025, 9, 30, 0, 0))

        outcome = service.convert(purchase.id, "Brazil", "Real")

        assert isinstance(outcome, Converted)
        assert outcome.result.record_date == date(2025, 9, 30)

    def test_datetime_record_date_outside_window_is_rejected(self, service, provider, purchase):
        provider.latest.return_value = observation(record_date=datetime(2025, 3, 29, 23, 59))

        outcome = service.convert(purchase.id, "Brazil", "Real")

        assert isinstance(outcome, RateUnavailable)
        assert "record_date: 2025-03-29" in outcome.message

    @pytest.mark.parametrize("rate", ["0", "-5.10", "NaN", "Infinity"])
    def test_non_positive_rate_is_rate_unavailable(self, service, provider, purchase, rate):
        """
        Test that a zero, negative or non-finite rate never yields a conversion.
        """
        provider.latest.return_value = observation(rate=rate)

        outcome = service.convert(purchase.id, "Brazil", "Real")

        assert isinstance(outcome, RateUnavailable)
        assert "invalid rate" in outcome.message

    def test_rate_too_large_to_round_is_rate_unavailable(self, service, provider, purchase):
        provider.latest.return_value = observation(rate="1e30")

        outcome = service.convert(purchase.id, "Brazil", "Real")

        assert isinstance(outcome, RateUnavailable)
        assert "invalid rate" in outcome.message
