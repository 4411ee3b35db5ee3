import logging
import requests
from decimal import Decimal, InvalidOperation
from datetime import date

from core.settings import TREASURY_API_TIMEOUT, TREASURY_API_URL
from apps.purchases.domain.errors import RateSourceError
from apps.purchases.domain.interfaces import BaseExchangeRateProvider
from apps.purchases.domain.models import RateObservation, RATE_WINDOW_MONTHS, subtract_months

logger = logging.getLogger(__name__)

RATES_OF_EXCHANGE_ENDPOINT = "v1/accounting/od/rates_of_exchange"
RATES_OF_EXCHANGE_FIELDS = "country,currency,exchange_rate,record_date"


class TreasuryRatesProvider(BaseExchangeRateProvider):
    """
    U.S. Treasury Fiscal Data provider.
    Uses the Treasury Reporting Rates of Exchange dataset, filtered to the
    six months before the purchase date and sorted newest first.
    """

    def __init__(self, base_url: str | None = None, timeout: int | None = None):
        self.base_url = base_url or TREASURY_API_URL
        if not self.base_url.endswith("/"):
            self.base_url += "/"
        self.timeout = timeout or TREASURY_API_TIMEOUT

    def build_params(self, country: str, currency: str, as_of: date) -> dict:
        window_start = subtract_months(as_of, RATE_WINDOW_MONTHS)
        return {
            "fields": RATES_OF_EXCHANGE_FIELDS,
            "filter": (
                f"country:eq:{country},currency:eq:{currency},"
                f"record_date:lte:{as_of.isoformat()},"
                f"record_date:gte:{window_start.isoformat()}"
            ),
            "sort": "-record_date",
            "page[size]": "1",
        }

    def latest(self, country: str, currency: str, as_of: date) -> RateObservation | None:
        """
        Fetch the newest rate for country/currency in the window ending on as_of.

        Args:
            country: Country name (e.g. Brazil)
            currency: Currency name (e.g. Real)
            as_of: Purchase date

        Returns:
            RateObservation, or None if the dataset has no matching row

        Raises:
            RateSourceError: on timeout, network error, HTTP error or malformed payload
        """
        # Format: {base}/v1/accounting/od/rates_of_exchange?fields=...&filter=country:eq:Brazil,...&sort=-record_date&page[size]=1
        url = f"{self.base_url}{RATES_OF_EXCHANGE_ENDPOINT}"
        params = self.build_params(country, currency, as_of)

        logger.info("Querying Treasury rates of exchange: %s filter=%s", url, params["filter"])

        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout as e:
            logger.warning("Timeout calling Treasury API for %s/%s on %s", country, currency, as_of)
            raise RateSourceError(f"Treasury API timeout after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            logger.warning("HTTP error from Treasury API: %s", e)
            raise RateSourceError(f"Treasury API HTTP error: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error("Network error querying Treasury API: %s", e)
            raise RateSourceError(f"Treasury API request failed: {e}") from e
        except ValueError as e:
            logger.error("Treasury API returned invalid JSON: %s", e)
            raise RateSourceError(f"Treasury API returned invalid JSON: {e}") from e

        # Response format: {"data": [{"country": "Brazil", "currency": "Real", "exchange_rate": "5.434", "record_date": "2025-09-30"}], "meta": {...}}
        rows = data.get("data") if isinstance(data, dict) else None
        if rows is None:
            logger.error("Treasury API unexpected response structure: %s", data)
            raise RateSourceError("Treasury API response missing 'data' field")

        if not rows:
            logger.info(
                "No rate found for %s/%s between %s and %s",
                country, currency, subtract_months(as_of, RATE_WINDOW_MONTHS), as_of
            )
            return None

        return self.parse_row(rows[0])

    @staticmethod
    def parse_row(row: dict) -> RateObservation:
        """Build an observation from one dataset row, all fields or nothing."""
        try:
            exchange_rate = Decimal(str(row["exchange_rate"]))
            if not exchange_rate.is_finite() or exchange_rate <= 0:
                raise ValueError(f"non-positive exchange_rate {row['exchange_rate']!r}")
            return RateObservation(
                country=str(row["country"]),
                currency=str(row["currency"]),
                exchange_rate=exchange_rate,
                record_date=date.fromisoformat(str(row["record_date"])[:10]),
            )
        except (KeyError, TypeError, ValueError, InvalidOperation) as e:
            logger.error("Invalid row from Treasury API: %s (%s)", row, e)
            raise RateSourceError(f"Invalid response from Treasury API: {e}") from e
