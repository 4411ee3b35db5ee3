"""
Conversion outcomes.

ConversionService.convert() returns exactly one of these instead of
raising, so every caller has to handle each case explicitly.
"""

from dataclasses import dataclass
from typing import Union
from uuid import UUID

from apps.purchases.domain.models import ConversionResult


@dataclass(frozen=True)
class Converted:
    result: ConversionResult


@dataclass(frozen=True)
class NotFound:
    """The transaction does not exist. A valid answer, not a failure."""
    transaction_id: UUID


@dataclass(frozen=True)
class InvalidArgument:
    message: str


@dataclass(frozen=True)
class RateUnavailable:
    message: str


ConversionOutcome = Union[Converted, NotFound, InvalidArgument, RateUnavailable]
