"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True, slots=True)
class CurrencyRate:
    """A single CBS rate row, with the values kept exactly as published."""

    currency: str
    buying: str
    selling: str
    mid_rate: str

    @property
    def buying_value(self) -> Decimal:
        return Decimal(self.buying)

    @property
    def selling_value(self) -> Decimal:
        return Decimal(self.selling)

    @property
    def mid_rate_value(self) -> Decimal:
        return Decimal(self.mid_rate)


class LookupStatus(str, Enum):
    """Outcome of looking up one currency in a rates document."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"


@dataclass(frozen=True, slots=True)
class RateLookup:
    """Result of extracting one currency row.

    ``rate`` is only populated for :attr:`LookupStatus.FOUND`; the other
    statuses carry a human readable ``reason`` instead.
    """

    status: LookupStatus
    currency: str | None
    rate: CurrencyRate | None = None
    reason: str | None = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @classmethod
    def from_rate(cls, rate: CurrencyRate) -> "RateLookup":
        return cls(status=LookupStatus.FOUND, currency=rate.currency, rate=rate)

    @classmethod
    def not_found(cls, currency: str) -> "RateLookup":
        return cls(
            status=LookupStatus.NOT_FOUND,
            currency=currency,
            reason=f"no rate row for {currency}",
        )

    @classmethod
    def malformed(cls, currency: str | None, reason: str) -> "RateLookup":
        return cls(status=LookupStatus.MALFORMED, currency=currency, reason=reason)
