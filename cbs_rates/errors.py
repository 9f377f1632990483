"""Exception hierarchy raised by cbs_rates components."""

from __future__ import annotations

from pathlib import Path


class CBSRatesError(Exception):
    """Base class for every fatal condition raised by the package."""


class RatesFetchError(CBSRatesError):
    """Raised when the rates page could not be rendered or downloaded."""


class CacheWriteError(CBSRatesError):
    """Raised when the rates document cannot be persisted to the cache file."""

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Failed to write rates cache {path}: {reason}")
        self.path = path


class CacheReadError(CBSRatesError):
    """Raised when no usable rates document can be loaded from the cache file."""

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Could not read an old rates file from {path}: {reason}")
        self.path = path


class CurrencyNotFoundError(CBSRatesError, LookupError):
    """Raised when a currency code does not appear in the rates document."""

    def __init__(self, currency: str) -> None:
        super().__init__(f"No section found for currency {currency}")
        self.currency = currency


__all__ = [
    "CBSRatesError",
    "RatesFetchError",
    "CacheWriteError",
    "CacheReadError",
    "CurrencyNotFoundError",
]
