"""Public interface for the cbs_rates package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

from cbs_rates.cache import DEFAULT_CACHE_PATH, RatesCache, is_fresh
from cbs_rates.config import CBS_DAILY_RATES_URL, DEFAULT_CURRENCIES, RatesConfig
from cbs_rates.errors import (
    CacheReadError,
    CacheWriteError,
    CBSRatesError,
    CurrencyNotFoundError,
    RatesFetchError,
)
from cbs_rates.ingestion.cbs_html import extract_rates, parse_rate_row, parse_rates_table
from cbs_rates.ingestion.models import CurrencyRate, LookupStatus, RateLookup
from cbs_rates.report import pretty_print

__all__ = [
    "__version__",
    "CBS_DAILY_RATES_URL",
    "DEFAULT_CACHE_PATH",
    "DEFAULT_CURRENCIES",
    "CBSRatesError",
    "CacheReadError",
    "CacheWriteError",
    "CurrencyNotFoundError",
    "CurrencyRate",
    "LookupStatus",
    "RateLookup",
    "RatesCache",
    "RatesConfig",
    "RatesFetchError",
    "extract_rates",
    "is_fresh",
    "parse_rate_row",
    "parse_rates_table",
    "pretty_print",
    "run_daily_rates",
    "fetch_cbs_rates",
]

try:
    __version__ = importlib_metadata.version("cbs-rates")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


def run_daily_rates(*args, **kwargs):
    from cbs_rates.daily_rates import run_daily_rates as _run_daily_rates

    return _run_daily_rates(*args, **kwargs)


def fetch_cbs_rates(*args, **kwargs):
    from cbs_rates.ingestion.cbs_selenium import fetch_cbs_rates as _fetch_cbs_rates

    return _fetch_cbs_rates(*args, **kwargs)
