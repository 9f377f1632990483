"""Runtime configuration for the CBS daily rates report."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Literal

from cbs_rates.cache import DEFAULT_CACHE_PATH

CBS_DAILY_RATES_URL: Final[str] = "https://www.cbs.sc/marketinfo/DailyRates.html"
DEFAULT_CURRENCIES: Final[tuple[str, ...]] = ("USD", "EUR", "GBP")

Engine = Literal["selenium", "requests"]
Browser = Literal["chrome", "firefox"]
ParserMode = Literal["window", "table"]

_CURRENCY_CODE = re.compile(r"^[A-Z]{3}$")


def normalise_currency(code: str) -> str:
    """Upper-case ``code`` and ensure it looks like an ISO 4217 code."""

    upper = code.strip().upper()
    if not _CURRENCY_CODE.match(upper):
        raise ValueError(f"Unsupported currency code: {code!r}")
    return upper


@dataclass(frozen=True, slots=True)
class RatesConfig:
    """Everything a single report run needs to know.

    The defaults reproduce the fixed behaviour of the command line tool, so
    ``RatesConfig()`` fetches the CBS page into ``/tmp/cbsrates.html`` and
    reports USD, EUR and GBP.
    """

    url: str = CBS_DAILY_RATES_URL
    cache_path: Path = DEFAULT_CACHE_PATH
    currencies: tuple[str, ...] = DEFAULT_CURRENCIES
    skip_weekends: bool = True
    force_refresh: bool = False
    engine: Engine = "selenium"
    browser: Browser = "chrome"
    parser: ParserMode = "window"
    timeout: int = 60
    render_selector: str | None = "td.ng-binding"

    def __post_init__(self) -> None:
        object.__setattr__(self, "cache_path", Path(self.cache_path))
        object.__setattr__(
            self, "currencies", tuple(normalise_currency(code) for code in self.currencies)
        )
        if not self.currencies:
            raise ValueError("At least one currency must be configured")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")


__all__ = [
    "CBS_DAILY_RATES_URL",
    "DEFAULT_CURRENCIES",
    "RatesConfig",
    "normalise_currency",
]
