"""Print today's Central Bank of Seychelles rates for USD, EUR and GBP."""

from __future__ import annotations

import argparse
import re
from datetime import date
from pathlib import Path
from typing import Sequence, TextIO

from cbs_rates.cache import DEFAULT_CACHE_PATH, RatesCache
from cbs_rates.config import CBS_DAILY_RATES_URL, DEFAULT_CURRENCIES, RatesConfig
from cbs_rates.errors import CBSRatesError
from cbs_rates.ingestion.cbs_html import extract_rates, parse_rates_table
from cbs_rates.ingestion.models import RateLookup
from cbs_rates.ingestion.strategy import PageRenderer
from cbs_rates.report import pretty_print, write_lookup
from cbs_rates.utils.calendar import is_weekend
from cbs_rates.utils.logger import get_logger, set_verbosity

LOGGER = get_logger(__name__)

__all__ = [
    "build_renderer",
    "fetch_rates_document",
    "load_rates_document",
    "run_daily_rates",
    "config_from_args",
    "parse_args",
    "main",
]


def build_renderer(config: RatesConfig) -> PageRenderer:
    """Create the renderer selected by ``config.engine``."""

    if config.engine == "requests":
        from cbs_rates.ingestion.cbs_requests import CBSRequestsRenderer

        return CBSRequestsRenderer(timeout=config.timeout)
    from cbs_rates.ingestion.cbs_selenium import CBSSeleniumRenderer

    return CBSSeleniumRenderer(
        browser=config.browser,
        timeout=config.timeout,
        render_selector=config.render_selector,
    )


def fetch_rates_document(config: RatesConfig, renderer: PageRenderer | None = None) -> str:
    """Render ``config.url``; renderers created here are closed before returning."""

    owns_renderer = renderer is None
    active = renderer if renderer is not None else build_renderer(config)
    try:
        return active.render(config.url)
    finally:
        if owns_renderer:
            active.close()


def load_rates_document(
    config: RatesConfig,
    *,
    renderer: PageRenderer | None = None,
    today: date | None = None,
) -> str:
    """Return today's rates document, downloading it at most once per day.

    CBS does not update its rates on Saturdays and Sundays and the page tends to
    time out then, so weekends always fall back to whatever is cached.
    """

    today = today or date.today()
    cache = RatesCache(config.cache_path)
    document = ""
    if config.skip_weekends and is_weekend(today):
        LOGGER.info("Skipping download on %s; using cached rates", today.strftime("%A"))
    elif config.force_refresh or not cache.is_fresh(today):
        LOGGER.info("Fetching CBS rates from %s", config.url)
        document = fetch_rates_document(config, renderer)
        cache.write(document)
    else:
        LOGGER.info("Rates cache %s is from today; skipping download", cache.path)

    if not document:
        document = cache.read()
    return document


def run_daily_rates(
    config: RatesConfig | None = None,
    *,
    renderer: PageRenderer | None = None,
    today: date | None = None,
    stream: TextIO | None = None,
) -> list[RateLookup]:
    """Load the rates document and print each configured currency in order."""

    config = config or RatesConfig()
    document = load_rates_document(config, renderer=renderer, today=today)

    if config.parser == "table":
        lookups = parse_rates_table(document, config.currencies)
        for lookup in lookups:
            if not lookup.found:
                LOGGER.warning("%s", lookup.reason)
            write_lookup(lookup, stream)
        return lookups

    results: list[RateLookup] = []
    for currency in config.currencies:
        section = extract_rates(currency, document)
        results.append(pretty_print(section, currency=currency, stream=stream))
    return results


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--url",
        default=CBS_DAILY_RATES_URL,
        help="Daily rates page to render",
    )
    parser.add_argument(
        "--cache-file",
        dest="cache_path",
        default=str(DEFAULT_CACHE_PATH),
        help="File used to cache the rendered page for the current day",
    )
    parser.add_argument(
        "--currency",
        dest="currencies",
        action="append",
        help="Currency code to report; repeat for several (default: USD, EUR, GBP)",
    )
    parser.add_argument(
        "--engine",
        choices=("selenium", "requests"),
        default="selenium",
        help="Render with a headless browser or a plain HTTP request",
    )
    parser.add_argument(
        "--browser",
        choices=("chrome", "firefox"),
        default="chrome",
        help="Browser driven by the selenium engine",
    )
    parser.add_argument(
        "--parser",
        choices=("window", "table"),
        default="window",
        help="Match rate rows by line window or by parsing the HTML table",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=60,
        help="Seconds to wait for the page to finish rendering",
    )
    parser.add_argument(
        "--no-weekend-skip",
        dest="skip_weekends",
        action="store_false",
        help="Fetch on Saturdays and Sundays too",
    )
    parser.add_argument(
        "--refresh",
        dest="force_refresh",
        action="store_true",
        help="Ignore a cache file from today and fetch again (weekdays only)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> RatesConfig:
    return RatesConfig(
        url=args.url,
        cache_path=Path(args.cache_path),
        currencies=tuple(args.currencies or DEFAULT_CURRENCIES),
        skip_weekends=args.skip_weekends,
        force_refresh=args.force_refresh,
        engine=args.engine,
        browser=args.browser,
        parser=args.parser,
        timeout=args.timeout,
    )


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    set_verbosity(args.verbose)
    try:
        config = config_from_args(args)
        run_daily_rates(config)
    except (CBSRatesError, ValueError, re.error) as exc:
        LOGGER.error("%s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
