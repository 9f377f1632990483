"""Console rendering of extracted CBS rates."""

from __future__ import annotations

import sys
from typing import TextIO

from cbs_rates.ingestion.cbs_html import parse_rate_row
from cbs_rates.ingestion.models import CurrencyRate, RateLookup

NO_RATES_MESSAGE = "No rates found."


def format_rate(rate: CurrencyRate) -> str:
    """Return the four-line block for ``rate`` followed by a blank line."""

    return (
        f"Currency: {rate.currency}\n"
        f"Buying:   {rate.buying}\n"
        f"Selling:  {rate.selling}\n"
        f"Mid-rate: {rate.mid_rate}\n"
        "\n"
    )


def format_lookup(lookup: RateLookup) -> str:
    if lookup.found and lookup.rate is not None:
        return format_rate(lookup.rate)
    return f"{NO_RATES_MESSAGE}\n"


def write_lookup(lookup: RateLookup, stream: TextIO | None = None) -> None:
    (stream or sys.stdout).write(format_lookup(lookup))


def pretty_print(
    section: str, *, currency: str | None = None, stream: TextIO | None = None
) -> RateLookup:
    """Print the rate row found in ``section``, or ``No rates found.`` without one.

    The CBS page regularly omits the selling or mid-rate cell for GBP, which is
    reported through the fallback message rather than as an error.
    """

    lookup = parse_rate_row(section, currency)
    write_lookup(lookup, stream)
    return lookup


__all__ = ["NO_RATES_MESSAGE", "format_lookup", "format_rate", "pretty_print", "write_lookup"]
