"""Locate and parse currency rate rows in the rendered CBS daily rates page."""

from __future__ import annotations

import re
from typing import Iterable

from bs4 import BeautifulSoup

from cbs_rates.errors import CurrencyNotFoundError
from cbs_rates.ingestion.models import CurrencyRate, RateLookup
from cbs_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

# The CBS page renders the currency label and its three rate cells across the
# line holding the code and the four lines below it.
SECTION_LINES = 4

_RATE_CELL = r'<td style="font-size: 12px;text-align: left" class="ng-binding">(\d+\.\d+)</td>'
RATE_ROW_PATTERN = re.compile(
    r'<th style="height: 30px;font-size: 12px">(\w+)</th>\s+'
    + _RATE_CELL
    + r"\s+"
    + _RATE_CELL
    + r"\s+"
    + _RATE_CELL
)
_DECIMAL = re.compile(r"\d+\.\d+")


def section_pattern(currency: str, lines: int = SECTION_LINES) -> re.Pattern[str]:
    """Return the pattern matching the line containing ``currency`` plus ``lines`` more."""

    return re.compile(rf".*{re.escape(currency)}.*(?:\n.*){{{lines}}}")


def extract_rates(currency: str, document: str) -> str:
    """Return the first section of ``document`` that mentions ``currency``.

    The match is case-sensitive and only the first occurrence is used. A
    missing currency raises :class:`~cbs_rates.errors.CurrencyNotFoundError`.
    """

    match = section_pattern(currency).search(document)
    if match is None:
        raise CurrencyNotFoundError(currency)
    return match.group(0)


def parse_rate_row(section: str, currency: str | None = None) -> RateLookup:
    """Match the fixed CBS rate row markup inside ``section``."""

    match = RATE_ROW_PATTERN.search(section)
    if match is None:
        return RateLookup.malformed(currency, "no complete rate row in section")
    label, buying, selling, mid_rate = match.groups()
    return RateLookup.from_rate(
        CurrencyRate(currency=label, buying=buying, selling=selling, mid_rate=mid_rate)
    )


def _cell_text(cell) -> str:
    return " ".join(cell.stripped_strings).strip()


def _parse_table_row(currency: str, row) -> RateLookup:
    values = [_cell_text(cell) for cell in row.find_all("td")][:3]
    if len(values) < 3:
        return RateLookup.malformed(
            currency, f"expected 3 rate cells for {currency}, found {len(values)}"
        )
    invalid = [value for value in values if not _DECIMAL.fullmatch(value)]
    if invalid:
        return RateLookup.malformed(
            currency, f"non-numeric rate cells for {currency}: {', '.join(map(repr, invalid))}"
        )
    buying, selling, mid_rate = values
    return RateLookup.from_rate(
        CurrencyRate(currency=currency, buying=buying, selling=selling, mid_rate=mid_rate)
    )


def parse_rates_table(document: str, currencies: Iterable[str]) -> list[RateLookup]:
    """Parse ``document`` as HTML and look up each currency's table row.

    Rows are identified by a leading ``<th>`` whose text equals the currency
    code, so the result does not depend on how the markup is split into lines.
    The first row for each code wins.
    """

    soup = BeautifulSoup(document, "html.parser")
    rows_by_label: dict[str, object] = {}
    for row in soup.find_all("tr"):
        header = row.find("th")
        if header is None:
            continue
        rows_by_label.setdefault(_cell_text(header), row)
    LOGGER.debug("Found %s labelled table rows", len(rows_by_label))

    lookups: list[RateLookup] = []
    for currency in currencies:
        row = rows_by_label.get(currency)
        if row is None:
            lookups.append(RateLookup.not_found(currency))
        else:
            lookups.append(_parse_table_row(currency, row))
    return lookups


__all__ = [
    "RATE_ROW_PATTERN",
    "SECTION_LINES",
    "extract_rates",
    "parse_rate_row",
    "parse_rates_table",
    "section_pattern",
]
