from __future__ import annotations

from decimal import Decimal

import pytest

from cbs_rates.errors import CurrencyNotFoundError
from cbs_rates.ingestion.cbs_html import (
    extract_rates,
    parse_rate_row,
    parse_rates_table,
    section_pattern,
)
from cbs_rates.ingestion.models import LookupStatus


def test_extract_rates_returns_matched_line_plus_four(rates_html: str) -> None:
    lines = rates_html.split("\n")
    start = next(index for index, line in enumerate(lines) if "USD" in line)

    section = extract_rates("USD", rates_html)

    assert section == "\n".join(lines[start : start + 5])
    assert section.count("\n") == 4


def test_extract_rates_is_idempotent(rates_html: str) -> None:
    assert extract_rates("EUR", rates_html) == extract_rates("EUR", rates_html)


def test_extract_rates_uses_first_occurrence() -> None:
    document = "\n".join(
        ["<p>USD first</p>", "one", "two", "three", "four", "<p>USD second</p>", "a", "b", "c", "d"]
    )

    section = extract_rates("USD", document)

    assert section == "<p>USD first</p>\none\ntwo\nthree\nfour"


def test_extract_rates_is_case_sensitive(rates_html: str) -> None:
    with pytest.raises(CurrencyNotFoundError):
        extract_rates("usd", rates_html)


def test_extract_rates_missing_currency_is_fatal(rates_html: str) -> None:
    with pytest.raises(CurrencyNotFoundError) as excinfo:
        extract_rates("JPY", rates_html)

    assert excinfo.value.currency == "JPY"
    assert isinstance(excinfo.value, LookupError)


def test_extract_rates_needs_four_following_lines() -> None:
    with pytest.raises(CurrencyNotFoundError):
        extract_rates("USD", "USD\n1\n2\n3")


def test_section_pattern_escapes_code() -> None:
    assert section_pattern("U.D").search("USD\n1\n2\n3\n4") is None


def test_parse_rate_row_found(rates_html: str) -> None:
    lookup = parse_rate_row(extract_rates("USD", rates_html), "USD")

    assert lookup.status is LookupStatus.FOUND
    assert lookup.found
    assert lookup.rate is not None
    assert lookup.rate.currency == "USD"
    assert (lookup.rate.buying, lookup.rate.selling, lookup.rate.mid_rate) == (
        "13.9612",
        "14.5279",
        "14.2446",
    )
    assert lookup.rate.mid_rate_value == Decimal("14.2446")


def test_parse_rate_row_without_rates(rates_html: str) -> None:
    lookup = parse_rate_row(extract_rates("GBP", rates_html), "GBP")

    assert lookup.status is LookupStatus.MALFORMED
    assert lookup.currency == "GBP"
    assert lookup.rate is None


def test_parse_rate_row_requires_fractional_part(make_row) -> None:
    section = make_row("USD", "13", "14.5279", "14.2446")

    assert parse_rate_row(section).found is False


def test_parse_rates_table_statuses(rates_html: str) -> None:
    usd, eur, gbp, jpy = parse_rates_table(rates_html, ["USD", "EUR", "GBP", "JPY"])

    assert usd.found and usd.rate is not None
    assert usd.rate.selling == "14.5279"
    assert eur.found and eur.rate is not None
    assert eur.rate.buying_value == Decimal("15.1200")
    assert gbp.status is LookupStatus.MALFORMED
    assert "non-numeric" in (gbp.reason or "")
    assert jpy.status is LookupStatus.NOT_FOUND
    assert jpy.currency == "JPY"


def test_parse_rates_table_ignores_line_layout() -> None:
    document = (
        "<table><tr><th> USD </th><td>13.9612</td><td><span>14.5279</span></td>"
        "<td>14.2446</td></tr></table>"
    )

    (usd,) = parse_rates_table(document, ["USD"])

    assert usd.found and usd.rate is not None
    assert usd.rate.selling == "14.5279"


def test_parse_rates_table_reports_missing_cells() -> None:
    document = "<table><tr><th>GBP</th><td>17.8520</td></tr></table>"

    (gbp,) = parse_rates_table(document, ["GBP"])

    assert gbp.status is LookupStatus.MALFORMED
    assert gbp.reason == "expected 3 rate cells for GBP, found 1"
