from __future__ import annotations

import pytest

CELL = '<td style="font-size: 12px;text-align: left" class="ng-binding">{}</td>'
HEADER = '<th style="height: 30px;font-size: 12px">{}</th>'


def rate_row(currency: str, *values: str) -> str:
    cells = "\n".join(CELL.format(value) for value in values)
    return f"<tr>\n{HEADER.format(currency)}\n{cells}\n</tr>"


CBS_RATES_HTML = "\n".join(
    [
        "<html>",
        "<head><title>Central Bank of Seychelles - Daily Rates</title></head>",
        "<body>",
        '<table class="table table-striped">',
        "<tr><td>Currency</td><td>Buying</td><td>Selling</td><td>Mid-rate</td></tr>",
        rate_row("USD", "13.9612", "14.5279", "14.2446"),
        rate_row("EUR", "15.1200", "15.7840", "15.4520"),
        rate_row("GBP", "17.8520", "", ""),
        "</table>",
        "</body>",
        "</html>",
    ]
)


@pytest.fixture
def rates_html() -> str:
    return CBS_RATES_HTML


@pytest.fixture
def make_row():
    return rate_row
