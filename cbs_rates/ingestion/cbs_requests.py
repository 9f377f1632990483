"""Plain HTTP renderer for pages that need no JavaScript (no Selenium!)."""

from __future__ import annotations

import warnings

import requests
from urllib3.exceptions import InsecureRequestWarning

from cbs_rates.errors import RatesFetchError
from cbs_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)


class CBSRequestsRenderer:
    """Fetch markup with ``requests``; TLS verification is off like the browser path."""

    def __init__(
        self,
        *,
        timeout: int = 30,
        verify: bool = False,
        session: requests.Session | None = None,
    ) -> None:
        self.timeout = timeout
        self.verify = verify
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", "cbs-rates/0.1")

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "CBSRequestsRenderer":  # pragma: no cover - trivial
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - trivial
        self.close()

    def render(self, url: str) -> str:
        try:
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", InsecureRequestWarning)
                response = self.session.get(url, timeout=self.timeout, verify=self.verify)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise RatesFetchError(f"could not download {url}: {exc}") from exc
        LOGGER.info("Fetched %s (HTTP %s)", url, response.status_code)
        return response.text


__all__ = ["CBSRequestsRenderer"]
