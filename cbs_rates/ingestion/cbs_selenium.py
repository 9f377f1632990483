"""Headless browser rendering of the CBS daily rates page."""

from __future__ import annotations

from typing import Literal

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.common.by import By
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support.ui import WebDriverWait

from cbs_rates.errors import RatesFetchError
from cbs_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

SUPPORTED_BROWSERS = ("chrome", "firefox")


class CBSSeleniumRenderer:
    """Selenium-based renderer that returns the page after client-side rendering."""

    def __init__(
        self,
        *,
        browser: Literal["chrome", "firefox"] = "chrome",
        headless: bool = True,
        timeout: int = 60,
        render_selector: str | None = "td.ng-binding",
        driver: WebDriver | None = None,
    ) -> None:
        if browser not in SUPPORTED_BROWSERS:
            raise ValueError(f"Unsupported browser: {browser}")
        self.browser = browser
        self.timeout = timeout
        # CBS fills its rate cells in with AngularJS after the document itself
        # has loaded, so readiness alone is not enough.
        self.render_selector = render_selector
        self._owns_driver = driver is None
        if driver is None:
            try:
                self.driver = self._launch(headless)
            except WebDriverException as exc:
                raise RatesFetchError(f"could not launch {browser}: {exc.msg or exc}") from exc
        else:
            self.driver = driver

    def _launch(self, headless: bool) -> WebDriver:
        if self.browser == "firefox":
            firefox_options = FirefoxOptions()
            if headless:
                firefox_options.add_argument("-headless")
            firefox_options.accept_insecure_certs = True
            return webdriver.Firefox(options=firefox_options)

        options = Options()
        if headless:
            options.add_argument("--headless=new")
        options.add_argument("--disable-gpu")
        options.add_argument("--no-sandbox")
        options.add_argument("--disable-dev-shm-usage")
        options.add_argument("--ignore-certificate-errors")
        options.accept_insecure_certs = True
        return webdriver.Chrome(options=options)

    def close(self) -> None:
        """Close the browser if this renderer started it."""

        if getattr(self, "driver", None) is not None and self._owns_driver:
            self.driver.quit()

    def __enter__(self) -> "CBSSeleniumRenderer":  # pragma: no cover - trivial
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - trivial
        self.close()

    def render(self, url: str) -> str:
        """Navigate to ``url`` and return the fully rendered markup."""

        LOGGER.info("Rendering %s with headless %s", url, self.browser)
        try:
            self.driver.get(url)
            wait = WebDriverWait(self.driver, self.timeout)
            self._wait_for_page_ready(wait)
            content = self.driver.page_source
        except WebDriverException as exc:
            raise RatesFetchError(f"could not render {url}: {exc.msg or exc}") from exc
        LOGGER.debug("Rendered %s characters from %s", len(content), url)
        return content

    def _wait_for_page_ready(self, wait: WebDriverWait) -> None:
        wait.until(lambda driver: driver.execute_script("return document.readyState") == "complete")
        if self.render_selector:
            wait.until(lambda driver: driver.find_elements(By.CSS_SELECTOR, self.render_selector))


def fetch_cbs_rates(url: str, **renderer_options: object) -> str:
    """Launch a browser, render ``url`` and always shut the browser down again."""

    with CBSSeleniumRenderer(**renderer_options) as renderer:  # type: ignore[arg-type]
        return renderer.render(url)


__all__ = ["CBSSeleniumRenderer", "SUPPORTED_BROWSERS", "fetch_cbs_rates"]
