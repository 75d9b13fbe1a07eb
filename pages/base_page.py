# Shared page capabilities: navigation, load barriers, screenshots and value checks.
from __future__ import annotations

import logging
import time
from pathlib import Path

from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from pages.element import DEFAULT_TIMEOUT_MS, Element
from pages.errors import ValidationMismatchError, WaitTimeoutError

NAVIGATION_TIMEOUT_MS = 30_000
SCREENSHOTS_DIR = Path("reports") / "screenshots"

LOGGER = logging.getLogger("qa.pages")


class BasePage:
    """Capabilities every screen needs; concrete pages hold one as `self.base`."""

    def __init__(
        self,
        page: Page,
        base_url: str,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        screenshots_dir: Path = SCREENSHOTS_DIR,
    ) -> None:
        self.page = page
        self.base_url = base_url.rstrip("/")
        self.timeout_ms = timeout_ms
        self.screenshots_dir = Path(screenshots_dir)

    def element(self, test_id: str) -> Element:
        return Element.by_test_id(self.page, test_id, timeout_ms=self.timeout_ms)

    def locate(self, selector: str) -> Element:
        return Element.by_selector(self.page, selector, timeout_ms=self.timeout_ms)

    def url_for(self, path: str, base_url: str | None = None) -> str:
        root = (base_url or self.base_url).rstrip("/")
        return f"{root}{path}"

    @property
    def current_url(self) -> str:
        return self.page.url

    @property
    def current_path(self) -> str:
        return self.page.evaluate("() => window.location.pathname")

    def get_page_title(self) -> str:
        return self.page.title()

    def navigate_to(self, url: str, timeout_ms: int = NAVIGATION_TIMEOUT_MS) -> None:
        """Open `url` and return only once the network is idle and the DOM has loaded."""

        LOGGER.info("navigate", extra={"url": url})
        try:
            self.page.goto(url, wait_until="networkidle", timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise WaitTimeoutError(f"Navigation to {url} did not settle within {timeout_ms}ms") from exc
        self.wait_for_page_load(timeout_ms)

    def wait_for_page_load(self, timeout_ms: int = NAVIGATION_TIMEOUT_MS) -> None:
        # Both states are required; neither one implies the other.
        try:
            self.page.wait_for_load_state("networkidle", timeout=timeout_ms)
            self.page.wait_for_load_state("domcontentloaded", timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise WaitTimeoutError(
                f"Page {self.page.url} did not finish loading within {timeout_ms}ms"
            ) from exc

    def refresh_page(self) -> None:
        self.page.reload(wait_until="networkidle")

    def go_back(self) -> None:
        self.page.go_back(wait_until="networkidle")

    def go_forward(self) -> None:
        self.page.go_forward(wait_until="networkidle")

    def take_screenshot(self, name: str | None = None) -> Path:
        """Write a full-page PNG; unnamed captures use a millisecond timestamp."""

        screenshot_name = name or f"screenshot-{int(time.time() * 1000)}"
        path = self.screenshots_dir / f"{screenshot_name}.png"
        path.parent.mkdir(parents=True, exist_ok=True)
        self.page.screenshot(path=str(path), full_page=True)
        LOGGER.info("screenshot_saved", extra={"path": str(path)})
        return path

    def wait_for_text(self, text: str, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> None:
        """Poll the page's full text content until it contains `text`."""

        try:
            self.page.wait_for_function(
                "text => !!document.body && document.body.textContent.includes(text)",
                arg=text,
                timeout=timeout_ms,
            )
        except PlaywrightTimeoutError as exc:
            raise WaitTimeoutError(f"Text {text!r} did not appear within {timeout_ms}ms") from exc

    def wait_until_path_excludes(self, path: str, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> None:
        """Poll the live location until its pathname no longer contains `path`."""

        try:
            self.page.wait_for_function(
                "path => !window.location.pathname.includes(path)",
                arg=path,
                timeout=timeout_ms,
            )
        except PlaywrightTimeoutError as exc:
            raise ValidationMismatchError(
                f"Location still inside {path!r} after {timeout_ms}ms",
                expected=f"path without {path!r}",
                actual=self.page.url,
            ) from exc

    def validate_page_title(self, expected: str) -> None:
        actual = self.get_page_title()
        if actual != expected:
            raise ValidationMismatchError("Page title mismatch", expected=expected, actual=actual)

    def validate_url_contains(self, expected: str) -> None:
        actual = self.current_url
        if expected not in actual:
            raise ValidationMismatchError(
                "URL does not contain expected fragment", expected=expected, actual=actual
            )
