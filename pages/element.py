"""Single-element handle with bounded waits.

Every call re-resolves the underlying locator against the live page, so an
Element never holds stale UI state. Playwright timeouts and action failures are
translated into the typed errors from `pages.errors`.
"""

from __future__ import annotations

import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from pages.errors import (
    ElementNotFoundError,
    ElementStillVisibleError,
    InteractionError,
)

DEFAULT_TIMEOUT_MS = 10_000
PROBE_TIMEOUT_MS = 1_000

LOGGER = logging.getLogger("qa.pages")


class Element:
    """Deferred handle to one UI element located by test id or selector."""

    def __init__(self, locator: Locator, name: str, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> None:
        self.locator = locator
        self.name = name
        self.timeout_ms = timeout_ms

    @classmethod
    def by_test_id(cls, page: Page, test_id: str, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> Element:
        return cls(page.get_by_test_id(test_id), name=test_id, timeout_ms=timeout_ms)

    @classmethod
    def by_selector(cls, page: Page, selector: str, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> Element:
        return cls(page.locator(selector), name=selector, timeout_ms=timeout_ms)

    def __repr__(self) -> str:
        return f"Element({self.name!r})"

    def _timeout(self, timeout_ms: int | None) -> int:
        return self.timeout_ms if timeout_ms is None else timeout_ms

    def _unresolvable(self, exc: PlaywrightError) -> InteractionError:
        # Raised for non-timeout locator failures, e.g. a test id matching several nodes.
        return InteractionError(f"Locator for {self.name!r} could not be resolved: {exc.message}")

    def wait_visible(self, timeout_ms: int | None = None) -> None:
        timeout = self._timeout(timeout_ms)
        try:
            self.locator.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise ElementNotFoundError(
                f"Element {self.name!r} was not visible within {timeout}ms"
            ) from exc
        except PlaywrightError as exc:
            raise self._unresolvable(exc) from exc

    def wait_hidden(self, timeout_ms: int | None = None) -> None:
        timeout = self._timeout(timeout_ms)
        try:
            self.locator.wait_for(state="hidden", timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise ElementStillVisibleError(
                f"Element {self.name!r} was still visible after {timeout}ms"
            ) from exc
        except PlaywrightError as exc:
            raise self._unresolvable(exc) from exc

    def is_visible(self) -> bool:
        """Soft probe: short fixed wait, False instead of a timeout failure."""
        try:
            self.locator.wait_for(state="visible", timeout=PROBE_TIMEOUT_MS)
        except PlaywrightTimeoutError:
            return False
        except PlaywrightError as exc:
            raise self._unresolvable(exc) from exc
        return True

    def is_visible_now(self) -> bool:
        """Instant observation with no waiting at all."""
        try:
            return self.locator.is_visible()
        except PlaywrightError as exc:
            raise self._unresolvable(exc) from exc

    def click(self, timeout_ms: int | None = None) -> None:
        timeout = self._timeout(timeout_ms)
        self.wait_visible(timeout)
        try:
            self.locator.click(timeout=timeout)
        except PlaywrightError as exc:
            raise InteractionError(
                f"Click on {self.name!r} failed after it became visible: {exc.message}"
            ) from exc
        LOGGER.debug("element_clicked", extra={"element": self.name})

    def fill(self, text: str, timeout_ms: int | None = None) -> None:
        """Replace the field's content with `text` and confirm the value stuck."""
        timeout = self._timeout(timeout_ms)
        self.wait_visible(timeout)
        try:
            self.locator.clear(timeout=timeout)
            self.locator.fill(text, timeout=timeout)
            actual = self.locator.input_value(timeout=timeout)
        except PlaywrightError as exc:
            raise InteractionError(
                f"Fill of {self.name!r} failed after it became visible: {exc.message}"
            ) from exc
        if actual != text:
            raise InteractionError(
                f"Fill of {self.name!r} left value {actual!r}, expected {text!r}"
            )

    def clear(self, timeout_ms: int | None = None) -> None:
        timeout = self._timeout(timeout_ms)
        self.wait_visible(timeout)
        try:
            self.locator.clear(timeout=timeout)
        except PlaywrightError as exc:
            raise InteractionError(f"Clear of {self.name!r} failed: {exc.message}") from exc

    def read_text(self, timeout_ms: int | None = None) -> str:
        self.wait_visible(timeout_ms)
        return self.locator.text_content() or ""

    def read_attribute(self, name: str, timeout_ms: int | None = None) -> str:
        self.wait_visible(timeout_ms)
        return self.locator.get_attribute(name) or ""

    def input_value(self, timeout_ms: int | None = None) -> str:
        self.wait_visible(timeout_ms)
        return self.locator.input_value()

    def is_checked(self, timeout_ms: int | None = None) -> bool:
        self.wait_visible(timeout_ms)
        return self.locator.is_checked()

    def is_enabled(self, timeout_ms: int | None = None) -> bool:
        self.wait_visible(timeout_ms)
        return self.locator.is_enabled()

    def scroll_into_view(self, timeout_ms: int | None = None) -> None:
        self.locator.scroll_into_view_if_needed(timeout=self._timeout(timeout_ms))
