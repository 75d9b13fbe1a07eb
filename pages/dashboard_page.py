"""Dashboard page object: post-login observations and the sign-out flow."""

from __future__ import annotations

import logging
from pathlib import Path

from playwright.sync_api import Page, expect

from pages.base_page import SCREENSHOTS_DIR, BasePage
from pages.element import DEFAULT_TIMEOUT_MS, Element
from pages.errors import ElementNotFoundError, ValidationMismatchError
from testdata.constants import (
    DASHBOARD_PAGE_TITLE,
    DASHBOARD_PATH,
    MEDIUM_TIMEOUT_MS,
    SHORT_TIMEOUT_MS,
)

LOGGER = logging.getLogger("qa.pages")


class DashboardPage:
    """Page object for the authenticated landing screen."""

    PATH = DASHBOARD_PATH

    DASHBOARD_HEADER = "dashboard-header"
    USER_PROFILE = "user-profile"
    LOGOUT_BUTTON = "logout-button"
    WELCOME_MESSAGE = "welcome-message"
    NAVIGATION_MENU = "navigation-menu"
    PROFILE_DROPDOWN = "profile-dropdown"
    USER_NAME_DISPLAY = "user-name-display"
    USER_EMAIL_DISPLAY = "user-email-display"
    SETTINGS_LINK = "settings-link"
    PROFILE_LINK = "profile-link"
    ADMIN_PANEL = "admin-panel"
    USER_MANAGEMENT_LINK = "user-management-link"
    LOADING_INDICATOR = "loading-indicator"

    def __init__(
        self,
        page: Page,
        base_url: str,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        screenshots_dir: Path = SCREENSHOTS_DIR,
    ) -> None:
        self.page = page
        self.base = BasePage(page, base_url, timeout_ms=timeout_ms, screenshots_dir=screenshots_dir)
        self.dashboard_header = self.base.element(self.DASHBOARD_HEADER)
        self.user_profile = self.base.element(self.USER_PROFILE)
        self.logout_button = self.base.element(self.LOGOUT_BUTTON)
        self.welcome_message = self.base.element(self.WELCOME_MESSAGE)
        self.navigation_menu = self.base.element(self.NAVIGATION_MENU)
        self.profile_dropdown = self.base.element(self.PROFILE_DROPDOWN)
        self.user_name_display = self.base.element(self.USER_NAME_DISPLAY)
        self.user_email_display = self.base.element(self.USER_EMAIL_DISPLAY)
        self.settings_link = self.base.element(self.SETTINGS_LINK)
        self.profile_link = self.base.element(self.PROFILE_LINK)
        self.admin_panel = self.base.element(self.ADMIN_PANEL)
        self.user_management_link = self.base.element(self.USER_MANAGEMENT_LINK)
        self.loading_indicator = self.base.element(self.LOADING_INDICATOR)

    def navigate_to_dashboard(self, base_url: str | None = None) -> None:
        self.base.navigate_to(self.base.url_for(self.PATH, base_url))
        self.base.wait_for_page_load()
        self.validate_dashboard_is_loaded()

    def validate_dashboard_is_loaded(self) -> None:
        self.dashboard_header.wait_visible(MEDIUM_TIMEOUT_MS)

    def validate_successful_login(self) -> None:
        self.validate_dashboard_is_loaded()
        expect(self.user_profile.locator).to_be_visible(timeout=self.base.timeout_ms)
        self.validate_dashboard_url()

    def validate_dashboard_page_title(self) -> None:
        self.base.validate_page_title(DASHBOARD_PAGE_TITLE)

    def validate_dashboard_url(self) -> None:
        self.base.validate_url_contains(DASHBOARD_PATH)

    def validate_welcome_message(self, expected_name: str | None = None) -> None:
        self.welcome_message.wait_visible(MEDIUM_TIMEOUT_MS)
        if expected_name:
            actual = self.welcome_message.read_text()
            if expected_name not in actual:
                raise ValidationMismatchError(
                    "Welcome message does not name the user", expected=expected_name, actual=actual
                )

    def _check_optional_display(self, display: Element, label: str, expected: str | None) -> None:
        # Missing display elements are tolerated; wrong content is not.
        if not expected or not display.is_visible():
            return
        actual = display.read_text()
        if expected not in actual:
            raise ValidationMismatchError(f"Displayed {label} mismatch", expected=expected, actual=actual)

    def validate_user_profile_info(
        self,
        expected_email: str | None = None,
        expected_name: str | None = None,
    ) -> None:
        self.user_profile.wait_visible(MEDIUM_TIMEOUT_MS)
        self._check_optional_display(self.user_email_display, "email", expected_email)
        self._check_optional_display(self.user_name_display, "name", expected_name)

    def open_profile_dropdown(self) -> None:
        self.profile_dropdown.click()
        self.logout_button.wait_visible(SHORT_TIMEOUT_MS)

    def _reveal(self, control: Element) -> None:
        if not control.is_visible():
            self.open_profile_dropdown()

    def click_logout(self) -> None:
        self._reveal(self.logout_button)
        self.logout_button.click()

    def logout(self) -> None:
        """Sign out and wait until the location has left the dashboard path."""
        self.click_logout()
        self.base.wait_until_path_excludes(DASHBOARD_PATH, MEDIUM_TIMEOUT_MS)
        LOGGER.info("logged_out", extra={"url": self.page.url})

    def navigate_to_profile(self) -> None:
        self._reveal(self.profile_link)
        self.profile_link.click()
        self.base.wait_for_page_load()

    def navigate_to_settings(self) -> None:
        self._reveal(self.settings_link)
        self.settings_link.click()
        self.base.wait_for_page_load()

    def validate_navigation_menu(self) -> None:
        self.navigation_menu.wait_visible(MEDIUM_TIMEOUT_MS)

    def validate_dashboard_elements(self) -> None:
        for element in (self.dashboard_header, self.user_profile, self.navigation_menu):
            expect(element.locator).to_be_visible(timeout=self.base.timeout_ms)

    def is_user_logged_in(self) -> bool:
        try:
            self.validate_dashboard_is_loaded()
        except ElementNotFoundError:
            return False
        return True

    def get_displayed_user_name(self) -> str:
        return self.user_name_display.read_text() if self.user_name_display.is_visible() else ""

    def get_displayed_user_email(self) -> str:
        return self.user_email_display.read_text() if self.user_email_display.is_visible() else ""

    def validate_admin_elements(self) -> None:
        # Soft on purpose: admin decorations can sit behind feature flags, so
        # only controls that are already showing get checked.
        for control in (self.admin_panel, self.user_management_link):
            if control.is_visible():
                expect(control.locator).to_be_visible(timeout=self.base.timeout_ms)

    def validate_standard_user_elements(self) -> None:
        # Hard on purpose: privileged UI shown to a non-admin is a leak.
        for control in (self.admin_panel, self.user_management_link):
            if control.is_visible():
                raise ValidationMismatchError(
                    "Admin-only control visible to a standard user",
                    expected=f"{control.name} hidden",
                    actual=f"{control.name} visible",
                )

    def wait_for_dashboard_to_load(self) -> None:
        self.base.wait_for_page_load()
        self.validate_dashboard_is_loaded()
        if self.loading_indicator.is_visible():
            self.loading_indicator.wait_hidden(MEDIUM_TIMEOUT_MS)

    def validate_logout_success(self) -> None:
        self.base.wait_until_path_excludes(DASHBOARD_PATH, MEDIUM_TIMEOUT_MS)
        if DASHBOARD_PATH in self.base.current_url:
            raise ValidationMismatchError(
                "Still on the dashboard after logout",
                expected=f"URL without {DASHBOARD_PATH!r}",
                actual=self.base.current_url,
            )
