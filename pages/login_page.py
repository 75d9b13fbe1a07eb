"""Login screen page object.

Selectors and wait/assert behavior live here so tests read as intent-focused
scenarios. The form moves through the states in `LoginFormState`; the page
object never stores that state, `form_state()` re-observes it on every call.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from urllib.parse import urlsplit

from playwright.sync_api import Page, expect

from pages.base_page import SCREENSHOTS_DIR, BasePage
from pages.element import DEFAULT_TIMEOUT_MS, Element
from pages.errors import ElementNotFoundError, ValidationMismatchError
from testdata.constants import (
    ERROR_MESSAGES,
    LOGIN_PAGE_TITLE,
    LOGIN_PATH,
    MEDIUM_TIMEOUT_MS,
    SHORT_TIMEOUT_MS,
)
from testdata.models import UserCredentials

LOGGER = logging.getLogger("qa.pages")


class LoginFormState(Enum):
    UNFILLED = "unfilled"
    PARTIALLY_FILLED = "partially_filled"
    FILLED = "filled"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    ERROR_SHOWN = "error_shown"
    VALIDATION_ERROR_SHOWN = "validation_error_shown"


class LoginPage:
    """Page object for credential entry, submission and validation feedback."""

    PATH = LOGIN_PATH

    LOGIN_FORM = "login-form"
    EMAIL_INPUT = "email-input"
    PASSWORD_INPUT = "password-input"
    LOGIN_BUTTON = "login-button"
    REMEMBER_ME_CHECKBOX = "remember-me-checkbox"
    FORGOT_PASSWORD_LINK = "forgot-password-link"
    SIGNUP_LINK = "signup-link"
    ERROR_MESSAGE = "error-message"
    LOADING_SPINNER = "loading-spinner"
    SHOW_PASSWORD_TOGGLE = "show-password-toggle"
    EMAIL_VALIDATION = "email-validation"
    PASSWORD_VALIDATION = "password-validation"

    def __init__(
        self,
        page: Page,
        base_url: str,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        screenshots_dir: Path = SCREENSHOTS_DIR,
    ) -> None:
        self.page = page
        self.base = BasePage(page, base_url, timeout_ms=timeout_ms, screenshots_dir=screenshots_dir)
        self.login_form = self.base.element(self.LOGIN_FORM)
        self.email_input = self.base.element(self.EMAIL_INPUT)
        self.password_input = self.base.element(self.PASSWORD_INPUT)
        self.login_button = self.base.element(self.LOGIN_BUTTON)
        self.remember_me_checkbox = self.base.element(self.REMEMBER_ME_CHECKBOX)
        self.forgot_password_link = self.base.element(self.FORGOT_PASSWORD_LINK)
        self.signup_link = self.base.element(self.SIGNUP_LINK)
        self.error_message = self.base.element(self.ERROR_MESSAGE)
        self.loading_spinner = self.base.element(self.LOADING_SPINNER)
        self.show_password_toggle = self.base.element(self.SHOW_PASSWORD_TOGGLE)
        self.email_validation = self.base.element(self.EMAIL_VALIDATION)
        self.password_validation = self.base.element(self.PASSWORD_VALIDATION)

    def navigate_to_login(self, base_url: str | None = None) -> None:
        """Open the login screen; nothing else on this page is valid until this passes."""
        self.base.navigate_to(self.base.url_for(self.PATH, base_url))
        self.base.wait_for_page_load()
        self.validate_login_form_is_visible()

    def enter_email(self, email: str) -> None:
        self.email_input.fill(email)

    def enter_password(self, password: str) -> None:
        self.password_input.fill(password)

    def click_login_button(self) -> None:
        self.login_button.click()

    def set_remember_me(self, checked: bool) -> None:
        """Converge the checkbox on `checked`; clicking only when it differs."""
        if self.remember_me_checkbox.is_checked() != checked:
            self.remember_me_checkbox.click()

    def login(self, credentials: UserCredentials) -> None:
        self.enter_email(credentials.email)
        self.enter_password(credentials.password)
        if credentials.remember_me:
            self.set_remember_me(True)
        self.click_login_button()
        LOGGER.info(
            "login_submitted",
            extra={"email": credentials.email, "remember_me": credentials.remember_me},
        )

    def quick_login(self, email: str, password: str, remember_me: bool = False) -> None:
        self.login(UserCredentials(email=email, password=password, remember_me=remember_me))

    def clear_form(self) -> None:
        """Reset to the unfilled state: both fields empty, remember-me unchecked."""
        self.email_input.clear()
        self.password_input.clear()
        if self.remember_me_checkbox.is_checked():
            self.set_remember_me(False)

    def click_forgot_password(self) -> None:
        self.forgot_password_link.click()

    def click_signup_link(self) -> None:
        self.signup_link.click()

    def toggle_password_visibility(self) -> None:
        # Some deployments hide the toggle; its absence is not a failure.
        if self.show_password_toggle.is_visible():
            self.show_password_toggle.click()

    def password_field_type(self) -> str:
        return self.password_input.read_attribute("type")

    def get_email_value(self) -> str:
        return self.email_input.input_value()

    def get_password_value(self) -> str:
        return self.password_input.input_value()

    def is_remember_me_checked(self) -> bool:
        return self.remember_me_checkbox.is_checked()

    def form_state(self) -> LoginFormState:
        """Observe which state the live form is in right now."""
        if LOGIN_PATH not in urlsplit(self.page.url).path:
            return LoginFormState.SUCCEEDED
        if self.loading_spinner.is_visible_now():
            return LoginFormState.SUBMITTING
        if self.error_message.is_visible_now():
            return LoginFormState.ERROR_SHOWN
        if self.email_validation.is_visible_now() or self.password_validation.is_visible_now():
            return LoginFormState.VALIDATION_ERROR_SHOWN
        filled = [bool(self.get_email_value()), bool(self.get_password_value())]
        if all(filled):
            return LoginFormState.FILLED
        if any(filled):
            return LoginFormState.PARTIALLY_FILLED
        return LoginFormState.UNFILLED

    def validate_login_form_is_visible(self) -> None:
        self.login_form.wait_visible()
        expect(self.email_input.locator).to_be_visible(timeout=self.base.timeout_ms)
        expect(self.password_input.locator).to_be_visible(timeout=self.base.timeout_ms)
        expect(self.login_button.locator).to_be_visible(timeout=self.base.timeout_ms)

    def validate_form_elements(self) -> None:
        for element in (
            self.email_input,
            self.password_input,
            self.login_button,
            self.remember_me_checkbox,
            self.forgot_password_link,
            self.signup_link,
        ):
            expect(element.locator).to_be_visible(timeout=self.base.timeout_ms)

    def validate_login_button_state(self, enabled: bool) -> None:
        if enabled:
            expect(self.login_button.locator).to_be_enabled(timeout=self.base.timeout_ms)
        else:
            expect(self.login_button.locator).to_be_disabled(timeout=self.base.timeout_ms)

    def validate_error_message(self, expected: str) -> None:
        self.error_message.wait_visible(MEDIUM_TIMEOUT_MS)
        actual = self.error_message.read_text()
        if expected not in actual:
            raise ValidationMismatchError("Error banner text mismatch", expected=expected, actual=actual)

    def validate_no_error_message(self) -> None:
        if self.error_message.is_visible():
            raise ValidationMismatchError(
                "Unexpected error banner",
                expected="no error message",
                actual=self.error_message.read_text(),
            )

    def validate_loading_spinner(self) -> None:
        self.loading_spinner.wait_visible(SHORT_TIMEOUT_MS)

    def wait_for_loading_to_complete(self) -> None:
        """Wait for the spinner to come and go; if it never shows, loading already finished.

        A spinner that appears but never hides raises ElementStillVisibleError.
        """
        try:
            self.loading_spinner.wait_visible(SHORT_TIMEOUT_MS)
        except ElementNotFoundError:
            LOGGER.debug("loading_spinner_not_observed")
            return
        self.loading_spinner.wait_hidden(MEDIUM_TIMEOUT_MS)

    def _validate_field_hint(self, hint: Element, field: str, expected: str | None) -> None:
        if expected is None:
            if hint.is_visible():
                raise ValidationMismatchError(
                    f"Unexpected {field} validation hint",
                    expected="no hint",
                    actual=hint.read_text(),
                )
            return
        hint.wait_visible(MEDIUM_TIMEOUT_MS)
        actual = hint.read_text()
        if expected not in actual:
            raise ValidationMismatchError(f"{field} validation hint mismatch", expected=expected, actual=actual)

    def validate_email_validation(self, expected: str | None = None) -> None:
        self._validate_field_hint(self.email_validation, "Email", expected)

    def validate_password_validation(self, expected: str | None = None) -> None:
        self._validate_field_hint(self.password_validation, "Password", expected)

    def validate_login_page_title(self) -> None:
        self.base.validate_page_title(LOGIN_PAGE_TITLE)

    def validate_login_page_url(self) -> None:
        self.base.validate_url_contains(LOGIN_PATH)

    def attempt_login(self, credentials: UserCredentials, expect_success: bool = True) -> None:
        """Submit and confirm the outcome.

        Success means the location left the login path; the destination itself
        is not checked. Failure means the standard invalid-credentials banner.
        """
        self.login(credentials)
        if expect_success:
            self.wait_for_loading_to_complete()
            self.base.wait_until_path_excludes(LOGIN_PATH, MEDIUM_TIMEOUT_MS)
        else:
            self.validate_error_message(ERROR_MESSAGES["INVALID_CREDENTIALS"])
