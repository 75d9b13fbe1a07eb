"""Static accounts, messages, paths and timeouts shared by page objects and tests.

Messages must match what the application renders verbatim; page objects
compare with substring checks.
"""

from __future__ import annotations

from testdata.models import TestUser, UserCredentials, UserRole

SHORT_TIMEOUT_MS = 5_000
MEDIUM_TIMEOUT_MS = 10_000
LONG_TIMEOUT_MS = 30_000

HOME_PATH = "/"
LOGIN_PATH = "/login"
LOGOUT_PATH = "/logout"
SIGNUP_PATH = "/signup"
FORGOT_PASSWORD_PATH = "/forgot-password"
DASHBOARD_PATH = "/dashboard"
PROFILE_PATH = "/profile"
SETTINGS_PATH = "/settings"
ADMIN_PATH = "/admin"
USER_MANAGEMENT_PATH = "/admin/users"

PUBLIC_PATHS = (HOME_PATH, LOGIN_PATH, SIGNUP_PATH, FORGOT_PASSWORD_PATH)
PROTECTED_PATHS = (DASHBOARD_PATH, PROFILE_PATH, SETTINGS_PATH)

LOGIN_PAGE_TITLE = "Login - Playwright Basic"
DASHBOARD_PAGE_TITLE = "Dashboard - Playwright Basic"

STANDARD_USER = TestUser(
    id="user-001",
    email="test@example.com",
    password="ValidPassword123!",
    name="Test User",
    role=UserRole.USER,
    is_active=True,
)
ADMIN_USER = TestUser(
    id="admin-001",
    email="admin@example.com",
    password="AdminPassword123!",
    name="Admin User",
    role=UserRole.ADMIN,
    is_active=True,
)
INACTIVE_USER = TestUser(
    id="user-inactive",
    email="inactive@example.com",
    password="InactiveUser123!",
    name="Inactive User",
    role=UserRole.USER,
    is_active=False,
)

VALID_USERS: dict[str, TestUser] = {
    "STANDARD_USER": STANDARD_USER,
    "ADMIN_USER": ADMIN_USER,
    "INACTIVE_USER": INACTIVE_USER,
}

INVALID_CREDENTIALS: dict[str, UserCredentials] = {
    "WRONG_EMAIL": UserCredentials("wrong@example.com", "ValidPassword123!"),
    "WRONG_PASSWORD": UserCredentials("test@example.com", "WrongPassword123!"),
    "EMPTY_EMAIL": UserCredentials("", "ValidPassword123!"),
    "EMPTY_PASSWORD": UserCredentials("test@example.com", ""),
    "EMPTY_BOTH": UserCredentials("", ""),
    "INVALID_EMAIL_FORMAT": UserCredentials("invalid-email", "ValidPassword123!"),
}

ERROR_MESSAGES = {
    "INVALID_CREDENTIALS": "Invalid email or password",
    "EMAIL_REQUIRED": "Email is required",
    "PASSWORD_REQUIRED": "Password is required",
    "INVALID_EMAIL_FORMAT": "Please enter a valid email address",
    "ACCOUNT_LOCKED": "Account has been locked due to multiple failed login attempts",
    "ACCOUNT_INACTIVE": "Account is inactive. Please contact support.",
    "SESSION_EXPIRED": "Your session has expired. Please log in again.",
    "NETWORK_ERROR": "Network error. Please try again.",
    "SERVER_ERROR": "Server error. Please try again later.",
}

SUCCESS_MESSAGES = {
    "LOGIN_SUCCESS": "Login successful",
    "LOGOUT_SUCCESS": "You have been logged out successfully",
    "PASSWORD_RESET_SENT": "Password reset link has been sent to your email",
}
