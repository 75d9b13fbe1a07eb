"""Typed failures raised by page objects.

Timeouts, interaction failures and value mismatches each get their own class so
the runner's report shows which contract broke, not just that a test failed.
"""

from __future__ import annotations

from typing import Any


class PageObjectError(Exception):
    """Base class for every failure surfaced by the page-object layer."""


class WaitTimeoutError(PageObjectError):
    """A bounded wait expired before the expected UI condition held."""


class ElementNotFoundError(WaitTimeoutError):
    """A required element never became visible within its timeout."""


class ElementStillVisibleError(WaitTimeoutError):
    """An element stayed visible past the timeout while waiting for it to hide."""


class InteractionError(PageObjectError):
    """An action failed after its target was confirmed visible."""


class ValidationMismatchError(PageObjectError, AssertionError):
    """An observed value differs from the expected one."""

    def __init__(self, description: str, expected: Any, actual: Any) -> None:
        self.description = description
        self.expected = expected
        self.actual = actual
        super().__init__(f"{description}: expected {expected!r}, got {actual!r}")
