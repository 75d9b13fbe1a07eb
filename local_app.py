"""Serve the bundled demo login app through Playwright request routing.

With START_LOCAL_SERVER on, every request a context makes under the base URL
is answered from `demo_app/` instead of the network, so the suite runs without
a deployed application.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from urllib.parse import urlsplit

from playwright.sync_api import BrowserContext, Route

APP_DIR = Path(__file__).parent / "demo_app"

PAGE_ROUTES = {
    "/": "index.html",
    "/login": "login.html",
    "/signup": "signup.html",
    "/forgot-password": "forgot-password.html",
    "/dashboard": "dashboard.html",
    "/profile": "profile.html",
    "/settings": "settings.html",
}

LOGGER = logging.getLogger("qa")


def resolve_asset(path: str) -> Path | None:
    """Map a request path onto a file inside APP_DIR, or None when there is none."""

    normalized = path.rstrip("/") or "/"
    name = PAGE_ROUTES.get(normalized, normalized.lstrip("/"))
    root = APP_DIR.resolve()
    candidate = (root / name).resolve()
    # Reject anything that escapes the app directory.
    if root not in candidate.parents:
        return None
    return candidate if candidate.is_file() else None


def _url_pattern(base_url: str) -> re.Pattern[str]:
    return re.compile("^" + re.escape(base_url.rstrip("/")) + r"(/.*)?$")


def install_local_app(context: BrowserContext, base_url: str) -> None:
    """Answer requests under base_url from the bundled app for this context."""

    def handle(route: Route) -> None:
        path = urlsplit(route.request.url).path
        asset = resolve_asset(path)
        if asset is None:
            LOGGER.debug("local_app_not_found", extra={"path": path})
            route.fulfill(status=404, content_type="text/plain", body="Not found")
            return
        route.fulfill(status=200, path=asset)

    context.route(_url_pattern(base_url), handle)
    LOGGER.info("local_app_installed", extra={"base_url": base_url, "app_dir": str(APP_DIR)})
