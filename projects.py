"""Named browser/device projects the suite can run under.

A project pins the browser engine and, optionally, a Playwright device
descriptor and viewport. `resolve_context_options` turns one into the kwargs for
`Browser.new_context`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from config import Settings

ACCEPT_LANGUAGE = "en-US,en;q=0.9"


@dataclass(frozen=True)
class BrowserProject:
    name: str
    browser_name: str
    device: str | None = None
    viewport: tuple[int, int] | None = None
    channel: str | None = None


PROJECTS: dict[str, BrowserProject] = {
    project.name: project
    for project in (
        BrowserProject("chromium-desktop", "chromium", "Desktop Chrome", (1280, 720)),
        BrowserProject("firefox-desktop", "firefox", "Desktop Firefox", (1280, 720)),
        BrowserProject("webkit-desktop", "webkit", "Desktop Safari", (1280, 720)),
        BrowserProject("mobile-chrome", "chromium", "Pixel 5"),
        BrowserProject("mobile-safari", "webkit", "iPhone 12"),
        BrowserProject("tablet-chrome", "chromium", "iPad Pro 11"),
        BrowserProject("edge-desktop", "chromium", "Desktop Edge", (1280, 720), channel="msedge"),
        BrowserProject("chrome-high-dpi", "chromium", "Desktop Chrome HiDPI", (1920, 1080)),
    )
}


def get_project(name: str) -> BrowserProject:
    try:
        return PROJECTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown project {name!r}; expected one of {sorted(PROJECTS)}"
        ) from None


def resolve_context_options(
    settings: Settings,
    devices: Mapping[str, Mapping[str, Any]],
) -> dict[str, Any]:
    """Build new_context kwargs: device descriptor, then project viewport, then settings."""

    options: dict[str, Any] = {"viewport": settings.viewport}
    project = get_project(settings.project) if settings.project else None
    if project is not None and project.device:
        descriptor = dict(devices[project.device])
        # Launch-level key; new_context rejects it.
        descriptor.pop("default_browser_type", None)
        options.update(descriptor)
    if project is not None and project.viewport:
        width, height = project.viewport
        options["viewport"] = {"width": width, "height": height}

    options.update(
        {
            "locale": settings.locale,
            "timezone_id": settings.timezone_id,
            "ignore_https_errors": True,
            "extra_http_headers": {"Accept-Language": ACCEPT_LANGUAGE},
        }
    )
    return options
