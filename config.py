"""Centralized runtime settings for pytest + Playwright execution.

This module resolves values from CLI options and environment variables, then
returns one immutable Settings object used across fixtures and hooks. Page
objects never read it; fixtures pass them what they need.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from projects import get_project

if TYPE_CHECKING:
    from pytest import Config

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_BROWSER = "chromium"
DEFAULT_VIEWPORT = "1280x720"
DEFAULT_ARTIFACTS_DIR = "reports"
DEFAULT_TIMEOUT_MS = 10_000
DEFAULT_NAVIGATION_TIMEOUT_MS = 30_000
DEFAULT_TRACE_MODE = "on-failure"
DEFAULT_VIDEO_MODE = "on-failure"
DEFAULT_SCREENSHOT_MODE = "on-failure"
DEFAULT_LOCALE = "en-US"
DEFAULT_TIMEZONE_ID = "America/New_York"
DEFAULT_LOG_LEVEL = "INFO"
MODE_CHOICES = {"on", "off", "on-failure"}
BROWSER_CHOICES = {"chromium", "firefox", "webkit"}
LOG_LEVEL_CHOICES = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class Settings:
    """Resolved framework settings shared by fixtures and reporting hooks."""

    base_url: str
    browser_name: str
    project: str | None
    headless: bool
    skip_warmup: bool
    start_local_server: bool
    slowmo_ms: int
    viewport_width: int
    viewport_height: int
    artifacts_dir: Path
    timeout_ms: int
    navigation_timeout_ms: int
    trace: str
    video: str
    screenshot: str
    locale: str
    timezone_id: str
    log_level: str

    @property
    def viewport(self) -> dict[str, int]:
        return {"width": self.viewport_width, "height": self.viewport_height}

    @property
    def headed(self) -> bool:
        return not self.headless

    @property
    def screenshots_dir(self) -> Path:
        return self.artifacts_dir / "screenshots"

    @property
    def project_label(self) -> str:
        return self.project or "default"


def _get_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def _parse_bool(value: str, *, name: str) -> bool:
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value!r}")


def _parse_int(value: str, *, name: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"Invalid integer for {name}: {value!r}") from exc
    if parsed < 0:
        raise ValueError(f"{name} must be >= 0, got {parsed}")
    return parsed


def parse_viewport(value: str) -> tuple[int, int]:
    """Parse a WIDTHxHEIGHT viewport string into integer dimensions."""

    normalized = value.lower().strip()
    width_str, sep, height_str = normalized.partition("x")
    if not sep:
        raise ValueError(f"Viewport must be WIDTHxHEIGHT, got {value!r}")
    width = _parse_int(width_str, name="viewport width")
    height = _parse_int(height_str, name="viewport height")
    if width == 0 or height == 0:
        raise ValueError(f"Viewport dimensions must be > 0, got {value!r}")
    return width, height


def _pick(cli_value, env_value, default_value):
    if cli_value is not None:
        return cli_value
    if env_value is not None:
        return env_value
    return default_value


def _pick_bool(cli_value: object, env_name: str, default: bool) -> bool:
    if isinstance(cli_value, bool):
        return cli_value
    env_value = _get_env(env_name)
    if env_value is not None:
        return _parse_bool(env_value, name=env_name)
    return default


def _pick_int(cli_value: object, env_name: str, default: int) -> int:
    raw = _pick(cli_value, _get_env(env_name), default)
    return raw if isinstance(raw, int) else _parse_int(str(raw), name=env_name)


def _build_settings_from_sources(*, cli: dict[str, object] | None) -> Settings:
    """Merge CLI/env/defaults with precedence CLI > env > defaults."""

    cli = cli or {}

    base_url = str(_pick(cli.get("base_url"), _get_env("BASE_URL"), DEFAULT_BASE_URL)).rstrip("/")

    project_raw = _pick(cli.get("project"), _get_env("PROJECT"), None)
    project = str(project_raw) if project_raw is not None else None
    if project is not None:
        # The project pins the engine; a separate browser choice would conflict.
        browser_name = get_project(project).browser_name
    else:
        browser_name = (
            str(_pick(cli.get("browser"), _get_env("BROWSER"), DEFAULT_BROWSER)).strip().lower()
        )
    if browser_name not in BROWSER_CHOICES:
        raise ValueError(
            f"Unsupported browser {browser_name!r}; expected one of {sorted(BROWSER_CHOICES)}"
        )

    headless = _pick_bool(cli.get("headless"), "HEADLESS", True)
    skip_warmup = _pick_bool(cli.get("skip_warmup"), "SKIP_WARMUP", False)
    # The bundled app is only a sensible default when no real deployment was named.
    start_local_server = _pick_bool(
        cli.get("start_local_server"),
        "START_LOCAL_SERVER",
        base_url == DEFAULT_BASE_URL,
    )

    slowmo_ms = _pick_int(cli.get("slowmo_ms"), "SLOWMO_MS", 0)

    viewport_raw = str(_pick(cli.get("viewport"), _get_env("VIEWPORT"), DEFAULT_VIEWPORT))
    viewport_width, viewport_height = parse_viewport(viewport_raw)

    artifacts_raw = str(
        _pick(cli.get("artifacts_dir"), _get_env("ARTIFACTS_DIR"), DEFAULT_ARTIFACTS_DIR)
    )
    artifacts_dir = Path(artifacts_raw)

    timeout_ms = _pick_int(cli.get("timeout_ms"), "TIMEOUT_MS", DEFAULT_TIMEOUT_MS)
    navigation_timeout_ms = _pick_int(
        cli.get("navigation_timeout_ms"),
        "NAVIGATION_TIMEOUT_MS",
        DEFAULT_NAVIGATION_TIMEOUT_MS,
    )

    trace = str(_pick(cli.get("trace"), _get_env("TRACE"), DEFAULT_TRACE_MODE)).lower()
    video = str(_pick(cli.get("video"), _get_env("VIDEO"), DEFAULT_VIDEO_MODE)).lower()
    screenshot = str(
        _pick(cli.get("screenshot"), _get_env("SCREENSHOT"), DEFAULT_SCREENSHOT_MODE)
    ).lower()
    for mode_name, mode_value in (("trace", trace), ("video", video), ("screenshot", screenshot)):
        if mode_value not in MODE_CHOICES:
            raise ValueError(
                f"Invalid {mode_name} mode {mode_value!r}; expected one of {sorted(MODE_CHOICES)}"
            )

    locale = str(_pick(cli.get("locale"), _get_env("LOCALE"), DEFAULT_LOCALE))
    timezone_id = str(_pick(cli.get("timezone_id"), _get_env("TIMEZONE_ID"), DEFAULT_TIMEZONE_ID))

    log_level = str(_pick(cli.get("log_level"), _get_env("LOG_LEVEL"), DEFAULT_LOG_LEVEL)).upper()
    if log_level not in LOG_LEVEL_CHOICES:
        raise ValueError(
            f"Invalid log level {log_level!r}; expected one of {sorted(LOG_LEVEL_CHOICES)}"
        )

    return Settings(
        base_url=base_url,
        browser_name=browser_name,
        project=project,
        headless=headless,
        skip_warmup=skip_warmup,
        start_local_server=start_local_server,
        slowmo_ms=slowmo_ms,
        viewport_width=viewport_width,
        viewport_height=viewport_height,
        artifacts_dir=artifacts_dir,
        timeout_ms=timeout_ms,
        navigation_timeout_ms=navigation_timeout_ms,
        trace=trace,
        video=video,
        screenshot=screenshot,
        locale=locale,
        timezone_id=timezone_id,
        log_level=log_level,
    )


def get_settings(pytest_config: Config | None = None) -> Settings:
    """Return the cached Settings for a pytest session, or an env/default-only copy."""

    if pytest_config is None:
        return _build_settings_from_sources(cli=None)

    # Cache on pytest config so hooks/fixtures share one consistent view of options.
    cached = getattr(pytest_config, "_qa_settings_cache", None)
    if cached is not None:
        return cached

    option_names = (
        "base_url",
        "browser",
        "project",
        "headless",
        "skip_warmup",
        "start_local_server",
        "slowmo_ms",
        "viewport",
        "artifacts_dir",
        "timeout_ms",
        "navigation_timeout_ms",
        "video",
        "screenshot",
        "locale",
        "timezone_id",
    )
    cli_values: dict[str, object] = {name: pytest_config.getoption(name) for name in option_names}
    cli_values["trace"] = pytest_config.getoption("pw_trace")
    # pytest owns --log-level and its dest, so JSON logs use a prefixed option.
    cli_values["log_level"] = pytest_config.getoption("qa_log_level")
    settings = _build_settings_from_sources(cli=cli_values)
    pytest_config._qa_settings_cache = settings  # type: ignore[attr-defined]
    return settings
