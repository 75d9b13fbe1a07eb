"""Prometheus textfile metrics export for login suite session summaries.

The writer builds a fresh registry per write so repeated local runs in the same
Python process never share metric state. Every gauge carries browser and
project labels so runs across the browser matrix can share one collector
directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from prometheus_client import CollectorRegistry, Gauge, generate_latest

METRIC_LABELS = ("browser", "project")


@dataclass(frozen=True)
class SessionMetrics:
    """Aggregate session counters exported at pytest session finish."""

    total: int
    passed: int
    failed: int
    skipped: int
    duration_seconds: float
    flaky: int = 0
    browser: str = "chromium"
    project: str = "default"


def build_registry(summary: SessionMetrics) -> CollectorRegistry:
    registry = CollectorRegistry()
    values = {
        "login_ui_tests_total": ("Total tests collected", summary.total),
        "login_ui_tests_passed": ("Passed tests", summary.passed),
        "login_ui_tests_failed": ("Failed tests", summary.failed),
        "login_ui_tests_skipped": ("Skipped tests", summary.skipped),
        "login_ui_tests_flaky": ("Tests that required reruns", summary.flaky),
        "login_ui_session_duration_seconds": (
            "Total pytest session duration in seconds",
            summary.duration_seconds,
        ),
    }
    for name, (description, value) in values.items():
        gauge = Gauge(name, description, labelnames=METRIC_LABELS, registry=registry)
        gauge.labels(browser=summary.browser, project=summary.project).set(value)
    return registry


def write_metrics(path: str | Path, summary: SessionMetrics) -> None:
    """Write metrics atomically to the Prometheus textfile collector path."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    # Write-then-rename avoids partially written files being scraped by Prometheus.
    tmp_path = target.with_suffix(f"{target.suffix}.tmp")
    tmp_path.write_bytes(generate_latest(build_registry(summary)))
    tmp_path.replace(target)
