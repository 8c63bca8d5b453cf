"""Prometheus metrics definitions and helpers."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests processed",
    ("method", "route", "status"),
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ("method", "route"),
    buckets=(
        0.005,
        0.01,
        0.025,
        0.05,
        0.1,
        0.25,
        0.5,
        1.0,
        2.5,
        5.0,
        10.0,
        30.0,
        60.0,
        120.0,
    ),
)

ERROR_COUNTER = Counter(
    "app_internal_errors_total",
    "Number of requests ending in internal server error responses",
    ("method", "route"),
)

SUMMARY_COUNTER = Counter(
    "app_summary_workflows_total",
    "Summarize workflows by outcome (success or error kind)",
    ("outcome",),
)

TRANSLATION_COUNTER = Counter(
    "app_translation_workflows_total",
    "Translate workflows by outcome",
    ("outcome",),
)

POLL_ATTEMPTS = Histogram(
    "app_media_poll_attempts",
    "Status checks needed before uploaded media reached a terminal state",
    buckets=(1, 2, 3, 5, 10, 20, 50, 100, 150),
)


def observe_request(
    method: str,
    route: str,
    status_code: int,
    duration_seconds: float,
) -> None:
    """Record metrics for a completed HTTP request."""

    safe_route = route or "unknown"
    safe_method = method or "UNKNOWN"
    status_label = str(status_code)
    observed_duration = duration_seconds if duration_seconds >= 0 else 0

    REQUEST_COUNT.labels(
        method=safe_method,
        route=safe_route,
        status=status_label,
    ).inc()
    REQUEST_LATENCY.labels(
        method=safe_method,
        route=safe_route,
    ).observe(observed_duration)

    if status_code >= 500:
        ERROR_COUNTER.labels(
            method=safe_method,
            route=safe_route,
        ).inc()


def record_summary_outcome(outcome: str) -> None:
    SUMMARY_COUNTER.labels(outcome=outcome or "unknown").inc()


def record_translation_outcome(outcome: str) -> None:
    TRANSLATION_COUNTER.labels(outcome=outcome or "unknown").inc()


def observe_poll_attempts(attempts: int) -> None:
    POLL_ATTEMPTS.observe(max(attempts, 0))
