"""Telemetry helpers and metrics."""

from .metrics import (
    ERROR_COUNTER,
    POLL_ATTEMPTS,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    SUMMARY_COUNTER,
    TRANSLATION_COUNTER,
    observe_poll_attempts,
    observe_request,
    record_summary_outcome,
    record_translation_outcome,
)

__all__ = [
    "ERROR_COUNTER",
    "POLL_ATTEMPTS",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "SUMMARY_COUNTER",
    "TRANSLATION_COUNTER",
    "observe_poll_attempts",
    "observe_request",
    "record_summary_outcome",
    "record_translation_outcome",
]
