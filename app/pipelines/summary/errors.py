"""Error kinds raised by the summary pipeline stages.

Every stage failure surfaces as exactly one of these. The HTTP layer renders
them as ``{"error": message}`` using ``status_code``.
"""

from __future__ import annotations


class SummaryPipelineError(RuntimeError):
    """Base class for user-visible pipeline failures."""

    status_code: int = 500


class UpstreamUnavailable(SummaryPipelineError):
    """The provider could not be reached or refused service, or local staging failed."""

    status_code = 503


class IngestionRejected(SummaryPipelineError):
    """The upload was empty, not audio, or refused by the provider."""

    status_code = 400


class MediaProcessingFailed(SummaryPipelineError):
    """The provider reported a terminal FAILED state for the uploaded media."""

    status_code = 502


class ProcessingTimeout(SummaryPipelineError):
    """The media never became ACTIVE within the configured poll budget."""

    status_code = 504


class GenerationRejected(SummaryPipelineError):
    """The provider refused a generation request."""

    status_code = 502


class MalformedResponse(SummaryPipelineError):
    """The structured output did not match the expected schema."""

    status_code = 502


class TranslationFailed(SummaryPipelineError):
    """At least one field translation failed; no partial view is applied."""

    status_code = 502


__all__ = [
    "SummaryPipelineError",
    "UpstreamUnavailable",
    "IngestionRejected",
    "MediaProcessingFailed",
    "ProcessingTimeout",
    "GenerationRejected",
    "MalformedResponse",
    "TranslationFailed",
]
