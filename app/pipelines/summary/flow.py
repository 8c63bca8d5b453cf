"""High-level orchestration map for the summary pipeline.

``SummaryOrchestrator`` in ``orchestrator.py`` contains the asynchronous
choreography; this module documents the canonical execution order so team
members can navigate the codebase more easily:

1. ``ingestion`` – validate the upload, stage it on disk, hand it to Gemini.
2. ``polling`` – wait until the uploaded file becomes ACTIVE.
3. ``generation`` – one structured call returning transcript, summary, language.
4. ``translation`` – optional, two concurrent calls re-rendering the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class PipelineStage:
    """Human-readable description of one stage in the summary pipeline."""

    order: int
    name: str
    module: str
    summary: str


class SummaryPipeline:
    """Utility wrapper for documenting the `/api/summarize` and `/api/translate` flows."""

    _STAGES: List[PipelineStage] = [
        PipelineStage(
            1,
            "Ingestion",
            "app.pipelines.summary.ingestion",
            "Resolve the content type, stage the upload locally, upload it to the Gemini file API.",
        ),
        PipelineStage(
            2,
            "Readiness Polling",
            "app.pipelines.summary.polling",
            "Query the file state every poll interval until ACTIVE, FAILED or the attempt budget runs out.",
        ),
        PipelineStage(
            3,
            "Structured Generation",
            "app.pipelines.summary.generation",
            "Ask for transcript, summary and language under a fixed JSON schema and validate it.",
        ),
        PipelineStage(
            4,
            "Translation",
            "app.pipelines.summary.translation",
            "Translate transcript and summary concurrently; apply both or neither to the view.",
        ),
    ]

    @classmethod
    def describe(cls) -> Iterable[PipelineStage]:
        """Expose the ordered list of stages for debugging and documentation."""

        return tuple(cls._STAGES)


__all__ = ["SummaryPipeline", "PipelineStage"]
