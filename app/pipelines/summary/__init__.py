"""Audio summary pipeline package.

Modules are organised by the order in which `/api/summarize` executes:

1. `ingestion` – stage the upload and hand it to the provider.
2. `polling` – wait for the provider to finish processing the file.
3. `generation` – transcribe and summarize under a fixed schema.
4. `translation` – re-render a finished result in another language.

`orchestrator` ties the stages together and owns the `view_state`.
"""

from .catalog import list_structured_models
from .errors import (
    GenerationRejected,
    IngestionRejected,
    MalformedResponse,
    MediaProcessingFailed,
    ProcessingTimeout,
    SummaryPipelineError,
    TranslationFailed,
    UpstreamUnavailable,
)
from .flow import PipelineStage, SummaryPipeline
from .generation import generate_summary
from .ingestion import StagedUpload, ingest_media, resolve_content_type, stage_upload
from .orchestrator import SummaryOrchestrator
from .polling import wait_until_active
from .translation import translate_text
from .types import (
    GenerationRequest,
    GenerationResult,
    MediaAsset,
    MediaStatus,
    ModelDescriptor,
    TranslationResult,
    ViewResult,
)
from .view_state import ORIGINAL_LANGUAGE, ViewState, is_original_language

__all__ = [
    "SummaryOrchestrator",
    "SummaryPipeline",
    "PipelineStage",
    "ViewState",
    "ORIGINAL_LANGUAGE",
    "is_original_language",
    "StagedUpload",
    "stage_upload",
    "resolve_content_type",
    "ingest_media",
    "wait_until_active",
    "generate_summary",
    "translate_text",
    "list_structured_models",
    "GenerationRequest",
    "GenerationResult",
    "MediaAsset",
    "MediaStatus",
    "ModelDescriptor",
    "TranslationResult",
    "ViewResult",
    "SummaryPipelineError",
    "UpstreamUnavailable",
    "IngestionRejected",
    "MediaProcessingFailed",
    "ProcessingTimeout",
    "GenerationRejected",
    "MalformedResponse",
    "TranslationFailed",
]
