"""Audio summary endpoint.

For a stage-by-stage map see `app.pipelines.summary.flow.SummaryPipeline`.
The POST `/summarize` pipeline performs:

1. Content-type resolution and local staging of the uploaded recording.
2. Upload to the Gemini file API and polling until the file is ACTIVE.
3. One structured generation call returning transcript, summary and language.

The staged copy of the upload is removed on every exit path.
"""

import logging
from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile

from app.controllers.dependencies import OrchestratorDep
from app.pipelines.summary import IngestionRejected, SummaryPipeline
from app.views import ErrorResponse, SummaryResponse

router = APIRouter(tags=["summary"])

logger = logging.getLogger(__name__)

PIPELINE_STAGES = tuple(SummaryPipeline.describe())
"""Ordered pipeline metadata used for quick reference and debugging."""

_AUDIO_FILE_UPLOAD = File(None)
_RULES_FORM = Form("")
_MODEL_FORM = Form("")


_ERROR_RESPONSES = {
    status_code: {"model": ErrorResponse} for status_code in (400, 502, 503, 504)
}


@router.post("/summarize", response_model=SummaryResponse, responses=_ERROR_RESPONSES)
async def summarize_audio(
    orchestrator: OrchestratorDep,
    audio: Optional[UploadFile] = _AUDIO_FILE_UPLOAD,
    rules: str = _RULES_FORM,
    model: str = _MODEL_FORM,
) -> SummaryResponse:
    """Transcribe and summarize an uploaded recording according to ``rules``."""

    if audio is None:
        raise IngestionRejected("No audio file uploaded.")

    try:
        payload = await audio.read()
    finally:
        await audio.close()

    logger.info(
        "Summarize request file=%s type=%s bytes=%d model=%s",
        audio.filename,
        audio.content_type,
        len(payload),
        model or "<default>",
    )
    result = await orchestrator.summarize(
        payload,
        content_type=audio.content_type,
        filename=audio.filename,
        rules=rules,
        model_id=model,
    )
    return SummaryResponse(**result.as_payload())
