"""Structured generation (Stage 03 of the summary pipeline)."""

from __future__ import annotations

import logging

from google.genai import types

from app.services.gemini_client import GeminiClient, GeminiInvocationError
from app.services.response_contract import SummaryResponse

from .errors import GenerationRejected, MalformedResponse
from .prompts import SUMMARY_SCHEMA, build_summary_prompt
from .types import GenerationRequest, GenerationResult

logger = logging.getLogger("app.pipelines.summary")


def _truncate(value: str, max_length: int = 500) -> str:
    if len(value) <= max_length:
        return value
    return value[: max_length - 3] + "..."


async def generate_summary(client: GeminiClient, request: GenerationRequest) -> GenerationResult:
    """Ask the model for transcript, summary and language in one structured call."""

    parts = [
        types.Part.from_uri(file_uri=request.media.uri, mime_type=request.media.mime_type),
        types.Part.from_text(text=build_summary_prompt(request.rules)),
    ]

    try:
        raw_response = await client.generate_content(
            model=request.model_id,
            parts=parts,
            response_schema=SUMMARY_SCHEMA,
        )
    except GeminiInvocationError as exc:
        raise GenerationRejected(f"Generation failed: {exc}") from exc

    logger.info("Raw summary response model=%s: %s", request.model_id, _truncate(raw_response))
    if not raw_response:
        raise MalformedResponse("The model returned an empty response.")

    try:
        parsed = SummaryResponse.from_json(raw_response)
    except ValueError as exc:
        logger.warning("Summary response failed validation model=%s: %s", request.model_id, exc)
        raise MalformedResponse("The model returned a response that does not match the summary schema.") from exc

    return GenerationResult(
        transcript=parsed.transcript,
        summary=parsed.summary,
        language=parsed.language,
    )


__all__ = ["generate_summary"]
