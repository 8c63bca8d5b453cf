"""Single-text translation call used by the translate workflow."""

from __future__ import annotations

import logging

from google.genai import types

from app.services.gemini_client import GeminiClient, GeminiInvocationError
from app.services.response_contract import TranslationResponse

from .errors import GenerationRejected, MalformedResponse
from .prompts import TRANSLATION_SCHEMA, build_translation_prompt
from .types import TranslationResult

logger = logging.getLogger("app.pipelines.summary")


async def translate_text(
    client: GeminiClient,
    text: str,
    target_language: str,
    model_id: str,
) -> TranslationResult:
    """Translate ``text`` into ``target_language``. Has no local side effects."""

    if not text or not text.strip():
        raise ValueError("Text to translate must not be empty")
    if not target_language or not target_language.strip():
        raise ValueError("Target language must not be empty")

    prompt = build_translation_prompt(text, target_language.strip())
    try:
        raw_response = await client.generate_content(
            model=model_id,
            parts=[types.Part.from_text(text=prompt)],
            response_schema=TRANSLATION_SCHEMA,
        )
    except GeminiInvocationError as exc:
        raise GenerationRejected(f"Translation failed: {exc}") from exc

    if not raw_response:
        raise MalformedResponse("The model returned an empty translation.")

    try:
        parsed = TranslationResponse.from_json(raw_response)
    except ValueError as exc:
        logger.warning("Translation response failed validation target=%s: %s", target_language, exc)
        raise MalformedResponse("The model returned a response without 'translatedText'.") from exc

    return TranslationResult(translated_text=parsed.translated_text)


__all__ = ["translate_text"]
