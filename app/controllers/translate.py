"""Text translation endpoint."""

import logging

from fastapi import APIRouter, HTTPException, status

from app.config.settings import settings
from app.controllers.dependencies import GeminiClientDep
from app.pipelines.summary import translate_text
from app.views import ErrorResponse, TranslateRequest, TranslateResponse

router = APIRouter(tags=["translation"])

logger = logging.getLogger(__name__)


@router.post(
    "/translate",
    response_model=TranslateResponse,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def translate(request: TranslateRequest, client: GeminiClientDep) -> TranslateResponse:
    """Translate one piece of text; callers translate transcript and summary separately."""

    text = request.text or ""
    target_language = (request.target_language or "").strip()
    if not text.strip() or not target_language:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Text and targetLanguage are required.",
        )

    model_id = (request.model or "").strip() or settings.gemini.default_model
    logger.info("Translate request target=%s chars=%d model=%s", target_language, len(text), model_id)
    result = await translate_text(client, text, target_language, model_id)
    return TranslateResponse(translated_text=result.translated_text)
