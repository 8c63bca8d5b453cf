"""Service layer helpers for external integrations."""

from .gemini_client import (
    GeminiClient,
    GeminiInvocationError,
    get_gemini_client,
    mask_api_key,
)
from .response_contract import SummaryResponse, TranslationResponse
from .rules import load_default_rules

__all__ = [
    "GeminiClient",
    "GeminiInvocationError",
    "get_gemini_client",
    "mask_api_key",
    "SummaryResponse",
    "TranslationResponse",
    "load_default_rules",
]
