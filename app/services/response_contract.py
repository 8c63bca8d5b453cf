"""Pydantic models for validating Gemini JSON responses.

Both the summary stage and the translation stage run through these schemas so
that downstream code receives normalized, type-safe objects instead of raw
dictionaries.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field


class SummaryResponse(BaseModel):
    transcript: str
    summary: str
    language: str

    model_config = ConfigDict(extra="ignore", strict=True)

    @classmethod
    def from_json(cls, payload: str) -> "SummaryResponse":
        return cls.model_validate(_load_json(payload))


class TranslationResponse(BaseModel):
    translated_text: str = Field(alias="translatedText")

    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)

    @classmethod
    def from_json(cls, payload: str) -> "TranslationResponse":
        return cls.model_validate(_load_json(payload))


def _load_json(payload: str) -> object:
    """Parse JSON mode output; decode errors surface as ``ValueError``."""

    return json.loads(_clean_json_payload(payload))


def _clean_json_payload(payload: str) -> str:
    """Strip Markdown code fences that some models wrap around JSON mode output."""
    if not payload:
        return ""

    cleaned = payload.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]

    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]

    return cleaned.strip()


__all__ = ["SummaryResponse", "TranslationResponse"]
