"""Schemas for the translate endpoint."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TranslateRequest(BaseModel):
    text: Optional[str] = None
    target_language: Optional[str] = Field(default=None, alias="targetLanguage")
    model: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class TranslateResponse(BaseModel):
    translated_text: str = Field(serialization_alias="translatedText")
