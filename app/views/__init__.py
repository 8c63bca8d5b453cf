"""Pydantic schemas used as views in the MVC architecture."""

from .common import ErrorResponse
from .summary import ModelOption, RulesResponse, SummaryResponse
from .translation import TranslateRequest, TranslateResponse

__all__ = [
    "ErrorResponse",
    "ModelOption",
    "RulesResponse",
    "SummaryResponse",
    "TranslateRequest",
    "TranslateResponse",
]
