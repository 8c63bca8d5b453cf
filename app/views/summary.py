"""Schemas for model listing, rules and summarize responses."""

from pydantic import BaseModel


class ModelOption(BaseModel):
    id: str
    name: str
    description: str = ""


class RulesResponse(BaseModel):
    rules: str


class SummaryResponse(BaseModel):
    transcript: str
    summary: str
    language: str
