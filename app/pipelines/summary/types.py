"""Typed containers shared across the summary pipeline.

These dataclasses live in their own module so the stages (`ingestion`,
`polling`, `generation`, `translation`) and the orchestrator can import them
without creating circular dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class MediaStatus(str, Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    ACTIVE = "ACTIVE"
    FAILED = "FAILED"

    @classmethod
    def from_provider(cls, state: Any) -> "MediaStatus":
        """Map a provider file state (enum or string) onto our status set."""

        raw = getattr(state, "value", state)
        if isinstance(raw, str):
            label = raw.rsplit(".", 1)[-1].upper()
            if label in (cls.PROCESSING.value, cls.ACTIVE.value, cls.FAILED.value):
                return cls(label)
        return cls.PENDING

    @property
    def is_terminal(self) -> bool:
        return self in (MediaStatus.ACTIVE, MediaStatus.FAILED)


@dataclass(frozen=True)
class MediaAsset:
    """Provider-side handle for an uploaded recording."""

    name: str
    uri: str
    mime_type: str
    display_name: str
    status: MediaStatus = MediaStatus.PENDING


@dataclass(frozen=True)
class ModelDescriptor:
    id: str
    name: str
    description: str = ""
    supports_structured_generation: bool = False

    def as_payload(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "description": self.description}


@dataclass(frozen=True)
class GenerationRequest:
    """Everything the generation stage needs for a single summary call."""

    media: MediaAsset
    rules: str
    model_id: str


@dataclass(frozen=True)
class GenerationResult:
    transcript: str
    summary: str
    language: str

    def as_payload(self) -> dict[str, str]:
        return {
            "transcript": self.transcript,
            "summary": self.summary,
            "language": self.language,
        }


@dataclass(frozen=True)
class TranslationResult:
    translated_text: str


@dataclass(frozen=True)
class ViewResult:
    """A translated transcript/summary pair. Never carries a language code."""

    transcript: str
    summary: str

    def as_payload(self) -> dict[str, str]:
        return {"transcript": self.transcript, "summary": self.summary}


__all__ = [
    "MediaStatus",
    "MediaAsset",
    "ModelDescriptor",
    "GenerationRequest",
    "GenerationResult",
    "TranslationResult",
    "ViewResult",
]
