"""Scripted stand-in for the Gemini client and canned provider responses."""

from __future__ import annotations

import json
from pathlib import Path
import sys
from types import SimpleNamespace
from typing import Any, Callable

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from app.services.gemini_client import GeminiInvocationError  # noqa: E402


class FakeGeminiClient:
    """Records every call and answers from scripted state."""

    def __init__(self) -> None:
        self.models: list[Any] = []
        self.models_error: Exception | None = None
        self.upload_error: Exception | None = None
        self.file_states: list[str] = ["ACTIVE"]
        self.status_error: Exception | None = None
        self.responder: Callable[[str, list[Any]], str] = lambda model, parts: ""
        self.calls: list[tuple[str, Any]] = []
        self.staged_paths: list[Path] = []
        self.staged_existed: list[bool] = []

    def count(self, operation: str) -> int:
        return sum(1 for name, _ in self.calls if name == operation)

    async def list_models(self):
        self.calls.append(("list_models", None))
        if self.models_error:
            raise self.models_error
        return list(self.models)

    async def upload_file(self, path: str, *, mime_type: str, display_name: str):
        self.calls.append(("upload_file", (path, mime_type, display_name)))
        self.staged_paths.append(Path(path))
        self.staged_existed.append(Path(path).exists())
        if self.upload_error:
            raise self.upload_error
        return SimpleNamespace(
            name="files/abc123",
            uri="https://generativelanguage.googleapis.com/v1beta/files/abc123",
            mime_type=mime_type,
            display_name=display_name,
            state="PROCESSING",
        )

    async def get_file(self, name: str):
        self.calls.append(("get_file", name))
        if self.status_error:
            raise self.status_error
        state = self.file_states.pop(0) if len(self.file_states) > 1 else self.file_states[0]
        return SimpleNamespace(name=name, state=state)

    async def delete_file(self, name: str) -> None:
        self.calls.append(("delete_file", name))

    async def generate_content(self, *, model: str, parts: list[Any], response_schema=None) -> str:
        self.calls.append(("generate_content", (model, parts, response_schema)))
        return self.responder(model, parts)


def summary_json(transcript: str = "Hello world", summary: str = "Greeting.", language: str = "en") -> str:
    return json.dumps({"transcript": transcript, "summary": summary, "language": language})


def chinese_translator(model: str, parts: list[Any]) -> str:
    """Answer translation prompts for the 'Hello world' / 'Greeting.' fixture."""

    prompt = parts[-1].text
    if prompt.endswith("Hello world"):
        return json.dumps({"translatedText": "你好，世界"})
    if prompt.endswith("Greeting."):
        return json.dumps({"translatedText": "问候。"})
    raise AssertionError(f"unexpected prompt: {prompt}")


def provider_error(status_code: int | None = 500) -> GeminiInvocationError:
    return GeminiInvocationError("boom", status_code=status_code)
