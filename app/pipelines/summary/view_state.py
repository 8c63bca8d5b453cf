"""Original-versus-displayed result bookkeeping for the translate workflow."""

from __future__ import annotations

from typing import Union

from .types import GenerationResult, ViewResult

ORIGINAL_LANGUAGE = "original"

DisplayedResult = Union[GenerationResult, ViewResult]


def is_original_language(language: str | None) -> bool:
    return (language or "").strip().lower() == ORIGINAL_LANGUAGE


class ViewState:
    """Keeps one immutable baseline result next to the view currently shown.

    ``original`` only changes on :meth:`reset`, which also bumps ``revision``
    so that a translation started before the reset can be detected as stale.
    """

    def __init__(self) -> None:
        self._original: GenerationResult | None = None
        self._current: DisplayedResult | None = None
        self._language = ORIGINAL_LANGUAGE
        self._revision = 0

    @property
    def original(self) -> GenerationResult | None:
        return self._original

    @property
    def current(self) -> DisplayedResult | None:
        return self._current

    @property
    def language(self) -> str:
        return self._language

    @property
    def revision(self) -> int:
        return self._revision

    def reset(self, result: GenerationResult) -> None:
        self._revision += 1
        self._original = result
        self._current = result
        self._language = ORIGINAL_LANGUAGE

    def show_translation(self, language: str, view: ViewResult) -> None:
        if self._original is None:
            raise RuntimeError("Cannot show a translation before an original result exists")
        self._current = view
        self._language = language

    def restore_original(self) -> GenerationResult:
        if self._original is None:
            raise RuntimeError("No original result to restore")
        self._current = self._original
        self._language = ORIGINAL_LANGUAGE
        return self._original


__all__ = ["DisplayedResult", "ORIGINAL_LANGUAGE", "ViewState", "is_original_language"]
