"""Summarize and translate workflows composed from the pipeline stages."""

from __future__ import annotations

import asyncio
import logging

from app.config.settings import Settings, settings as default_settings
from app.services.gemini_client import GeminiClient, GeminiInvocationError
from app.telemetry import record_summary_outcome, record_translation_outcome

from .catalog import list_structured_models
from .errors import SummaryPipelineError, TranslationFailed, UpstreamUnavailable
from .generation import generate_summary
from .ingestion import ingest_media, resolve_content_type, stage_upload
from .polling import wait_until_active
from .translation import translate_text
from .types import GenerationRequest, GenerationResult, MediaAsset, ModelDescriptor, ViewResult
from .view_state import DisplayedResult, ViewState, is_original_language

logger = logging.getLogger("app.pipelines.summary")
transcript_logger = logging.getLogger("app.logs.transcript")


class SummaryOrchestrator:
    """Run the summary pipeline and keep the original/translated views.

    One orchestrator owns one :class:`ViewState`. The HTTP layer creates one
    per request; long-lived callers (scripts, tests) keep a single instance
    to toggle languages without re-running transcription.
    """

    def __init__(
        self,
        client: GeminiClient,
        config: Settings | None = None,
        *,
        view_state: ViewState | None = None,
    ) -> None:
        self._client = client
        self._settings = config or default_settings
        self.view_state = view_state or ViewState()

    async def describe_models(self) -> list[ModelDescriptor]:
        """Return selectable models, or an empty list when the catalog is down."""

        try:
            return await list_structured_models(self._client)
        except UpstreamUnavailable as exc:
            logger.warning("Model catalog unavailable: %s", exc)
            return []

    async def summarize(
        self,
        payload: bytes,
        *,
        content_type: str | None,
        filename: str | None,
        rules: str | None = None,
        model_id: str | None = None,
    ) -> GenerationResult:
        """Upload, wait for processing, and generate transcript plus summary."""

        rules_text = (rules or "").strip() or self._settings.default_rules
        target_model = (model_id or "").strip() or self._settings.gemini.default_model

        try:
            result = await self._run_summary(payload, content_type, filename, rules_text, target_model)
        except SummaryPipelineError as exc:
            record_summary_outcome(type(exc).__name__)
            logger.error("Summary workflow failed (%s): %s", type(exc).__name__, exc)
            raise

        record_summary_outcome("success")
        transcript_logger.info(
            "summary | model=%s | language=%s | transcript=%s | summary=%s",
            target_model,
            result.language,
            result.transcript,
            result.summary,
        )
        self.view_state.reset(result)
        return result

    async def _run_summary(
        self,
        payload: bytes,
        content_type: str | None,
        filename: str | None,
        rules: str,
        model_id: str,
    ) -> GenerationResult:
        resolved_type = resolve_content_type(content_type, filename)
        gemini = self._settings.gemini

        with stage_upload(payload, filename, self._settings.upload_dir) as staged:
            asset = await ingest_media(self._client, staged, resolved_type)
            try:
                ready = await wait_until_active(
                    self._client,
                    asset,
                    interval=gemini.poll_interval_seconds,
                    max_attempts=gemini.max_poll_attempts,
                )
                return await generate_summary(
                    self._client,
                    GenerationRequest(media=ready, rules=rules, model_id=model_id),
                )
            finally:
                if gemini.delete_remote_files:
                    await self._delete_remote(asset)

    async def _delete_remote(self, asset: MediaAsset) -> None:
        try:
            await self._client.delete_file(asset.name)
        except GeminiInvocationError as exc:
            logger.warning("Could not delete provider file %s: %s", asset.name, exc)

    async def translate(self, target_language: str, model_id: str | None = None) -> DisplayedResult:
        """Show the current result in ``target_language`` (or back in the original)."""

        original = self.view_state.original
        if original is None:
            raise TranslationFailed("Nothing to translate yet; summarize an audio file first.")

        if is_original_language(target_language):
            return self.view_state.restore_original()

        language = target_language.strip()
        target_model = (model_id or "").strip() or self._settings.gemini.default_model
        revision = self.view_state.revision

        transcript_text, summary_text = await self._translate_fields(original, language, target_model)
        view = ViewResult(transcript=transcript_text, summary=summary_text)

        if self.view_state.revision != revision:
            logger.info("Discarding %s translation of a superseded result", language)
            return view

        self.view_state.show_translation(language, view)
        return view

    async def _translate_fields(
        self,
        original: GenerationResult,
        language: str,
        model_id: str,
    ) -> tuple[str, str]:
        async def _translate(text: str) -> str:
            if not text.strip():
                return text
            translation = await translate_text(self._client, text, language, model_id)
            return translation.translated_text

        outcomes = await asyncio.gather(
            _translate(original.transcript),
            _translate(original.summary),
            return_exceptions=True,
        )
        for outcome in outcomes:
            if isinstance(outcome, BaseException) and not isinstance(outcome, Exception):
                raise outcome
        failures = [outcome for outcome in outcomes if isinstance(outcome, Exception)]
        if failures:
            record_translation_outcome("failed")
            logger.error("Translation to %s failed: %s", language, failures[0])
            raise TranslationFailed(f"Translation to {language} failed: {failures[0]}") from failures[0]

        record_translation_outcome("success")
        transcript_text, summary_text = outcomes
        return transcript_text, summary_text


__all__ = ["SummaryOrchestrator"]
