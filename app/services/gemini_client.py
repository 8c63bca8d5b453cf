"""Thin Gemini client wrapper for catalog, file and generation calls."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from fastapi.concurrency import run_in_threadpool
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from app.config.settings import settings

logger = logging.getLogger(__name__)


class GeminiInvocationError(RuntimeError):
    """Raised when a Gemini API call fails."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def mask_api_key(api_key: str | None) -> str:
    """Render an API key as ``abcd...wxyz`` for log output."""

    if not api_key:
        return "<missing>"
    if len(api_key) <= 8:
        return "*" * len(api_key)
    return f"{api_key[:4]}...{api_key[-4:]}"


class GeminiClient:
    """Invoke the Gemini API with the configured key.

    Every SDK call is blocking, so each method hands the work to the
    threadpool and re-raises failures as :class:`GeminiInvocationError`.
    """

    def __init__(self, api_key: str | None = None) -> None:
        if api_key is None and settings.gemini.api_key:
            api_key = settings.gemini.api_key.get_secret_value()
        self._api_key = api_key
        self._client: genai.Client | None = None

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def _sdk(self) -> genai.Client:
        if self._client is None:
            if not self._api_key:
                raise GeminiInvocationError("Gemini API key is missing on server")
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def _call(self, operation: str, func: Callable[[genai.Client], Any]) -> Any:
        sdk = self._sdk()

        def _invoke() -> Any:
            return func(sdk)

        try:
            return await run_in_threadpool(_invoke)
        except genai_errors.APIError as exc:
            logger.warning("Gemini %s failed status=%s: %s", operation, exc.code, exc.message)
            raise GeminiInvocationError(
                exc.message or str(exc), status_code=exc.code
            ) from exc
        except Exception as exc:  # pragma: no cover - network failure
            logger.warning("Gemini %s failed: %s", operation, exc)
            raise GeminiInvocationError(str(exc)) from exc

    async def list_models(self) -> list[types.Model]:
        """Return every model advertised by the catalog endpoint."""

        return await self._call("models.list", lambda sdk: list(sdk.models.list()))

    async def upload_file(
        self,
        path: str,
        *,
        mime_type: str,
        display_name: str,
    ) -> types.File:
        return await self._call(
            "files.upload",
            lambda sdk: sdk.files.upload(
                file=path,
                config=types.UploadFileConfig(
                    mime_type=mime_type,
                    display_name=display_name,
                ),
            ),
        )

    async def get_file(self, name: str) -> types.File:
        return await self._call("files.get", lambda sdk: sdk.files.get(name=name))

    async def delete_file(self, name: str) -> None:
        await self._call("files.delete", lambda sdk: sdk.files.delete(name=name))

    async def generate_content(
        self,
        *,
        model: str,
        parts: list[types.Part],
        response_schema: types.Schema | None = None,
    ) -> str:
        """Run a single-turn ``generate_content`` call and return the text output."""

        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=response_schema,
        )

        response = await self._call(
            "models.generate_content",
            lambda sdk: sdk.models.generate_content(
                model=model,
                contents=[types.Content(role="user", parts=parts)],
                config=config,
            ),
        )
        return (getattr(response, "text", None) or "").strip()


_DEFAULT_CLIENT: GeminiClient | None = None


def get_gemini_client() -> GeminiClient:
    """Return a lazily-instantiated Gemini client singleton."""

    global _DEFAULT_CLIENT
    if _DEFAULT_CLIENT is None:
        _DEFAULT_CLIENT = GeminiClient()
    return _DEFAULT_CLIENT


__all__ = ["GeminiClient", "GeminiInvocationError", "get_gemini_client", "mask_api_key"]
