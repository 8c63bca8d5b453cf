"""Model catalog lookup."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from app.services.gemini_client import GeminiClient, GeminiInvocationError

from .errors import UpstreamUnavailable
from .types import ModelDescriptor

logger = logging.getLogger("app.pipelines.summary")

STRUCTURED_GENERATION_ACTION = "generateContent"
_MODEL_PREFIX = "models/"


def _describe(model: Any) -> ModelDescriptor:
    raw_name = getattr(model, "name", None) or ""
    model_id = raw_name[len(_MODEL_PREFIX):] if raw_name.startswith(_MODEL_PREFIX) else raw_name
    actions: Iterable[str] = getattr(model, "supported_actions", None) or ()
    return ModelDescriptor(
        id=model_id,
        name=getattr(model, "display_name", None) or raw_name,
        description=getattr(model, "description", None) or "",
        supports_structured_generation=STRUCTURED_GENERATION_ACTION in actions,
    )


async def list_structured_models(client: GeminiClient) -> list[ModelDescriptor]:
    """Return models that support ``generateContent``, newest identifiers first."""

    try:
        raw_models = await client.list_models()
    except GeminiInvocationError as exc:
        raise UpstreamUnavailable(f"Failed to list models: {exc}") from exc

    descriptors = [_describe(model) for model in raw_models]
    models = sorted(
        (model for model in descriptors if model.supports_structured_generation and model.id),
        key=lambda model: model.id,
        reverse=True,
    )
    logger.info("Filtered models: %s", [model.id for model in models])
    return models


__all__ = ["STRUCTURED_GENERATION_ACTION", "list_structured_models"]
