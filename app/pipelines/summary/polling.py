"""Readiness polling (Stage 02 of the summary pipeline)."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from typing import Awaitable, Callable

from app.services.gemini_client import GeminiClient, GeminiInvocationError
from app.telemetry import observe_poll_attempts

from .errors import MediaProcessingFailed, ProcessingTimeout, UpstreamUnavailable
from .types import MediaAsset, MediaStatus

logger = logging.getLogger("app.pipelines.summary")

Sleeper = Callable[[float], Awaitable[None]]


async def wait_until_active(
    client: GeminiClient,
    asset: MediaAsset,
    *,
    interval: float,
    max_attempts: int,
    sleep: Sleeper = asyncio.sleep,
) -> MediaAsset:
    """Poll the provider until ``asset`` is ACTIVE.

    Each attempt is one status query followed, if the file is still pending,
    by a sleep of ``interval`` seconds. FAILED is terminal. Running out of
    attempts raises :class:`ProcessingTimeout`.
    """

    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    current = asset
    for attempt in range(1, max_attempts + 1):
        try:
            remote = await client.get_file(current.name)
        except GeminiInvocationError as exc:
            observe_poll_attempts(attempt)
            raise UpstreamUnavailable(f"Status check failed for {current.name}: {exc}") from exc

        status = MediaStatus.from_provider(getattr(remote, "state", None))
        current = dataclasses.replace(current, status=status)

        if status is MediaStatus.ACTIVE:
            observe_poll_attempts(attempt)
            logger.info("File %s active after %d status checks", current.name, attempt)
            return current
        if status is MediaStatus.FAILED:
            observe_poll_attempts(attempt)
            logger.error("Provider processing failed for %s", current.name)
            raise MediaProcessingFailed("Audio processing failed.")

        if attempt < max_attempts:
            logger.debug("File %s still %s (attempt %d)", current.name, status.value, attempt)
            await sleep(interval)

    observe_poll_attempts(max_attempts)
    raise ProcessingTimeout(
        f"Audio processing did not finish after {max_attempts} status checks"
    )


__all__ = ["wait_until_active"]
