"""Media ingestion (Stage 01 of the summary pipeline).

The upload is staged on local disk because the provider's file API reads from
a path. A :class:`StagedUpload` owns that file and removes it exactly once,
whichever way the workflow ends.
"""

from __future__ import annotations

import logging
import mimetypes
import os
import uuid
from pathlib import Path
from typing import Final

from app.services.gemini_client import GeminiClient, GeminiInvocationError

from .errors import IngestionRejected, UpstreamUnavailable
from .types import MediaAsset, MediaStatus

logger = logging.getLogger("app.pipelines.summary")

_GENERIC_CONTENT_TYPES: Final[set[str]] = {"", "application/octet-stream"}
_DEFAULT_FILENAME: Final[str] = "recording"
# Provider statuses that mean the payload itself was refused.
_PAYLOAD_REJECTION_STATUSES: Final[frozenset[int]] = frozenset({400, 413, 415})


def resolve_content_type(declared: str | None, filename: str | None) -> str:
    """Accept any ``audio/*`` upload, guessing from the filename when the client didn't say."""

    content_type = (declared or "").split(";", 1)[0].strip().lower()
    if content_type in _GENERIC_CONTENT_TYPES and filename:
        guessed_type, _ = mimetypes.guess_type(filename)
        content_type = (guessed_type or "").lower()

    if not content_type.startswith("audio/"):
        raise IngestionRejected(
            f"Only audio uploads are supported (got {content_type or 'unknown type'})"
        )
    return content_type


class StagedUpload:
    """A request-scoped copy of the uploaded bytes on local storage."""

    def __init__(self, path: Path, display_name: str) -> None:
        self.path = path
        self.display_name = display_name
        self._discarded = False

    @property
    def discarded(self) -> bool:
        return self._discarded

    def discard(self) -> None:
        """Remove the staged file. Safe to call more than once."""

        if self._discarded:
            return
        self._discarded = True
        try:
            os.remove(self.path)
        except FileNotFoundError:
            logger.debug("Staged upload already gone: %s", self.path)
        except OSError as exc:
            logger.error("Could not remove staged upload %s: %s", self.path, exc)
        else:
            logger.debug("Removed staged upload %s", self.path)

    def __enter__(self) -> "StagedUpload":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.discard()


def stage_upload(payload: bytes, filename: str | None, upload_dir: str | Path) -> StagedUpload:
    """Write the upload to a uniquely named file under ``upload_dir``."""

    if not payload:
        raise IngestionRejected("No audio file uploaded.")

    directory = Path(upload_dir)
    display_name = Path(filename).name if filename else _DEFAULT_FILENAME
    staged_path = directory / f"{uuid.uuid4().hex}{Path(display_name).suffix}"

    try:
        directory.mkdir(parents=True, exist_ok=True)
        staged_path.write_bytes(payload)
    except OSError as exc:
        logger.error("Could not stage upload %s at %s: %s", display_name, staged_path, exc)
        staged_path.unlink(missing_ok=True)
        raise UpstreamUnavailable("Could not store the uploaded audio.") from exc

    logger.info("Staged upload %s (%d bytes) at %s", display_name, len(payload), staged_path)
    return StagedUpload(staged_path, display_name)


async def ingest_media(
    client: GeminiClient,
    staged: StagedUpload,
    content_type: str,
) -> MediaAsset:
    """Hand the staged bytes to the provider's file API and return its handle."""

    try:
        uploaded = await client.upload_file(
            str(staged.path),
            mime_type=content_type,
            display_name=staged.display_name,
        )
    except GeminiInvocationError as exc:
        if exc.status_code in _PAYLOAD_REJECTION_STATUSES:
            raise IngestionRejected(f"Upload rejected by provider: {exc}") from exc
        raise UpstreamUnavailable(f"Upload failed: {exc}") from exc

    asset = MediaAsset(
        name=uploaded.name,
        uri=uploaded.uri,
        mime_type=getattr(uploaded, "mime_type", None) or content_type,
        display_name=staged.display_name,
        status=MediaStatus.from_provider(getattr(uploaded, "state", None)),
    )
    logger.info("Uploaded file to Gemini: %s (%s)", asset.uri, asset.status.value)
    return asset


__all__ = ["StagedUpload", "ingest_media", "resolve_content_type", "stage_upload"]
