"""Default summarization rules shipped with the service."""

from __future__ import annotations

import logging
from pathlib import Path

from app.config.settings import settings

logger = logging.getLogger(__name__)

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _resolve_rules_path(rules_file: str) -> Path:
    path = Path(rules_file)
    if path.is_absolute():
        return path
    return _PROJECT_ROOT / path


def load_default_rules(rules_file: str | None = None) -> str:
    """Read the rules text from disk, returning an empty string if it is unavailable."""

    rules_path = _resolve_rules_path(rules_file or settings.rules_file)
    try:
        return rules_path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Error reading rules file %s: %s", rules_path, exc)
        return ""


__all__ = ["load_default_rules"]
