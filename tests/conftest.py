"""Shared fixtures for the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from fakes import FakeGeminiClient

from app.config.settings import settings


@pytest.fixture
def fake_client() -> FakeGeminiClient:
    return FakeGeminiClient()


@pytest.fixture
def test_settings(tmp_path: Path):
    """Settings with a private upload dir and no real waiting between polls."""

    gemini = settings.gemini.model_copy(
        update={"poll_interval_seconds": 0.0, "max_poll_attempts": 5, "delete_remote_files": False}
    )
    return settings.model_copy(
        update={"upload_dir": str(tmp_path / "uploads"), "gemini": gemini}
    )
