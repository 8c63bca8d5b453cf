"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.pipelines.summary import SummaryOrchestrator
from app.services.gemini_client import GeminiClient, get_gemini_client

GeminiClientDep = Annotated[GeminiClient, Depends(get_gemini_client)]


def get_orchestrator(client: GeminiClientDep) -> SummaryOrchestrator:
    """Build a request-scoped orchestrator so view state never leaks between requests."""

    return SummaryOrchestrator(client)


OrchestratorDep = Annotated[SummaryOrchestrator, Depends(get_orchestrator)]
