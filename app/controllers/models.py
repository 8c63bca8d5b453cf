"""Model catalog endpoint."""

from typing import List

from fastapi import APIRouter

from app.controllers.dependencies import OrchestratorDep
from app.views import ModelOption

router = APIRouter(tags=["models"])


@router.get("/models", response_model=List[ModelOption])
async def list_models(orchestrator: OrchestratorDep) -> List[ModelOption]:
    """List models that can produce structured output, newest identifiers first."""

    models = await orchestrator.describe_models()
    return [ModelOption(**model.as_payload()) for model in models]
