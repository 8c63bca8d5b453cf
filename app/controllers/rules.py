"""Default rules endpoint."""

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool

from app.services.rules import load_default_rules
from app.views import RulesResponse

router = APIRouter(tags=["rules"])


@router.get("/rules", response_model=RulesResponse)
async def get_rules() -> RulesResponse:
    return RulesResponse(rules=await run_in_threadpool(load_default_rules))
