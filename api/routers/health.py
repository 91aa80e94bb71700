"""
Health check and policy discovery endpoints.

GET /health   → liveness probe
GET /policies → which policies exist and the configured defaults
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_settings
from api.schemas.simulation import PoliciesResponse
from config.settings import Settings
from models.enums import SchedulingPolicy
from scheduler.registry import available_policies

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    return {"status": "healthy"}


@router.get("/policies", response_model=PoliciesResponse)
async def list_policies(config: Settings = Depends(get_settings)) -> PoliciesResponse:
    return PoliciesResponse(
        policies=available_policies(),
        default_policy=SchedulingPolicy.parse(config.DEFAULT_SCHEDULING_POLICY),
        round_robin_time_quantum=config.ROUND_ROBIN_TIME_QUANTUM,
    )
