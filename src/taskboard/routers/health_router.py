# routers/health_router.py
from fastapi import APIRouter

from taskboard.models.api_response import ApiData, ApiResponse
from taskboard.routers.dependencies import send

router = APIRouter(prefix="/health", tags=["Health"])


class HealthData(ApiData):
    status: str


@router.get("")
def health_check():
    return send(ApiResponse.ok(HealthData(status="ok")))
