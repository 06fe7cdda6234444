from __future__ import annotations

from fastapi import APIRouter

from app.core.config import settings
from app.services.employee_service import employee_service

router = APIRouter(prefix="/health", tags=["health"])


async def _random_user_api_state() -> str:
    if not employee_service.initialized:
        return "not_configured"
    try:
        return "ok" if await employee_service.check_connection() else "error"
    except Exception:
        return "error"


@router.get("")
async def health_check():
    upstream = await _random_user_api_state()
    return {
        "status": "degraded" if upstream == "error" else "healthy",
        "version": settings.APP_VERSION,
        "services": {"random_user_api": upstream},
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
