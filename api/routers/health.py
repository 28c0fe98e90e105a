"""
Health Router - Health checks and configuration status endpoints
"""

from fastapi import APIRouter, Depends
from typing import Dict, Any

from api.dependencies import get_app_state, AppState

router = APIRouter()


@router.get("/ready")
async def health_check_ready(state: AppState = Depends(get_app_state)) -> Dict[str, Any]:
    """
    Kubernetes readiness probe.

    Never calls GitHub; reports the configuration the service will use.
    """
    return {
        "ready": True,
        "details": state.get_status()
    }
