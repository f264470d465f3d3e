from fastapi import APIRouter, Depends
from typing import Dict, Any
import time
from datetime import datetime, timezone

from jmath.core.config import Settings, get_settings

router = APIRouter()


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.APP_VERSION,
        "environment": "development" if settings.DEBUG else "production",
        "services": {
            "llm_api": {
                "configured": settings.is_configured,
                "model": settings.OPENROUTER_MODEL
            }
        }
    }


@router.get("/health/live")
async def liveness_check():
    """Liveness check"""
    return {"status": "alive", "timestamp": time.time()}
