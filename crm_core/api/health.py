"""
CRM Core API Health Endpoints
"""

import time
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import text
import structlog

from ..core.config import settings
from ..core.database import get_db
from ..models import ENTITY_CLASSES

logger = structlog.get_logger()
router = APIRouter(prefix="/health", tags=["health"])

# Track service start time
start_time = time.time()


@router.get("/")
async def health_check():
    """Basic health check"""
    uptime = time.time() - start_time
    return {
        "status": "healthy",
        "service": "crm-core",
        "version": settings.version,
        "uptime_seconds": uptime,
        "timestamp": time.time()
    }


@router.get("/ready")
async def readiness_check(db: AsyncSession = Depends(get_db)):
    """Readiness check with dependency validation"""
    uptime = time.time() - start_time
    services = {}

    # Check database
    try:
        await db.execute(text("SELECT 1"))
        services["database"] = "healthy"
    except Exception as e:
        logger.warning("Database health check failed", error=str(e))
        services["database"] = "unhealthy"

    # Check entity catalog
    services["catalog"] = "healthy" if ENTITY_CLASSES else "unhealthy"

    # Determine overall status
    all_healthy = all(status == "healthy" for status in services.values())

    return {
        "status": "ready" if all_healthy else "not_ready",
        "service": "crm-core",
        "version": settings.version,
        "uptime_seconds": uptime,
        "services": services,
        "entities": len(ENTITY_CLASSES),
        "timestamp": time.time()
    }


@router.get("/live")
async def liveness_check():
    """Liveness check - basic service responsiveness"""
    return {
        "status": "alive",
        "service": "crm-core",
        "timestamp": time.time()
    }
