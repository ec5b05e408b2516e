"""Health check endpoints."""

from fastapi import APIRouter

from walletsweep.config import get_settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "walletsweep"}


@router.get("/health/detailed")
async def detailed_health():
    """Detailed health check with configuration info."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "walletsweep",
        "version": "0.1.0",
        "config": settings.get_safe_dict(),
    }
