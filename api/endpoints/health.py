"""
RecipeGen Health Check Endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
import time

from core.config import settings
from core.database import DatabaseHealthCheck, get_db

router = APIRouter()


@router.get("")
def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.VERSION,
        "timestamp": time.time()
    }


@router.get("/ready")
def readiness_check(db: Session = Depends(get_db)):
    """Readiness probe; checks the database"""
    if not DatabaseHealthCheck.check_connection(db):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"status": "not_ready", "database": "disconnected"}
        )
    return {
        "status": "ready",
        "database": "connected",
        "pool": DatabaseHealthCheck.get_connection_info(),
        "timestamp": time.time()
    }
