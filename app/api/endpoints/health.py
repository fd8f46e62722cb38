"""
Health check endpoints.

Provides basic and detailed health status for the database and upload storage.
"""

import logging
import os
from typing import Dict, Any
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.storage import LocalStorage, get_storage

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, str]:
    """
    Basic health check endpoint.

    Returns 200 OK if the service is running.
    """
    return {"status": "healthy", "timestamp": _now()}


@router.get("/health/detailed")
def detailed_health_check(
    db: Session = Depends(get_db),
    storage: LocalStorage = Depends(get_storage)
) -> Any:
    """
    Detailed health check with dependency status.

    Returns 200 if the database and upload directory are usable, 503 otherwise.
    """
    health_status = {"status": "healthy", "timestamp": _now(), "checks": {}}

    try:
        db.execute(text("SELECT 1"))
        health_status["checks"]["database"] = {"status": "healthy"}
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = {"status": "unhealthy", "message": "Database connection failed"}

    if os.access(storage.base_dir, os.W_OK):
        health_status["checks"]["storage"] = {"status": "healthy"}
    else:
        health_status["status"] = "unhealthy"
        health_status["checks"]["storage"] = {"status": "unhealthy", "message": "Upload directory not writable"}

    code = status.HTTP_200_OK if health_status["status"] == "healthy" else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(status_code=code, content=health_status)
