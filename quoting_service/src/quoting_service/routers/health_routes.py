"""
Health check endpoints for the Quoting Service.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import settings
from ..db import get_db
from ..logging_config import logger

router = APIRouter(prefix="/health", tags=["health"])

start_time = time.time()


class HealthResponse(BaseModel):
    status: str
    service: str
    uptime_seconds: float
    timestamp: datetime


class DatabaseHealthResponse(BaseModel):
    status: str
    latency_ms: float
    connected: bool


@router.get("", response_model=HealthResponse, summary="Service health check")
async def health_check():
    return HealthResponse(
        status="healthy",
        service=settings.PROJECT_NAME,
        uptime_seconds=time.time() - start_time,
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/db", response_model=DatabaseHealthResponse, summary="Database health check")
async def db_health_check(db: AsyncSession = Depends(get_db)):
    start = time.time()
    try:
        await db.execute(text("SELECT 1"))
        connected = True
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        connected = False
    return DatabaseHealthResponse(
        status="connected" if connected else "error",
        latency_ms=(time.time() - start) * 1000,
        connected=connected,
    )
