"""
Health check API route
"""

from datetime import datetime

import asyncpg
from fastapi import APIRouter, Depends, HTTPException

from noteful.config.settings import DatabaseEnvironmentConfig
from noteful.database.connection import get_db_pool

router = APIRouter()


@router.get("/")
async def health_check(pool: asyncpg.Pool = Depends(get_db_pool)):
    """Health check including database connectivity"""
    try:
        async with pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
    except Exception as e:
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")

    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "environment": DatabaseEnvironmentConfig.get_config().env_name,
        "database": "connected"
    }
