"""
Health check utilities
"""
from typing import Dict, Any
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from mailtext.core.database import SessionLocal
from mailtext.core.config import settings
from mailtext.core.redis import cache
import logging

logger = logging.getLogger(__name__)


async def check_database() -> Dict[str, Any]:
    """
    Check database connectivity.

    Returns:
        Dictionary with status and details
    """
    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
            return {
                "status": "healthy",
                "message": "Database connection successful"
            }
        finally:
            db.close()
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        return {
            "status": "unhealthy",
            "message": f"Database connection failed: {str(e)}"
        }


async def check_redis() -> Dict[str, Any]:
    """
    Check the translation cache. Redis is optional, so a missing
    server is reported but does not make the service unhealthy.

    Returns:
        Dictionary with status and details
    """
    if not settings.REDIS_URL:
        return {
            "status": "disabled",
            "message": "REDIS_URL not configured"
        }
    if cache.ping():
        return {
            "status": "healthy",
            "message": "Redis connection successful"
        }
    logger.warning("Redis health check failed")
    return {
        "status": "unhealthy",
        "message": "Redis not reachable, translation cache disabled"
    }


async def get_health_status() -> Dict[str, Any]:
    """
    Get overall health status.

    Returns:
        Dictionary with health status of all components
    """
    db_status = await check_database()
    redis_status = await check_redis()

    overall_status = "healthy"
    if db_status["status"] != "healthy":
        overall_status = "unhealthy"

    return {
        "status": overall_status,
        "version": "0.1.0",
        "environment": settings.ENVIRONMENT,
        "components": {
            "database": db_status,
            "redis": redis_status,
        }
    }
