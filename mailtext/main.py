"""
FastAPI application entry point
"""
from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
import logging
import time

from mailtext.core.config import settings
from mailtext.core.database import engine, Base
from mailtext.core.exceptions import InvalidAccess, NotFound, ValidationFailed
from mailtext.core.logging_config import setup_logging
from mailtext.core.health import get_health_status
from mailtext.core.redis import cache
from mailtext.core.security import guardian_for_request

# Import all models so create_all sees them
from mailtext.models import User, TranslationOverride, UserHistory  # noqa: F401

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Admin API for customising email templates",
    version="0.1.0",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup():
    """Initialize database and cache on startup"""
    logger.info(f"Starting {settings.APP_NAME}...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    cache.connect()

    health = await get_health_status()
    if health["status"] == "healthy":
        logger.info("All systems healthy")
    else:
        logger.warning(f"Health check issues: {health}")


@app.on_event("shutdown")
async def shutdown():
    """Cleanup on shutdown"""
    logger.info(f"Shutting down {settings.APP_NAME}...")
    cache.disconnect()


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"{settings.APP_NAME} API",
        "version": "0.1.0",
        "status": "running"
    }


@app.get("/health")
async def health():
    """
    Health check endpoint.
    Returns status of all components.
    """
    return await get_health_status()


@app.get("/health/ready")
async def readiness():
    """
    Readiness probe.
    Returns 200 if ready to accept traffic.
    """
    health_status = await get_health_status()

    if health_status["status"] == "healthy":
        return JSONResponse(
            content=health_status,
            status_code=status.HTTP_200_OK
        )
    else:
        return JSONResponse(
            content=health_status,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )


@app.get("/health/live")
async def liveness():
    """
    Liveness probe.
    Returns 200 if application is alive.
    """
    return {"status": "alive"}


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests"""
    start_time = time.time()

    logger.info(f"{request.method} {request.url.path} - {request.client.host if request.client else 'unknown'}")

    try:
        response = await call_next(request)
        process_time = time.time() - start_time

        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.3f}s"
        )

        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(
            f"{request.method} {request.url.path} - "
            f"Error: {str(e)} - "
            f"Time: {process_time:.3f}s",
            exc_info=True
        )
        raise


def _not_found_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "errors": ["The requested URL or resource could not be found."],
            "error_type": "not_found"
        }
    )


# Non-admins get the same answer as unknown resources
@app.exception_handler(InvalidAccess)
async def invalid_access_handler(request: Request, exc: InvalidAccess):
    return _not_found_response()


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    logger.info(f"Not found: {exc} ({request.method} {request.url.path})")
    return _not_found_response()


ADMIN_ONLY_PATHS = ("/api/v1/admin/customize/",)


# Malformed JSON is rejected before route dependencies run
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    if request.url.path.startswith(ADMIN_ONLY_PATHS):
        guardian = await guardian_for_request(request)
        if not guardian.is_admin:
            return _not_found_response()
    return await request_validation_exception_handler(request, exc)


@app.exception_handler(ValidationFailed)
async def validation_failed_handler(request: Request, exc: ValidationFailed):
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"errors": exc.errors}
    )


app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions"""
    logger.error(
        f"Unhandled exception: {exc}",
        exc_info=True,
        extra={
            "path": request.url.path,
            "method": request.method,
        }
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "message": str(exc) if settings.DEBUG else "An error occurred"
        }
    )


# Admin router
from mailtext.api.v1 import admin
from mailtext.api.v1.admin.auth import limiter

app.state.limiter = limiter
app.include_router(admin.router, prefix="/api/v1/admin", tags=["admin"])
