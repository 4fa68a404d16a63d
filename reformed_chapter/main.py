"""Reformed Chapter FastAPI Application."""
from datetime import datetime
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from reformed_chapter.config import get_settings
from reformed_chapter.database import initialize_connection_pool, close_connection_pool
from reformed_chapter.services.cache_service import initialize_redis, close_redis
from reformed_chapter.models.schemas import HealthCheck
from reformed_chapter.utils.exceptions import DatabaseError, PaymentError
from reformed_chapter.routers import resources, references, donations, sitemap
from reformed_chapter.middleware.request_logging import RequestLoggingMiddleware

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = get_settings()

logger.info(f"CORS allowed origins: {settings.allowed_origins}")
app = FastAPI(
    title=settings.app_name,
    description="Bible-study resources by book and chapter",
    version="1.0.0"
)

app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Initialize resources on application startup."""
    logger.info("Initializing application resources...")
    try:
        initialize_connection_pool(minconn=2, maxconn=20)
        initialize_redis()
        logger.info("Application startup complete")
    except Exception as e:
        logger.error(f"Failed to initialize application: {e}")
        raise


@app.on_event("shutdown")
async def shutdown_event():
    """Clean up resources on application shutdown."""
    logger.info("Shutting down application...")
    try:
        close_connection_pool()
        close_redis()
        logger.info("Application shutdown complete")
    except Exception as e:
        logger.error(f"Error during shutdown: {e}")


app.include_router(resources.router)
app.include_router(references.router)
app.include_router(donations.router)
app.include_router(sitemap.router)


@app.get("/", response_model=HealthCheck)
async def health_check():
    """Health check endpoint."""
    return HealthCheck(
        status="healthy",
        timestamp=datetime.utcnow()
    )


# Error handlers
@app.exception_handler(DatabaseError)
async def database_error_handler(request, exc):
    logger.error(f"Database error: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )


@app.exception_handler(PaymentError)
async def payment_error_handler(request, exc):
    logger.error(f"Payment error: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )
