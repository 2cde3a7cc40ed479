"""
Classics Reading Tracker API
FastAPI application with Firebase integration
"""
import os
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import uvicorn

from reading_tracker.core.config import settings
from reading_tracker.core.firebase_config import initialize_firebase
from reading_tracker.core.middleware import PreflightMiddleware, RequestLoggingMiddleware
from reading_tracker.core.responses import register_exception_handlers
from reading_tracker.api.v1.router import api_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Startup
    logger.info("Starting Classics Reading Tracker API...")
    logger.debug(f"Debug mode: {settings.DEBUG}")
    logger.debug(f"Log level: {settings.LOG_LEVEL}")

    initialize_firebase()

    yield

    # Shutdown
    logger.info("Shutting down Classics Reading Tracker API...")


# Create FastAPI app
app = FastAPI(
    title="Classics Reading Tracker API",
    description="Reading plans, progress and annotations for classic books",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

register_exception_handlers(app)

# Middleware added last runs first
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)
app.add_middleware(
    PreflightMiddleware,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)

app.include_router(api_router, prefix=settings.API_PREFIX)


if __name__ == "__main__":
    # Read PORT from environment (Cloud Run sets this)
    port = int(os.getenv("PORT", settings.PORT))
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=port,
        reload=settings.DEBUG,
        log_level="info",
        access_log=True,
        log_config=None  # Use our custom logging config
    )
