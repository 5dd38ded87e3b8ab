"""
Main application module for the Document Translation proxy.

This module initializes the FastAPI application with its routes, middleware,
and configuration settings.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from config import settings
from api.document_translation.routes import router as document_translation_router

from integrations.azure_translator import initialize_translator_client, close_translator_client
from utils.logging import configure_logging
from utils.middleware import RequestLoggingMiddleware

# Configure logging
configure_logging(settings.DEBUG)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    Opens the shared HTTP client on startup and closes it on shutdown.
    """
    # Startup
    logger.info("Initializing application services and clients...")

    await initialize_translator_client()

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")

    await close_translator_client()

    logger.info("Application shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs" if settings.ENABLE_DOCS else None,
    redoc_url="/redoc" if settings.ENABLE_DOCS else None,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add custom middleware
app.add_middleware(RequestLoggingMiddleware)

# Include routers
app.include_router(document_translation_router, prefix="/DocumentTranslation", tags=["Document Translation"])


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint for health check."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "services": {
            "translator": bool(settings.TRANSLATOR_TEXT_ENDPOINT),
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info" if not settings.DEBUG else "debug",
    )
