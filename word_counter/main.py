"""
Word Counter Service - Main Application Entry Point

- FastAPI app with lifespan handler
- uvicorn word_counter.main:app starts the service

Patterns Applied:
- Lifespan context manager
- One-time configure_logging() at startup
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from word_counter.api.health import router as health_router
from word_counter.api.words import get_word_counter, words_router
from word_counter.core.config import get_settings
from word_counter.core.logging import configure_logging, get_logger
from word_counter.core.tracing import configure_tracing

settings = get_settings()

configure_logging(
    log_level=settings.log_level,
    json_output=settings.log_json,
    environment=settings.environment,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager for startup/shutdown events."""
    logger.info(
        "startup",
        service=settings.service_name,
        version=settings.version,
        environment=settings.environment,
    )

    if settings.tracing_enabled:
        configure_tracing(
            service_name=settings.service_name,
            console_export=settings.tracing_console_export,
            environment=settings.environment,
        )
        logger.info("tracing_configured")

    # Build the counter up front so a bad seed file fails startup, not a request
    app.dependency_overrides.get(get_word_counter, get_word_counter)()
    app.state.initialized = True

    yield

    logger.info("shutdown", service=settings.service_name)
    app.state.initialized = False


app = FastAPI(
    title="Word Counter Service",
    description="Counts words across languages by their canonical English form",
    version=settings.version,
    docs_url="/docs" if settings.environment != "production" else None,
    redoc_url="/redoc" if settings.environment != "production" else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.environment == "development" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(words_router)


@app.get("/", include_in_schema=False)
async def root() -> dict[str, str]:
    """Root endpoint pointing at the docs."""
    return {
        "service": settings.service_name,
        "version": settings.version,
        "docs": "/docs",
    }
