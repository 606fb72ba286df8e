"""
Wisdom Lenses — FastAPI Application Entry Point

- Async lifespan owning the database engine and the Gemini client
- CORS and structured-logging middleware
- Domain errors rendered as ``{"success": false, "message", "error"}``
- Health-check endpoints (liveness + deep readiness)
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from wisdom_lenses.config import Settings, get_settings
from wisdom_lenses.database import build_engine, build_session_factory
from wisdom_lenses.exceptions import WisdomLensesError
from wisdom_lenses.services.gemini_service import GeminiService

# ---------------------------------------------------------------------------
# Structured logging configuration
# ---------------------------------------------------------------------------

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(ensure_ascii=False),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(0),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger("wisdom_lenses")


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the engine, session factory and Gemini client; dispose on exit."""
    settings: Settings = app.state.settings

    # -- Startup --------------------------------------------------------- #
    logger.info(
        "startup_begin",
        environment=settings.ENVIRONMENT,
        log_level=settings.LOG_LEVEL,
    )

    engine = build_engine(settings)
    async with engine.begin() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("database_pool_initialised")

    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.gemini = GeminiService(settings)

    logger.info("startup_complete")

    yield

    # -- Shutdown -------------------------------------------------------- #
    logger.info("shutdown_begin")
    await engine.dispose()
    logger.info("database_pool_closed")
    logger.info("shutdown_complete")


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------

class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with method, path, status code, and duration."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.exception(
                "request_error",
                method=request.method,
                path=request.url.path,
                duration_ms=round(duration_ms, 2),
            )
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "request_handled",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round(duration_ms, 2),
        )
        return response


# ---------------------------------------------------------------------------
# Error rendering
# ---------------------------------------------------------------------------

async def wisdom_lenses_error_handler(
    request: Request, exc: WisdomLensesError
) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.info
    log(
        "request_failed",
        path=request.url.path,
        error_type=exc.error_type,
        status=exc.status_code,
        error=exc.message,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": exc.message,
            "error": {"type": exc.error_type, "message": exc.message},
        },
    )


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------

def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="Wisdom Lenses",
        description="I Ching hexagram flashcards with multi-perspective AI interpretation",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )
    app.state.settings = settings

    # -- Middleware (applied in reverse order: last added runs first) ------ #

    app.add_middleware(StructuredLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(WisdomLensesError, wisdom_lenses_error_handler)

    # -- Health-check endpoints -------------------------------------------- #

    @app.get("/health", tags=["health"])
    async def health_liveness() -> dict:
        """Lightweight liveness probe — always returns healthy if the process
        is running."""
        return {"status": "healthy"}

    @app.get("/health/deep", tags=["health"])
    async def health_deep(request: Request) -> dict:
        """Deep readiness probe — verifies database connectivity."""
        result: dict = {"status": "healthy", "database": "connected"}
        try:
            async with request.app.state.session_factory() as session:
                await session.execute(text("SELECT 1"))
        except Exception as exc:
            logger.error("health_db_failure", error=str(exc))
            result["database"] = f"error: {exc}"
            result["status"] = "degraded"
        return result

    # -- API router -------------------------------------------------------- #

    from wisdom_lenses.api.router import router as api_router

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
