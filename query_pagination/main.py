import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from query_pagination.config import settings
from query_pagination.core.exceptions import register_exception_handlers
from query_pagination.core.logging import configure_logging
from query_pagination.core.middleware import PaginationMiddleware
from query_pagination.core.options import CustomOption, options_from_settings
from query_pagination.schemas.common import HealthResponse

# Routes that must answer regardless of the query string
EXEMPT_PATHS = ("/health", "/docs", "/redoc", "/openapi.json")

_start_time: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    global _start_time
    logger = logging.getLogger(__name__)

    logger.info(
        "Application starting",
        extra={"version": settings.app_version, "env": settings.env, "debug": settings.debug},
    )
    _start_time = time.monotonic()

    yield

    logger.info("Application shutting down")


def create_app(*custom_options: CustomOption) -> FastAPI:
    """Build the host app.

    Pagination options come from the ``PAGINATION_*`` settings first and are
    then overridden by ``custom_options``.
    """
    configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Validates page/size query parameters ahead of route handlers.",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        PaginationMiddleware,
        *options_from_settings(settings),
        *custom_options,
        exempt_paths=EXEMPT_PATHS,
    )
    register_exception_handlers(app)

    from query_pagination.api.v1.router import router as v1_router

    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/health", tags=["health"], response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        uptime = int(time.monotonic() - _start_time) if _start_time else 0
        return HealthResponse(
            status="healthy",
            version=settings.app_version,
            env=settings.env,
            uptime_s=uptime,
        )

    return app


app = create_app()
