"""
FastAPI application entry point.

This module creates and configures the FastAPI application.
Using an application factory pattern (create_app function) because:
- Easier to test with different stores and id generators
- Explicit about initialization order
- Each app instance owns its own store

For local development:
    uvicorn coaster_api.main:app --reload

Or:
    python -m coaster_api.main
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api.routes import admin, coasters, health
from .config.settings import Settings, get_settings
from .core.admin import AdminPortal
from .core.coasters.ids import IdGenerator, create_id_generator
from .core.coasters.selector import RandomSelector
from .core.coasters.service import CoasterService
from .core.coasters.store import CoasterStore
from .infrastructure.store import create_coaster_store

# Configure logging
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Logs configuration problems on startup and releases the store's
    resources (connection pool) on shutdown.
    """
    settings: Settings = app.state.settings

    logger.info(
        "Coaster API starting",
        extra={
            "version": settings.api_version,
            "store": settings.coaster_store,
            "id_strategy": settings.id_strategy,
        }
    )

    missing_fields = settings.validate_required_fields()
    if missing_fields:
        # The admin portal stays locked; the coaster routes still work.
        logger.error(
            "Missing required configuration",
            extra={"missing_fields": missing_fields}
        )

    yield

    close = getattr(app.state.coaster_store, "close", None)
    if callable(close):
        close()
    logger.info("Coaster API shutting down")


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[CoasterStore] = None,
    id_generator: Optional[IdGenerator] = None,
    selector: Optional[RandomSelector] = None,
) -> FastAPI:
    """
    Application factory.

    Anything not passed in is built from ``settings``. The store, id
    generator and random selector are created once here and shared by every
    request the app serves.
    """
    settings = settings or get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description="""
        CRUD API for roller coasters.

        - `GET /api/v1/coasters` lists every coaster
        - `GET /api/v1/coasters/random` redirects to a random coaster
        - `POST /api/v1/coasters` creates one (`content-type: application/json`)
        - `PUT /api/v1/coasters/{id}` replaces one
        - `DELETE /api/v1/coasters/{id}` deletes one
        """,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    prefix = settings.api_prefix.rstrip("/")
    store = store if store is not None else create_coaster_store(settings)

    app.state.settings = settings
    app.state.coaster_store = store
    app.state.coaster_service = CoasterService(
        store=store,
        id_generator=id_generator or create_id_generator(settings.id_strategy),
        selector=selector or RandomSelector(),
        location_prefix=f"{prefix}/coasters",
        expose_storage_errors=settings.expose_storage_errors,
    )
    app.state.admin_portal = AdminPortal(settings.admin_password)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(
        health.router,
        prefix="/health",
        tags=["Health"],
    )

    app.include_router(
        coasters.router,
        prefix=f"{prefix}/coasters",
        tags=["Coasters"],
    )

    app.include_router(
        admin.router,
        prefix=f"{prefix}/admin",
        tags=["Admin"],
    )

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "message": settings.api_title,
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        """
        Catch-all exception handler.

        Coaster routes map their own failures; this only sees bugs. The
        full error is logged server-side and the client gets a generic message.
        """
        logger.error(
            "Unhandled exception",
            extra={
                "path": request.url.path,
                "method": request.method,
                "error": str(exc),
            },
            exc_info=exc,
        )

        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error."}
        )

    logger.info(
        "FastAPI application created",
        extra={
            "title": settings.api_title,
            "version": settings.api_version,
            "prefix": prefix,
        }
    )

    return app


# Create the application instance
# This is what uvicorn imports
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "coaster_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
