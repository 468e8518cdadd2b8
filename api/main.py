"""
FastAPI application for the product notification manager.

This application provides the REST API consumed by the web front end:
1. CRUD endpoints for customers, products and notification templates
2. Notification creation, listing (with date filtering) and deletion
3. Dashboard statistics and a machine-readable API description

Run with:
    uvicorn api.main:app --reload

Then visit http://localhost:8000/docs for interactive API documentation.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import customers, meta, notifications, products, templates
from notify_core.config import Settings, configure_logging, get_settings
from notify_core.factory import NotificationFactory
from notify_core.store import EntityStore

logger = logging.getLogger("api")


# Application lifespan
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    store: EntityStore = app.state.store
    logger.info(
        f"Starting {app.title}: {store.count_customers()} customers, "
        f"{store.count_products()} products, {store.count_templates()} templates"
    )
    yield
    logger.info("Shutting down")


# =============================================================================
# Error Handlers
# =============================================================================

async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report payload, query and path validation failures as 400."""
    errors = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"detail": "Invalid data", "errors": errors})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Hide unexpected failures behind a generic 500."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# =============================================================================
# Application Factory
# =============================================================================

def create_app(
    settings: Optional[Settings] = None,
    store: Optional[EntityStore] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Application settings (defaults to environment settings)
        store: Store to serve. When omitted a new store is created and,
               if enabled in settings, seeded with the sample fixtures.
        clock: Time source for notification timestamps and stats
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if store is None:
        store = EntityStore()
        if settings.seed_sample_data:
            store.load_fixtures(settings.data_dir)

    app = FastAPI(
        title=settings.app_name,
        description="""
        Manage customers, products and notification templates, and create
        product notifications for customers.

        ## Resources

        - `/api/customers` - Customers (unique email)
        - `/api/products` - Products (`?active=true` for active only)
        - `/api/templates` - Notification templates with `{{placeholder}}` tokens
        - `/api/notifications` - Notifications (`?from=&to=` date filtering)
        - `/api/stats` - Dashboard counters
        """,
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.factory = NotificationFactory(store, clock=clock)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    for router in (customers.router, products.router, notifications.router, templates.router, meta.router):
        app.include_router(router, prefix="/api")

    @app.get("/health", tags=["Health"])
    def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.app_name,
            "environment": settings.environment,
        }

    return app


app = create_app()
