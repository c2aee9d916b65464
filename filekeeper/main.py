"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, storage backend, middleware, routers.
No business logic here. See filekeeper.core.lifespan and
filekeeper.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and clear
the get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI

from filekeeper.api import api_router
from filekeeper.core.config import get_settings
from filekeeper.core.exception_handlers import register_exception_handlers
from filekeeper.core.lifespan import create_lifespan
from filekeeper.infrastructure.external.storage import StorageFactory
from filekeeper.middleware import RequestIDMiddleware, RequestSizeLimitMiddleware
from filekeeper.shared.telemetry import setup_logging


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    # Backend chosen once per process; FileService receives it through get_storage_service.
    app.state.settings = settings
    app.state.storage = StorageFactory.create_storage_service(settings)

    register_exception_handlers(app)

    # Middleware: last added = outermost. Order: size limit -> request ID.
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=settings.max_upload_size)

    app.include_router(api_router)

    return app


app = create_app()
