"""FastAPI application factory.

Startup configures logging and registers the task routes, the health
check and the error handlers in one place.
"""

import logging

from fastapi import FastAPI

from ..config import TaskdeskSettings, get_settings
from ..logging_config import configure_logging
from .error_handlers import register_error_handlers
from .routes import build_health_router, build_router


logger = logging.getLogger(__name__)


def create_app(settings: TaskdeskSettings | None = None) -> FastAPI:
    """Create configured FastAPI application instance."""
    configure_logging()
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.api.title,
        description="Task resource: paginated listing, authoring support and CRUD.",
        debug=settings.debug_mode,
        openapi_tags=[
            {"name": "tasks", "description": "Task listing, authoring and CRUD."},
            {"name": "health", "description": "Service liveness."},
        ],
    )
    app.include_router(build_health_router())
    app.include_router(build_router(), prefix=settings.api.prefix)
    register_error_handlers(app)

    logger.info(f"API ready with task routes under '{settings.api.prefix or '/'}'")
    return app
