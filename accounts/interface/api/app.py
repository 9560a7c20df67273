"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from accounts.config import Settings
from accounts.interface.api.problem import register_exception_handlers
from accounts.interface.api.routes import health, users
from accounts.util.di.container import create_container, setup_di
from accounts.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does it.

    Args:
        container: DI container to use; the production container when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title=settings.api.title,
        description="User account management: registration, profile updates, "
        "password changes, status transitions and paginated listing",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    register_exception_handlers(app_instance)

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(users.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
