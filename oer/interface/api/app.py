"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from oer.config import Settings
from oer.interface.api.routes import documents, health, keywords, resources
from oer.interface.error import register_error_handlers
from oer.util.di.container import create_container, setup_di
from oer.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the OER API application.

    Logfire must already be configured: scripts/start_app.py does it in
    production and tests/conftest.py in tests.

    Args:
        container: Container serving route dependencies. Tests pass one built
            with in-memory repositories; by default the PostgreSQL-backed
            production container is used.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="OER Backend API",
        description="Keywords, OERs with usage counts and likes, learning scenarios and learning paths",
        version="0.1.0",
    )
    instrument_fastapi(app_instance)

    # Browser clients call the API directly, so preflights must succeed
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "Authorization"],
        max_age=600,
    )

    register_error_handlers(app_instance)
    setup_di(app_instance, container if container is not None else create_container())

    for module in (health, keywords, resources, documents):
        app_instance.include_router(module.router)

    return app_instance


# Module-level instance for uvicorn ("oer.interface.api.app:app")
app = create_app()
