"""Observability configuration using Logfire.

Domain services and repositories open spans around each store operation
and log outcomes with structured attributes:

    with logfire.span("resource_service.upsert_resource", resource_id=resource_id):
        ...
        logfire.info("Resource saved", resource_id=resource_id, count=resource.count)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from oer.config import Settings

SERVICE_NAME = "oer-backend"
SERVICE_VERSION = "0.1.0"


def _should_send(settings: Settings) -> bool:
    """Explicit OBSERVABILITY__SEND_TO_LOGFIRE wins, else send when a token is set."""
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported."""
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=f"{SERVICE_VERSION}+{settings.git_sha}",
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    # Learning documents can be large; keep only validation errors for them
    if request.url.path.startswith(("/api/saveLearningScenario", "/api/saveLearningPath")):
        errors = attributes.get("errors")
        return {"errors": errors} if errors else None
    return attributes


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health probes."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/api/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement the engine executes."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy instrumented")
