"""Observability configuration using Logfire.

Logfire provides structured logging and tracing on top of OpenTelemetry,
with integrations for FastAPI and SQLAlchemy.

Usage:
    import logfire

    logfire.info("Vote cast", target_id=str(target_id), delta=delta)

    with logfire.span("comment_service.create_comment", post_id=str(post_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from paracosm.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Console output is always on. Records are sent to Logfire cloud when
    OBSERVABILITY__SEND_TO_LOGFIRE is true, or when it is unset and
    OBSERVABILITY__LOGFIRE_TOKEN is present.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs = {
        "service_name": "paracosm-api",
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Traces every request with its method, path and client host.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        if hasattr(request, "client") and request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,  # auth_token cookie must not end up in traces
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")
