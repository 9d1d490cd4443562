"""Logfire setup and library instrumentation.

Service code logs and traces through ``logfire`` directly::

    with logfire.span("vote_service.apply", action=action.value):
        logfire.info("Vote applied", votes=updated.votes)

This module only decides where that telemetry goes and which libraries are
traced automatically.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from quotevote.config import Settings

SERVICE_NAME = "quotevote-api"


def _should_send(settings: Settings) -> bool:
    """Explicit SEND_TO_LOGFIRE wins, otherwise send iff a token is set."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return settings.observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process, before the app is imported.

    Args:
        settings: Application settings
    """
    send = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``.

    Headers are not captured: they carry bearer tokens.

    Args:
        app: FastAPI application instance
    """

    def _request_attributes(request, attributes):
        extra = {}
        if hasattr(request, "method"):
            extra["method"] = request.method
        if hasattr(request, "url"):
            extra["path"] = request.url.path
        return {**attributes, **extra}

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run through ``engine``.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.debug("SQLAlchemy instrumented")
