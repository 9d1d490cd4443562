"""FastAPI application factory for the Quote Vote API."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quotevote.config import Settings
from quotevote.interface.api.error_handlers import register_error_handlers
from quotevote.interface.api.routes import auth, health, quotes
from quotevote.util.di.container import create_container, setup_di
from quotevote.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Assemble the API: routers, error handlers, CORS, tracing and DI.

    Logfire is expected to be configured by the caller (``scripts/start_app.py``
    in deployments, ``tests/conftest.py`` under pytest).
    """
    settings = Settings()

    api = FastAPI(
        title="Quote Vote API",
        description="Submit, browse and vote on short quotes",
        version="0.1.0",
    )
    instrument_fastapi(api)

    api.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(api, create_container())

    for module in (health, auth, quotes):
        api.include_router(module.router)

    register_error_handlers(api)
    return api


# ASGI entry point for uvicorn
app = create_app()
