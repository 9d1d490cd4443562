#!/usr/bin/env python3
"""Serve the quote API with uvicorn."""

import sys

import logfire
import uvicorn

from quotevote.config import Settings
from quotevote.util.logging import setup_logging
from quotevote.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Configured before the app module is imported by uvicorn
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Serving quotevote on port {port}",
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            "quotevote.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("quotevote failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
