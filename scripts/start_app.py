#!/usr/bin/env python3
"""Run the OER API under uvicorn.

Logfire is configured before the app module is imported, so failures while
building the app are reported too.
"""

import sys

import logfire
import uvicorn

from oer.config import Settings
from oer.util.logging import setup_logging
from oer.util.observability import configure_logfire

APP = "oer.interface.api.app:app"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info("Starting OER API", host=settings.host, port=settings.port)
    try:
        uvicorn.run(
            APP,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("OER API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
