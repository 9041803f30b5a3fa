#!/usr/bin/env python3
"""Run the gateway under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from adgate.config import Settings
from adgate.util.logging import setup_logging
from adgate.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Before the app import, so instrumentation has somewhere to report
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting adgate {version} on port {port}",
        version=settings.version,
        port=settings.port,
    )
    try:
        uvicorn.run(
            "adgate.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("adgate failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
