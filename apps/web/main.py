"""
Pursuit Web Entry Point.

Startup sequence:
- Configure logging
- Assemble settings from ``PURSUIT_`` environment variables
- Exit with the error message if any setting is missing or malformed
- Serve the FastAPI application with the assembled settings

No socket is opened before the settings are fully assembled.
"""

import os
import sys

import uvicorn
from fastapi import FastAPI

from apps import __version__
from apps.web.routers import health
from pursuit_config import AppSettings, BUILD_MODE, BuildMode, Failure, LoggingSettings, assemble
from pursuit_obs.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(settings: AppSettings) -> FastAPI:
    """Build the application around an already assembled settings record."""
    app = FastAPI(
        title="Pursuit",
        version=__version__,
        debug=settings.should_log_all,
    )
    app.state.settings = settings
    app.include_router(health.router, prefix="", tags=["health"])
    return app


def load_or_exit(build_mode: BuildMode = BUILD_MODE) -> AppSettings:
    """Assemble settings from the process environment, exiting on failure."""
    result = assemble(os.environ, build_mode)

    if isinstance(result, Failure):
        sys.exit(result.error.message)

    return result.settings


def run(build_mode: BuildMode = BUILD_MODE) -> None:
    setup_logging(LoggingSettings())

    settings = load_or_exit(build_mode)
    logger.info(
        "pursuit.starting",
        build_mode=build_mode.value,
        approot=settings.app_root,
        host=str(settings.host),
        port=settings.port,
    )

    uvicorn.run(
        create_app(settings),
        host=settings.host.bind_address(),
        port=settings.port,
        proxy_headers=settings.ip_from_header,
        access_log=settings.detailed_request_logging,
        log_level="debug" if settings.should_log_all else "info",
    )


def main() -> None:
    run(BUILD_MODE)


if __name__ == "__main__":
    main()
