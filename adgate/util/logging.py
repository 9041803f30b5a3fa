"""Logging configuration for the application."""

import logging
import sys

from adgate.config import Settings

# httpx and httpcore log full request URLs, which carry the upstream msToken
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Route modules log through the stdlib ``logging`` module; domain and
    adapter code reports through Logfire.

    Args:
        settings: Application settings
    """
    level = _level_for(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("adgate").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, "
        f"level={logging.getLevelName(level)}"
    )

    if not settings.auth.pin_allowlist:
        logger.warning("AUTH__VALID_PINS is empty; PIN credentials will be refused")
    if settings.auth.jwt_secret == "CHANGE_ME_IN_PRODUCTION":
        logger.warning("AUTH__JWT_SECRET is the default; session tokens are forgeable")
