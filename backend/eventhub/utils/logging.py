"""
Logging and Logfire integration.

Functions:
- configure_logging(settings): Set up stdlib logging and Logfire
- instrument_app(app): Attach Logfire request tracing to the FastAPI app
"""

import logging

import logfire
from fastapi import FastAPI

from eventhub import __version__
from eventhub.config.settings import Settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """
    Configure stdlib logging and Logfire.

    Logfire only exports when a token is configured; without one it still
    provides the structured logfire.info/logfire.error calls used at startup.
    """
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logfire.configure(
        token=settings.logfire_token or None,
        send_to_logfire="if-token-present",
        service_name="eventhub",
        service_version=__version__,
        environment=settings.environment,
        console=False,
    )

    if not settings.logfire_token:
        logger.info("Logfire token not set - cloud export disabled")
        return

    # Bridge Python logging to Logfire
    root_logger = logging.getLogger()
    if not any(isinstance(h, logfire.LogfireLoggingHandler) for h in root_logger.handlers):
        root_logger.addHandler(logfire.LogfireLoggingHandler())


def instrument_app(app: FastAPI) -> None:
    """Instrument FastAPI and PyMongo; skipped when the extras are missing."""
    try:
        logfire.instrument_fastapi(app)
    except Exception as e:
        logger.debug(f"FastAPI instrumentation skipped: {e}")

    try:
        logfire.instrument_pymongo()
    except Exception as e:
        logger.debug(f"PyMongo instrumentation skipped: {e}")
