"""
Logging setup for the cargo shipping service.

Use cases log rejected bookings and handling reports at WARNING and
unexpected service failures with their traceback. Cargo payloads and
request bodies are never written to the log; tracking ids are.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Per-request access lines from the ASGI server and rate limiter.
QUIET_LOGGERS = ("uvicorn.access", "slowapi")


def configure_logging(level: str = "INFO") -> None:
    """Route every logger of the service to stdout in one format.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Unknown names fall back to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
