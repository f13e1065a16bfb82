"""
Logging setup for Settings Bridge.

Produces the dictConfig payload shared by the app and by uvicorn. The
configured level applies to the ``settingsbridge`` logger only; uvicorn and
the root logger stay at INFO.
"""

import logging
import logging.config
from typing import Any, Dict

PACKAGE_LOGGER = "settingsbridge"

# Request lines uvicorn writes for health checks ("GET /healthz" included)
HEALTH_REQUEST_PREFIX = "GET /health"

UVICORN_HANDLERS = {
    "uvicorn": "default",
    "uvicorn.error": "default",
    "uvicorn.access": "access",
}


class HealthCheckFilter(logging.Filter):
    """Drop uvicorn access lines for the health endpoints."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name != "uvicorn.access":
            return True
        return HEALTH_REQUEST_PREFIX not in record.getMessage()


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """
    Build the logging configuration.

    Args:
        level: Level name for the settingsbridge logger, any case

    Returns:
        Dict accepted by logging.config.dictConfig and uvicorn's log_config
    """
    loggers: Dict[str, Any] = {
        name: {"handlers": [handler], "level": "INFO", "propagate": False}
        for name, handler in UVICORN_HANDLERS.items()
    }
    loggers[PACKAGE_LOGGER] = {
        "handlers": ["default"],
        "level": level.upper(),
        "propagate": False,
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"health_check_filter": {"()": HealthCheckFilter}},
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            },
            "access": {"format": "%(message)s"},
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
                "filters": ["health_check_filter"],
            },
        },
        "loggers": loggers,
        "root": {"level": "INFO", "handlers": ["default"]},
    }
