"""ABOUTME: structlog configuration for authfactors
ABOUTME: Routes structlog and stdlib records through one JSON or console handler

Importing this module configures the root logger and structlog globally, so
the package itself never imports it. The embedding application imports it
once at startup, then calls ``logging_setup()`` to apply the configured level."""

import logging.config
from typing import Any

import structlog

from authfactors import config

timestamper = structlog.processors.TimeStamper(fmt="iso")

# records that did not come from structlog still get a level and timestamp
foreign_pre_chain = [structlog.stdlib.add_log_level, timestamper]

handler_to_use = "console" if config.is_development() else "json"


def _formatter(renderer: Any) -> dict[str, Any]:
    return {
        "()": structlog.stdlib.ProcessorFormatter,
        "processor": renderer,
        "foreign_pre_chain": foreign_pre_chain,
    }


def build_logging_config(handler_name: str, level: int) -> dict[str, Any]:
    """Return a dictConfig mapping that sends everything to ``handler_name``."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": _formatter(structlog.dev.ConsoleRenderer(colors=False)),
            "json": _formatter(structlog.processors.JSONRenderer()),
        },
        "handlers": {
            name: {"level": level, "class": "logging.StreamHandler", "formatter": name} for name in ("console", "json")
        },
        "loggers": {
            "": {"handlers": [handler_name], "level": level, "propagate": True},
        },
    }


logging.config.dictConfig(build_logging_config(handler_to_use, config.get_log_level()))

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)


def logging_setup(log_level: int | None = None) -> None:
    """Apply a log level to the root logger and the active handler.

    Falls back to ``LOG_LEVEL`` from the environment. ``LOG_DEBUG_EVENTS``
    forces the authfactors loggers down to DEBUG regardless.
    """
    if log_level is None:
        log_level = config.get_log_level()

    active_handler = logging.getHandlerByName(handler_to_use)
    assert active_handler is not None
    active_handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    package_logger = logging.getLogger("authfactors")
    if config.should_log_debug_events():
        active_handler.setLevel(logging.DEBUG)
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.NOTSET)
