"""structlog setup: console output for local development, JSON otherwise."""

import logging
import sys

import structlog

from suntimes.config import Settings, settings as default_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Route structlog and stdlib logging through one processor chain.

    Args:
        settings: Settings to read env/log level from. Defaults to the
            module-level settings loaded from the environment.
    """
    settings = settings or default_settings
    is_local = settings.env.lower() == "development"

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if is_local:
        processors = shared_processors + [structlog.dev.ConsoleRenderer()]
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, settings.log_level, logging.INFO)
    # stdout is reserved for CLI output
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
