import logging
import sys

import structlog

from weather_cache.config import Settings


def configure_logging(settings: Settings) -> None:
    """
    Configure structlog on top of the standard logging module.

    Log lines go to stdout and, when LOG_FILE is set, to that file as well.
    LOG_FORMAT selects JSON lines or the console renderer.
    """
    level = getattr(logging, settings.log_level)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)

    # httpx logs full request URLs at INFO, query string (API key) included
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    structlog.get_logger(__name__).info(
        "Logging configured", level=settings.log_level, format=settings.log_format, file=settings.log_file
    )
