"""Structured logging for the ``monaditto`` logger tree.

Library modules log through the standard ``logging`` module and never
install handlers. Applications that want those records rendered through
structlog call ``configure_logging`` once at startup.
"""

import logging

import structlog

from monaditto.config.settings import Environment, Settings, get_settings

LIBRARY_LOGGER = "monaditto"

_LOG_NAME_TO_LEVEL: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _renderer(settings: Settings) -> structlog.types.Processor:
    if settings.ENVIRONMENT == Environment.DEV:
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Configure structlog and route the library's stdlib records through it.

    Safe to call more than once; the previous handler is replaced.

    Returns:
        The configured ``monaditto`` stdlib logger.
    """
    settings = settings or get_settings()
    level = _LOG_NAME_TO_LEVEL[settings.LOG_LEVEL.value]
    renderer = _renderer(settings)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    lib_logger = logging.getLogger(LIBRARY_LOGGER)
    lib_logger.handlers = [handler]
    lib_logger.setLevel(level)
    lib_logger.propagate = False
    return lib_logger
