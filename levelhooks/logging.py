"""structlog configuration for levelhooks."""

import logging

import structlog

from .config import HookSettings, LoggingSettings


def configure_logging(settings: HookSettings | LoggingSettings | None = None) -> None:
    """Configure structlog output from settings.

    Args:
        settings: Hook or logging settings. Defaults to ``HookSettings()``.
    """
    if settings is None:
        settings = HookSettings()
    if isinstance(settings, HookSettings):
        settings = settings.logging

    renderer: structlog.types.Processor
    if settings.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.level)
        ),
        cache_logger_on_first_use=False,
    )
