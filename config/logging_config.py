"""Structured logging configuration using structlog."""

import logging
import sys

import structlog


def configure_logging(
    component: str, level: str = "INFO", json_logs: bool = True
) -> structlog.BoundLogger:
    """Configure structlog and return a bound logger for the component.

    JSON lines go to stdout in deployment; ``json_logs=False`` switches to the
    console renderer for local runs.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(component=component)
