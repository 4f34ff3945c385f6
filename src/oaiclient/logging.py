"""Structured logging built on structlog over the stdlib logging module."""

import logging
import sys

import structlog


_configured = False

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


def configure_logging(level: str = "WARNING") -> None:
    """Configure structured logging for the CLI and for applications that want it.

    Handlers are bound to ``sys.__stderr__`` so that test runners swapping
    ``sys.stderr`` (typer's ``CliRunner`` for one) never leave logging pointed
    at a closed stream.
    """
    global _configured
    if _configured:
        return

    resolved = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.__stderr__)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("oaiclient")
    package_logger.addHandler(handler)
    package_logger.setLevel(resolved)
    package_logger.propagate = False

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger backed by the stdlib logger ``name``.

    Level filtering follows the stdlib logger, so nothing below WARNING is
    emitted until ``configure_logging`` lowers the level.

    Args:
        name: Optional name for the logger (usually __name__)

    Returns:
        A structlog bound logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
