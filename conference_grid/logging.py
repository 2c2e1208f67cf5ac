"""structlog setup for the conference grid library.

The library only emits log events; applications call setup_logging() once
to pick console or JSON output.
"""

import logging
import sys

import structlog


def setup_logging(json_output: bool = False, log_level: str = "INFO") -> None:
    """Configure structlog rendering and level filtering.

    Args:
        json_output: Render JSON lines instead of console output.
        log_level: Level name; unknown names fall back to INFO.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Logger bound with the calling module's name."""
    return structlog.get_logger(name)
