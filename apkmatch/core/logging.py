"""
Structured logging configuration for apkmatch.

structlog events are handed to the standard library logger named "apkmatch"
and rendered by a handler on that logger, on stderr, so stdout stays reserved
for matched APK paths. Handlers look up sys.stderr when a record is written,
never when logging is configured, so configuring logging more than once (or
from inside a test runner that swaps streams) is safe.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from .config import Config

ROOT_LOGGER_NAME = "apkmatch"


class _CurrentStderrHandler(logging.StreamHandler):
    """Stream handler writing to whatever sys.stderr is at emit time."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def _build_handler(json_output: bool, log_level: str) -> logging.Handler:
    if json_output:
        handler: logging.Handler = _CurrentStderrHandler()
        renderers: list[structlog.types.Processor] = [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # Console(stderr=True) resolves sys.stderr on every write
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_level=False,
            rich_tracebacks=True,
            tracebacks_show_locals=log_level == "DEBUG",
        )
        renderers = [structlog.dev.ConsoleRenderer(colors=False)]

    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
        )
    )
    return handler


def setup_logging(config: Config | None = None, json_output: bool | None = None) -> None:
    """Configure structured logging for the application.

    Safe to call repeatedly; each call replaces the previous handler.

    Args:
        config: Optional configuration. If None, uses INFO level.
        json_output: Force JSON (True) or console (False) rendering. By
            default JSON is used when stderr is not a terminal.
    """
    log_level = config.log_level if config else "INFO"
    if json_output is None:
        json_output = not sys.stderr.isatty()

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for old_handler in list(root.handlers):
        root.removeHandler(old_handler)
    root.addHandler(_build_handler(json_output, log_level))
    root.setLevel(getattr(logging, log_level, logging.INFO))
    root.propagate = False

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def reset_logging() -> None:
    """Undo setup_logging: drop the handler and restore structlog defaults."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True
    structlog.reset_defaults()


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured bound logger
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: object) -> None:
    """Bind context variables, e.g. the package being resolved, to later log entries."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
