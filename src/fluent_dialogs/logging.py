"""Structured logging configuration for fluent-dialogs.

This module provides structlog-based logging with:
- JSON output when FLUENT_DIALOGS_LOG_FORMAT=json
- Pretty console output otherwise (default)
- Context binding through contextvars; action handlers run inside
  dialog_context, so their log lines carry dialog_style and dialog_title

Usage:
    from fluent_dialogs.logging import get_logger, configure_logging

    configure_logging()

    log = get_logger(__name__)
    log = log.bind(dialog_style="alert")
    log.info("dialog_presented", surface="MainScreen")
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from structlog.types import Processor

from fluent_dialogs.constants import ENV_PREFIX

__all__ = [
    "get_logger",
    "configure_logging",
    "bind_context",
    "clear_context",
    "dialog_context",
]

# Environment variable for log format
LOG_FORMAT_ENV_VAR = f"{ENV_PREFIX}LOG_FORMAT"

# Environment variable for log level
LOG_LEVEL_ENV_VAR = f"{ENV_PREFIX}LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"


def _get_log_level() -> int:
    """Get the log level from environment or default.

    Returns:
        Logging level constant (e.g., logging.WARNING).
    """
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.WARNING)


def _is_json_output() -> bool:
    return os.environ.get(LOG_FORMAT_ENV_VAR, "").lower() == "json"


def _get_shared_processors() -> list[Processor]:
    """Get processors shared between stdlib and structlog."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _get_development_processors() -> list[Processor]:
    return [
        *_get_shared_processors(),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        ),
    ]


def _get_production_processors() -> list[Processor]:
    return [
        *_get_shared_processors(),
        structlog.processors.dict_tracebacks,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(
    *,
    force_json: bool = False,
    level: int | None = None,
) -> None:
    """Configure structlog for the application.

    Call once at startup; later calls reconfigure. Logs go to stderr so they
    never mix with a terminal UI drawn on stdout.

    Args:
        force_json: Force JSON output regardless of environment variable.
        level: Override log level. If None, reads FLUENT_DIALOGS_LOG_LEVEL.
    """
    use_json = force_json or _is_json_output()
    log_level = level if level is not None else _get_log_level()

    if use_json:
        processors = _get_production_processors()
    else:
        processors = _get_development_processors()

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    renderer: Processor
    if use_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=_get_shared_processors(),
        )
    )

    root_logger.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the caller's module name.

    Returns:
        A bound structlog logger.

    Example:
        log = get_logger(__name__)
        log.debug("artifact_created", style="alert")
    """
    log: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return log


def bind_context(**context: Any) -> None:
    """Bind context variables that will be included in all log messages.

    Args:
        **context: Key-value pairs to bind to log context.
    """
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


@contextmanager
def dialog_context(**context: Any) -> Iterator[None]:
    """Bind context variables for the duration of a block.

    Values bound before entering are restored on exit, so nested dialogs
    and callers' own context are left intact.

    Example:
        with dialog_context(dialog_style="alert", dialog_title="Delete?"):
            log.info("deleting")
    """
    with structlog.contextvars.bound_contextvars(**context):
        yield
