"""Structured logging for hicframe drawing sessions.

Every log event carries the id of the active page and the name of the
viewport most recently registered on it. A Page sets both when it enters
its context manager or registers a viewport (e.g. "loopAnnotation2"), and
clears them when closed, so the diagnostics of one annotation call can be
filtered out of a multi-panel figure's log. Output is JSON for batch
figure generation or colored console text for interactive work.
"""

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from hicframe.config import settings

# Set by Page; read by _add_correlation_ids on every event.
_page_id: ContextVar[str | None] = ContextVar("page_id", default=None)
_viewport: ContextVar[str | None] = ContextVar("viewport", default=None)


def set_correlation_context(
    page_id: str | None = None,
    viewport: str | None = None,
) -> None:
    """Record the active page and viewport for subsequent log events.

    Omitted values keep their current setting, so registering a second
    viewport on the same page only replaces the viewport name.

    Args:
        page_id: Identifier of the active page (drawing session).
        viewport: Name of the viewport being composed or filled.
    """
    if page_id is not None:
        _page_id.set(page_id)
    if viewport is not None:
        _viewport.set(viewport)


def clear_correlation_context() -> None:
    """Forget the active page and viewport (called when a page closes)."""
    _page_id.set(None)
    _viewport.set(None)


def _add_correlation_ids(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor adding page_id and viewport when they are set."""
    _ = logger, method_name  # Required by structlog processor signature
    page_id = _page_id.get()
    viewport = _viewport.get()

    if page_id is not None:
        event_dict["page_id"] = page_id
    if viewport is not None:
        event_dict["viewport"] = viewport

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_correlation_ids,
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
