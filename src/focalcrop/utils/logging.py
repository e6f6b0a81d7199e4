"""structlog setup for the focalcrop CLI.

Every event carries the image being processed and, for crops, the requested
size, so interleaved runs can be told apart. Output goes to stderr, either
as colored console lines or as one JSON object per line.
"""

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from focalcrop.config import settings

_image_id: ContextVar[str | None] = ContextVar("image_id", default=None)
_target: ContextVar[str | None] = ContextVar("target", default=None)

_CONTEXT_FIELDS: tuple[tuple[str, ContextVar[str | None]], ...] = (
    ("image_id", _image_id),
    ("target", _target),
)


def set_correlation_context(
    image_id: str | None = None,
    target: str | None = None,
) -> None:
    """Tag subsequent log events. Arguments left as None keep their value.

    Args:
        image_id: The image being processed, usually its path.
        target: Requested crop size as "WIDTHxHEIGHT".
    """
    if image_id is not None:
        _image_id.set(image_id)
    if target is not None:
        _target.set(target)


def clear_correlation_context() -> None:
    for _, var in _CONTEXT_FIELDS:
        var.set(None)


def _add_correlation_ids(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    _ = logger, method_name
    for key, var in _CONTEXT_FIELDS:
        value = var.get()
        if value is not None:
            event_dict[key] = value
    return event_dict


def _renderer_chain(log_format: str) -> list[Processor]:
    if log_format == "json":
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """(Re)configure structlog and the stdlib root logger.

    Safe to call more than once; the last call wins.

    Args:
        level: Minimum level name, e.g. "DEBUG". Defaults to LOG_LEVEL.
        log_format: "console" or "json". Defaults to LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            _add_correlation_ids,
            *_renderer_chain(log_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # stdout is reserved for command output
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
