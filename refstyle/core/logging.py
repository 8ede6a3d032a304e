"""Structured logging for the library.

Engine loggers are structlog loggers bound to stdlib loggers under the
"refstyle" namespace, which carries a NullHandler. Nothing is written
anywhere unless the host configures stdlib logging or calls
`configure_logging()`.

`configure_logging()` attaches one handler rendering JSON in
production/staging and key-value console lines otherwise.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import Processor

from refstyle.core.config import get_settings


LIBRARY_LOGGER = "refstyle"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())

_PROCESSORS: list[Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]

_handler: logging.Handler | None = None


def add_service_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add library context to all log entries."""
    settings = get_settings()
    event_dict["service"] = settings.service_name
    event_dict["environment"] = settings.environment
    return event_dict


def configure_logging(stream: TextIO | None = None) -> logging.Handler:
    """Attach a rendering handler to the library logger.

    Calling it again replaces the previously attached handler.

    Args:
        stream: Output stream, stderr by default.

    Returns:
        The attached handler.
    """
    global _handler

    settings = get_settings()
    use_json = settings.environment in ("production", "staging")
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.TimeStamper(fmt="iso"),
                add_service_context,
                renderer,
            ],
        )
    )

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    if _handler is not None:
        library_logger.removeHandler(_handler)
    library_logger.addHandler(handler)
    library_logger.setLevel(settings.log_level.upper())
    _handler = handler
    return handler


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger under the library namespace.

    Example:
        ```python
        from refstyle.core.logging import get_logger

        logger = get_logger(__name__)
        logger.debug("canonical_parent_resolved", entry_type="chapter")
        ```
    """
    return structlog.wrap_logger(
        logging.getLogger(name or LIBRARY_LOGGER),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


Logger = structlog.stdlib.BoundLogger
