"""Core module - Configuration, logging, and exceptions.

Exports:
    - Settings, get_settings: Pydantic Settings configuration
    - configure_logging, get_logger: Structured logging (structlog)
    - Exception classes: RefStyleError, AbbreviationTableError, etc.
"""

from refstyle.core.config import Settings, get_settings
from refstyle.core.exceptions import (
    AbbreviationTableError,
    RefStyleError,
    StyleConfigurationError,
)
from refstyle.core.logging import configure_logging, get_logger


__all__ = [
    # Exceptions
    "AbbreviationTableError",
    "RefStyleError",
    # Configuration
    "Settings",
    "StyleConfigurationError",
    # Logging
    "configure_logging",
    "get_logger",
    "get_settings",
]
