"""Custom exceptions for refstyle.

All exceptions are namespaced under RefStyleError so callers can catch
any library error with a single except clause.

Formatting itself never raises for missing or partial record data; these
exceptions cover the static inputs the engine loads or is constructed with.
"""

from pathlib import Path
from typing import Any


class RefStyleError(Exception):
    """Base exception for all refstyle errors."""

    def __init__(self, message: str, style: str | None = None) -> None:
        """Initialize refstyle error.

        Args:
            message: Error description
            style: Name of the citation style involved, if any
        """
        self.style = style
        super().__init__(message)


class AbbreviationTableError(RefStyleError):
    """Raised when the journal-abbreviation table cannot be loaded.

    The table is static data bundled with the package (or pointed to by
    REFSTYLE_ABBREVIATIONS_PATH), so a broken file is a deployment problem
    rather than a record problem.
    """

    def __init__(
        self,
        message: str,
        path: Path | str,
        cause: Exception | None = None,
        style: str | None = None,
    ) -> None:
        """Initialize abbreviation table error.

        Args:
            message: Error description
            path: Location of the offending table
            cause: Original exception that caused this error
            style: Name of the citation style involved
        """
        self.path = Path(path)
        self.cause = cause
        if cause:
            self.__cause__ = cause
        super().__init__(message, style)


class StyleConfigurationError(RefStyleError):
    """Raised when a formatter is constructed with invalid knobs.

    Distinct from Python's built-in ValueError to carry the offending
    field name and value.
    """

    def __init__(
        self,
        message: str,
        field: str,
        value: Any | None = None,
        style: str | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error description
            field: The configuration field that failed validation
            value: The invalid value
            style: Name of the citation style involved
        """
        self.field = field
        self.value = value
        super().__init__(message, style)
