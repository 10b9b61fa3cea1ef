"""topic-template exceptions."""

from enum import StrEnum
from pathlib import Path  # noqa: TC003 - Used at runtime in type annotation
from typing import Any


class TopicTemplateError(Exception):
    """Base exception for topic-template errors."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(TopicTemplateError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


# =============================================================================
# CSV / Template Exceptions
# =============================================================================


class CsvParseFailure(StrEnum):
    """Classified causes of a CSV parse failure."""

    INCONSISTENT_COLUMNS = "inconsistent_columns"
    UNCLOSED_QUOTE = "unclosed_quote"
    INVALID_QUOTE = "invalid_quote"
    INVALID_CHARACTER = "invalid_character"
    MALFORMED = "malformed"


class CsvParseError(TopicTemplateError, ValueError):
    """Raised when CSV text cannot be decoded into rows and columns.

    Attributes:
        failure: The classified cause of the failure.
        line: The 1-based line number where parsing stopped, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        failure: CsvParseFailure,
        line: int | None = None,
    ) -> None:
        """Initialize with error message and parse context.

        Args:
            message: Human-readable error message.
            failure: The classified cause of the failure.
            line: The 1-based line number where parsing stopped.
        """
        super().__init__(message)
        self.failure: CsvParseFailure = failure
        self.line: int | None = line


class TemplateValidationError(TopicTemplateError, ValueError):
    """Raised when CSV input fails validation before conversion.

    Carries every validation error so callers see the complete list in a
    single failure.

    Attributes:
        errors: All validation error messages, in detection order.
        warnings: Non-fatal warnings reported alongside the errors.
    """

    def __init__(
        self,
        errors: tuple[str, ...] | list[str],
        *,
        warnings: tuple[str, ...] | list[str] = (),
    ) -> None:
        """Initialize with the collected validation messages.

        Args:
            errors: All validation error messages.
            warnings: Non-fatal warnings from the same validation run.
        """
        self.errors: tuple[str, ...] = tuple(errors)
        self.warnings: tuple[str, ...] = tuple(warnings)
        super().__init__("CSV validation failed:\n" + "\n".join(self.errors))


class TemplateIOError(TopicTemplateError):
    """Raised when reading CSV input or writing a template document fails.

    Attributes:
        path: The file path involved in the operation.
        operation: The operation that failed ("read" or "write").
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path,
        operation: str,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and I/O context.

        Args:
            message: Human-readable error message.
            path: The file path involved in the operation.
            operation: The operation that failed.
            cause: The underlying exception.
        """
        super().__init__(message)
        self.path: Path = path
        self.operation: str = operation
        self.cause: Exception | None = cause
