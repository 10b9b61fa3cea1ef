# pyright: reportAny=false, reportExplicitAny=false, reportUnknownArgumentType=false
"""Configuration validation using Pydantic schemas.

Validates configuration dictionaries against the frozen section models and
reports problems as ValidationIssue records keyed by dotted path.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import ErrorDetails

from topic_template.config._models import ConverterConfig, LoggingConfig, OutputConfig
from topic_template.exceptions import ConfigValidationError


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Represents a configuration validation issue.

    Attributes:
        key: Dotted path to the configuration key (e.g., "logging.level").
        message: Human-readable description of the issue.
        expected: Description of expected value or type, if available.
        actual: The actual value that caused the issue.
        severity: Whether this is an error or warning.
    """

    key: str
    message: str
    expected: str | None
    actual: Any
    severity: Literal["error", "warning"] = "error"


class ConfigSchema(BaseModel):
    """Pydantic schema for the root configuration (ignores unknown keys)."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    converter: ConverterConfig = ConverterConfig()
    output: OutputConfig = OutputConfig()


def _pydantic_error_to_issue(error: ErrorDetails) -> ValidationIssue:
    """Convert a Pydantic error dict to a ValidationIssue."""
    key = ".".join(str(part) for part in error.get("loc", ()))
    message = str(error.get("msg", "Validation error"))

    ctx = error.get("ctx")
    expected: str | None = None
    if ctx is not None:
        if "expected" in ctx:
            expected = str(ctx["expected"])
        elif "min_length" in ctx:
            expected = f"at least {ctx['min_length']} character(s)"

    return ValidationIssue(
        key=key,
        message=message,
        expected=expected,
        actual=error.get("input"),
    )


def validate_config(config: dict[str, Any]) -> list[ValidationIssue]:
    """Validate a merged configuration dictionary.

    Args:
        config: The merged configuration dictionary to validate.

    Returns:
        List of ValidationIssue objects. Empty list indicates valid config.
    """
    try:
        _ = ConfigSchema.model_validate(config)
    except ValidationError as e:
        return [_pydantic_error_to_issue(err) for err in e.errors()]
    else:
        return []


def raise_if_validation_errors(
    issues: list[ValidationIssue],
    source: str | None = None,
) -> None:
    """Raise ConfigValidationError for the first error-severity issue.

    Args:
        issues: List of ValidationIssue objects to check.
        source: Optional source label to attach to the exception.

    Raises:
        ConfigValidationError: If any issues have severity="error".
    """
    errors = [i for i in issues if i.severity == "error"]
    if errors:
        issue = errors[0]
        msg = f"Invalid configuration value for '{issue.key}'"
        raise ConfigValidationError(
            msg,
            key=issue.key,
            value=issue.actual,
            expected=issue.expected or issue.message,
            source=source,
        )
