from pathlib import Path

import pytest

from topic_template.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    CsvParseError,
    CsvParseFailure,
    TemplateIOError,
    TemplateValidationError,
    TopicTemplateError,
)


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "exc_type",
        [
            ConfigError,
            ConfigLoadError,
            ConfigValidationError,
            CsvParseError,
            TemplateIOError,
            TemplateValidationError,
        ],
    )
    def test_all_derive_from_base(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, TopicTemplateError)

    def test_input_errors_are_value_errors(self) -> None:
        assert issubclass(CsvParseError, ValueError)
        assert issubclass(TemplateValidationError, ValueError)


class TestTemplateValidationError:
    def test_message_lists_every_error(self) -> None:
        error = TemplateValidationError(
            ["Missing required column: topic", "Row 2: missing required field 'topic'"]
        )

        assert str(error) == (
            "CSV validation failed:\n"
            "Missing required column: topic\n"
            "Row 2: missing required field 'topic'"
        )

    def test_keeps_errors_and_warnings(self) -> None:
        error = TemplateValidationError(["e"], warnings=["w"])

        assert error.errors == ("e",)
        assert error.warnings == ("w",)


class TestContextAttributes:
    def test_csv_parse_error(self) -> None:
        error = CsvParseError(
            "bad", failure=CsvParseFailure.UNCLOSED_QUOTE, line=3
        )

        assert error.failure is CsvParseFailure.UNCLOSED_QUOTE
        assert error.line == 3

    def test_template_io_error(self) -> None:
        cause = OSError("disk full")
        error = TemplateIOError(
            "Failed", path=Path("/out.json"), operation="write", cause=cause
        )

        assert error.path == Path("/out.json")
        assert error.operation == "write"
        assert error.cause is cause

    def test_config_load_error_defaults(self) -> None:
        error = ConfigLoadError("bad")

        assert (error.path, error.line, error.column) == (None, None, None)
