"""Validation of CSV input before template conversion.

The validator runs ahead of the converter and collects every problem it
finds rather than stopping at the first one.
"""

from topic_template.exceptions import CsvParseError
from topic_template.template._csv import ParsedCsv, parse_csv
from topic_template.template._models import (
    OPTIONAL_COLUMNS,
    PROMPT_COLUMN,
    REQUIRED_COLUMNS,
    Record,
    ValidationResult,
    ValidationStatistics,
)

__all__ = ["validate", "validate_records"]

# Data rows are reported with the header line counted, so the first data row
# is row 2.
_HEADER_OFFSET = 1

NO_DATA_ROWS_MESSAGE = "No data rows found in CSV"


def _parse_error_message(error: CsvParseError) -> str:
    return f"CSV parse error ({error.failure.value}): {error}"


def _check_columns(columns: tuple[str, ...]) -> tuple[list[str], list[str]]:
    """Check the header against the required and optional column sets.

    Returns:
        Tuple of (errors, warnings).
    """
    errors = [
        f"Missing required column: {column}"
        for column in REQUIRED_COLUMNS
        if column not in columns
    ]

    recognized = set(REQUIRED_COLUMNS) | set(OPTIONAL_COLUMNS)
    unknown = [column for column in columns if column not in recognized]
    warnings: list[str] = []
    if unknown:
        warnings.append(
            f"Unrecognized columns will be ignored: {', '.join(unknown)}"
        )

    return errors, warnings


def _check_rows(
    parsed: ParsedCsv,
) -> tuple[list[str], list[str], ValidationStatistics]:
    """Check every data row for empty required fields.

    Returns:
        Tuple of (errors, warnings, statistics).
    """
    errors: list[str] = []
    warnings: list[str] = []
    seen: dict[str, set[str]] = {column: set() for column in REQUIRED_COLUMNS}

    for position, row in enumerate(parsed.rows, start=1):
        row_number = position + _HEADER_OFFSET

        for column in REQUIRED_COLUMNS:
            value = row.get(column, "").strip()
            if value:
                seen[column].add(value)
            else:
                errors.append(f"Row {row_number}: missing required field '{column}'")

        if not row.get(PROMPT_COLUMN, "").strip():
            warnings.append(f"Row {row_number}: empty '{PROMPT_COLUMN}' field")

    phases, sections, topics = (seen[column] for column in REQUIRED_COLUMNS)
    statistics = ValidationStatistics(
        total_rows=len(parsed.rows),
        phase_count=len(phases),
        section_count=len(sections),
        topic_count=len(topics),
    )
    return errors, warnings, statistics


def validate_records(text: str) -> tuple[ValidationResult, tuple[Record, ...]]:
    """Validate CSV text and return the parsed records alongside the result.

    Args:
        text: Raw CSV text.

    Returns:
        Tuple of (validation result, parsed records). Records are empty when
        the text could not be parsed.
    """
    try:
        parsed = parse_csv(text)
    except CsvParseError as e:
        return ValidationResult(errors=(_parse_error_message(e),)), ()

    if not parsed.rows:
        return ValidationResult(errors=(NO_DATA_ROWS_MESSAGE,)), ()

    column_errors, column_warnings = _check_columns(parsed.columns)
    row_errors, row_warnings, statistics = _check_rows(parsed)

    result = ValidationResult(
        errors=(*column_errors, *row_errors),
        warnings=(*column_warnings, *row_warnings),
        statistics=statistics,
    )
    records = tuple(Record.from_row(row) for row in parsed.rows)
    return result, records


def validate(text: str) -> ValidationResult:
    """Validate CSV text for structural and per-row correctness.

    Checks, in order: that the text parses as CSV, that it has at least one
    data row, that the required columns (phase, section, topic) are present,
    that no unrecognized columns appear (warning only), and that every row
    fills in the required fields. An empty prompt is reported as a warning.

    Args:
        text: Raw CSV text.

    Returns:
        The validation result. Statistics are present whenever the text
        parsed into at least one data row.
    """
    result, _ = validate_records(text)
    return result
