# pyright: reportUnusedCallResult=false
# ruff: noqa: A002, D415
"""Validate command: check a topic CSV file without converting it."""

from enum import StrEnum
from pathlib import Path  # noqa: TC003 - Path needed at runtime for cyclopts
from typing import Annotated

import orjson
from cyclopts import Parameter
from pytablewriter import MarkdownTableWriter
from rich.console import Console

from topic_template.exceptions import TemplateIOError
from topic_template.template import (
    ValidationResult,
    ValidationStatistics,
    read_csv_file,
    validate,
)

from ._context import CLIContext
from ._exit_codes import ExitCode


class ReportFormat(StrEnum):
    """Output formats for validation reports."""

    TEXT = "text"
    JSON = "json"
    TABLE = "table"


def format_statistics_table(statistics: ValidationStatistics) -> str:
    """Format validation statistics as a Markdown table."""
    writer = MarkdownTableWriter(
        headers=["Metric", "Count"],
        value_matrix=[
            ["Rows", statistics.total_rows],
            ["Phases", statistics.phase_count],
            ["Sections", statistics.section_count],
            ["Topics", statistics.topic_count],
        ],
        margin=1,
    )
    return writer.dumps()


def _format_text(path: Path, result: ValidationResult) -> str:
    lines: list[str] = [f"Validating {path}...", ""]

    lines.extend(f"  ERROR: {error}" for error in result.errors)
    lines.extend(f"  WARNING: {warning}" for warning in result.warnings)
    if result.errors or result.warnings:
        lines.append("")

    if result.statistics is not None:
        stats = result.statistics
        lines.append(
            f"Rows: {stats.total_rows}, Phases: {stats.phase_count}, "
            f"Sections: {stats.section_count}, Topics: {stats.topic_count}"
        )

    err = "error" if len(result.errors) == 1 else "errors"
    warn = "warning" if len(result.warnings) == 1 else "warnings"
    lines.append(
        f"Validation complete: {len(result.errors)} {err}, "
        f"{len(result.warnings)} {warn}"
    )
    return "\n".join(lines)


def _format_table(path: Path, result: ValidationResult) -> str:
    lines = [_format_text(path, result)]
    if result.statistics is not None:
        lines.extend(["", format_statistics_table(result.statistics).rstrip()])
    return "\n".join(lines)


def _format_json(path: Path, result: ValidationResult) -> str:
    data = {"file": str(path), **result.to_dict()}
    return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8")


def validate_command(
    input: Path,
    *,
    format: Annotated[
        ReportFormat,
        Parameter(name="--format", help="Output format (text, json, table)"),
    ] = ReportFormat.TEXT,
    strict: Annotated[
        bool,
        Parameter(name="--strict", help="Treat warnings as errors"),
    ] = False,
) -> None:
    """Validate a topic CSV file

    Checks the CSV for parse errors, missing required columns and empty
    required fields. Unrecognized columns and empty prompts are warnings
    unless --strict is used.

    Args:
        input: CSV file to validate.
        format: Output format (text, json, table).
        strict: If True, treat warnings as errors.
    """
    ctx = CLIContext.get_current()
    logger = ctx.get_logger("validate")

    try:
        text = read_csv_file(input)
    except TemplateIOError as e:
        Console(stderr=True).print(f"Error: {e}")
        raise SystemExit(ExitCode.IO_ERROR) from None

    result = validate(text)
    logger.info(
        "CSV validated",
        path=str(input),
        errors=len(result.errors),
        warnings=len(result.warnings),
    )

    if format == ReportFormat.JSON:
        output = _format_json(input, result)
    elif format == ReportFormat.TABLE:
        output = _format_table(input, result)
    else:
        output = _format_text(input, result)

    if not ctx.quiet or not result.is_valid or format == ReportFormat.JSON:
        print(output.rstrip())  # noqa: T201

    if not result.is_valid:
        raise SystemExit(ExitCode.VALIDATION_ERROR)
    if strict and result.warnings:
        raise SystemExit(ExitCode.STRICT_WARNINGS)
    raise SystemExit(ExitCode.SUCCESS)
