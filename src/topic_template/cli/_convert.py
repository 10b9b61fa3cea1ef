# pyright: reportUnusedCallResult=false
# ruff: noqa: A002, D415
"""Convert command: CSV file to template document."""

from pathlib import Path  # noqa: TC003 - Path needed at runtime for cyclopts
from typing import Annotated

from cyclopts import Parameter
from rich.console import Console

from topic_template.exceptions import TemplateIOError, TemplateValidationError
from topic_template.template import (
    DocumentFormat,
    Template,
    TopicIdentity,
    convert_file,
    write_document_atomic,
)

from ._context import CLIContext
from ._exit_codes import ExitCode


def _print_summary(template: Template, output: Path) -> None:
    print(f"✓ Template written to {output}")  # noqa: T201
    print(f"  ID: {template.id}")  # noqa: T201
    print(f"  Name: {template.name}")  # noqa: T201
    print(f"  Description: {template.description}")  # noqa: T201
    print(f"  Category: {template.category}")  # noqa: T201
    print(f"  Phases: {len(template.phases)}")  # noqa: T201
    print(f"  Sections: {len(template.sections)}")  # noqa: T201
    print(f"  Topics: {len(template.topics)}")  # noqa: T201
    print(f"  Tags: {len(template.tags)}")  # noqa: T201


def convert_command(
    input: Path,
    output: Path,
    name: str,
    description: str,
    category: str | None = None,
    *,
    format: Annotated[
        DocumentFormat | None,
        Parameter(name="--format", help="Output format (json, yaml)"),
    ] = None,
    topic_identity: Annotated[
        TopicIdentity | None,
        Parameter(
            name="--topic-identity",
            help="Match topics by title only, or by phase, section and title",
        ),
    ] = None,
) -> None:
    """Convert a topic CSV file into a needs-map template

    Args:
        input: CSV file with phase, section, topic, prompt and tags columns.
        output: Path of the template document to write.
        name: Template name.
        description: Template description.
        category: Template category (defaults to the configured category).
        format: Output format. Defaults to the configured format.
        topic_identity: Topic identity policy. Defaults to the configured policy.
    """
    ctx = CLIContext.get_current()
    logger = ctx.get_logger("convert")
    error_console = Console(stderr=True)

    effective_category = category or ctx.config.converter.default_category
    effective_format = format or ctx.config.output.format
    effective_identity = topic_identity or ctx.config.converter.topic_identity

    try:
        template = convert_file(
            input,
            name,
            description,
            effective_category,
            topic_identity=effective_identity,
            logger=logger,
        )
    except TemplateIOError as e:
        error_console.print(f"Error: {e}")
        raise SystemExit(ExitCode.IO_ERROR) from None
    except TemplateValidationError as e:
        error_console.print("Error: CSV validation failed")
        for message in e.errors:
            error_console.print(f"  - {message}")
        raise SystemExit(ExitCode.VALIDATION_ERROR) from None

    try:
        write_document_atomic(output, template.to_dict(), effective_format)
    except TemplateIOError as e:
        error_console.print(f"Error: {e}")
        raise SystemExit(ExitCode.IO_ERROR) from None

    logger.info("Template written", path=str(output), template_id=template.id)

    if not ctx.quiet:
        _print_summary(template, output)
        if ctx.verbose and template.tags:
            print(f"  Tag list: {', '.join(template.tags)}")  # noqa: T201
