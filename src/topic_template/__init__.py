"""Convert topic taxonomy CSV files into needs-map template documents."""

from topic_template.exceptions import (
    CsvParseError,
    CsvParseFailure,
    TemplateIOError,
    TemplateValidationError,
    TopicTemplateError,
)
from topic_template.template import (
    NameToIdMapper,
    Phase,
    Section,
    Template,
    Topic,
    TopicIdentity,
    TopicStatus,
    ValidationResult,
    ValidationStatistics,
    color_by_index,
    convert,
    convert_file,
    generate_id,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "CsvParseError",
    "CsvParseFailure",
    "NameToIdMapper",
    "Phase",
    "Section",
    "Template",
    "TemplateIOError",
    "TemplateValidationError",
    "Topic",
    "TopicIdentity",
    "TopicStatus",
    "TopicTemplateError",
    "ValidationResult",
    "ValidationStatistics",
    "__version__",
    "color_by_index",
    "convert",
    "convert_file",
    "generate_id",
    "validate",
]
