"""CSV to needs-map template conversion.

Example:
    >>> from topic_template.template import convert
    >>> csv_text = "phase,section,topic,prompt,tags\\nP1,S1,T1,Ask about T1,a\\n"
    >>> template = convert(csv_text, "Hiring", "Hiring needs map")
    >>> [topic.title for topic in template.topics]
    ['T1']
"""

from ._converter import ConversionContext, convert, convert_file, topic_identity_key
from ._csv import ParsedCsv, parse_csv
from ._ids import PHASE_COLORS, NameToIdMapper, color_by_index, generate_id
from ._io import DocumentFormat, dump_document, read_csv_file, write_document_atomic
from ._models import (
    DEFAULT_CATEGORY,
    OPTIONAL_COLUMNS,
    REQUIRED_COLUMNS,
    Phase,
    Record,
    Section,
    Template,
    Topic,
    TopicIdentity,
    TopicStatus,
    ValidationResult,
    ValidationStatistics,
)
from ._validator import validate, validate_records

__all__ = [
    "DEFAULT_CATEGORY",
    "OPTIONAL_COLUMNS",
    "PHASE_COLORS",
    "REQUIRED_COLUMNS",
    "ConversionContext",
    "DocumentFormat",
    "NameToIdMapper",
    "ParsedCsv",
    "Phase",
    "Record",
    "Section",
    "Template",
    "Topic",
    "TopicIdentity",
    "TopicStatus",
    "ValidationResult",
    "ValidationStatistics",
    "color_by_index",
    "convert",
    "convert_file",
    "dump_document",
    "generate_id",
    "parse_csv",
    "read_csv_file",
    "topic_identity_key",
    "validate",
    "validate_records",
    "write_document_atomic",
]
