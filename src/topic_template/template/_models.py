"""Data models for the topic template system.

This module defines the enums and dataclasses for CSV records, the template
document (phases, sections, topics) and validation results. All models are
frozen dataclasses with slots. Each document model renders itself into the
camelCase dictionary shape expected by needs-map consumers via ``to_dict()``.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Self

# Column names recognized in the CSV header
PHASE_COLUMN = "phase"
SECTION_COLUMN = "section"
TOPIC_COLUMN = "topic"
PROMPT_COLUMN = "prompt"
TAGS_COLUMN = "tags"

REQUIRED_COLUMNS: tuple[str, ...] = (PHASE_COLUMN, SECTION_COLUMN, TOPIC_COLUMN)
OPTIONAL_COLUMNS: tuple[str, ...] = (PROMPT_COLUMN, TAGS_COLUMN)

DEFAULT_CATEGORY = "general"


# =============================================================================
# Enums
# =============================================================================


class TopicStatus(StrEnum):
    """Topic extraction status values.

    Converted topics always start as pending; later states are owned by the
    needs-map engine that consumes the template.
    """

    PENDING = "pending"


class TopicIdentity(StrEnum):
    """Policy deciding when two CSV rows describe the same topic.

    TITLE merges every row sharing a topic title into the first topic seen,
    keeping that topic's original phase and section. SECTION keys topics by
    phase, section and title, so equal titles in different sections stay
    separate topics.
    """

    TITLE = "title"
    SECTION = "section"


# =============================================================================
# Input Records
# =============================================================================


@dataclass(frozen=True, slots=True)
class Record:
    """One parsed CSV data row.

    Attributes:
        phase: Phase name.
        section: Section name.
        topic: Topic title.
        tag: Tag attached to the topic on this row, or empty.
        extraction_prompt: Extraction prompt for the topic, or empty.
    """

    phase: str
    section: str
    topic: str
    tag: str = ""
    extraction_prompt: str = ""

    @classmethod
    def from_row(cls, row: dict[str, str]) -> Self:
        """Build a record from a parsed CSV row keyed by column name."""
        return cls(
            phase=row.get(PHASE_COLUMN, ""),
            section=row.get(SECTION_COLUMN, ""),
            topic=row.get(TOPIC_COLUMN, ""),
            tag=row.get(TAGS_COLUMN, ""),
            extraction_prompt=row.get(PROMPT_COLUMN, ""),
        )


# =============================================================================
# Template Document
# =============================================================================


@dataclass(frozen=True, slots=True)
class Phase:
    """Top-level taxonomy grouping.

    Attributes:
        id: Unique phase identifier.
        name: Phase name as it appears in the CSV.
        color: Display color assigned from the phase palette.
        description: Phase description (empty on creation).
    """

    id: str
    name: str
    color: str
    description: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "color": self.color,
        }


@dataclass(frozen=True, slots=True)
class Section:
    """Mid-level grouping owned by exactly one phase.

    Attributes:
        id: Unique section identifier.
        name: Section name as it appears in the CSV.
        phase_id: ID of the owning phase.
        index: 1-based position among the sections of the owning phase.
        description: Section description (empty on creation).
    """

    id: str
    name: str
    phase_id: str
    index: int
    description: str = ""

    def to_dict(self) -> dict[str, str | int]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "phaseId": self.phase_id,
            "index": self.index,
        }


@dataclass(frozen=True, slots=True)
class Topic:
    """Leaf-level taxonomy item.

    Attributes:
        id: Unique topic identifier.
        title: Topic title as it appears in the CSV.
        phase_id: ID of the phase the topic was first seen under.
        section_id: ID of the section the topic was first seen under.
        index: Global 1-based position in input order.
        extraction_prompt: Prompt describing how to extract the topic.
        status: Extraction status (always pending on creation).
        error: Extraction error (always None on creation).
        tags: Tags attached to the topic, in first-seen order.
    """

    id: str
    title: str
    phase_id: str
    section_id: str
    index: int
    extraction_prompt: str = ""
    status: TopicStatus = TopicStatus.PENDING
    error: str | None = None
    tags: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
        return {
            "id": self.id,
            "title": self.title,
            "phaseId": self.phase_id,
            "sectionId": self.section_id,
            "extractionPrompt": self.extraction_prompt,
            "status": self.status.value,
            "error": self.error,
            "index": self.index,
            "tags": list(self.tags),
        }


@dataclass(frozen=True, slots=True)
class Template:
    """The complete needs-map template document.

    Attributes:
        id: Unique document identifier.
        name: Template name supplied by the caller.
        description: Template description supplied by the caller.
        category: Template category.
        phases: Phases in first-seen order.
        sections: Sections grouped by phase, first-seen within each phase.
        topics: Topics in first-seen order.
        tags: Union of all topic tags, sorted.
        relations: Reserved, always empty.
        reasonings: Reserved, always empty.
    """

    id: str
    name: str
    description: str
    category: str = DEFAULT_CATEGORY
    phases: tuple[Phase, ...] = ()
    sections: tuple[Section, ...] = ()
    topics: tuple[Topic, ...] = ()
    tags: tuple[str, ...] = ()
    relations: tuple[()] = field(default=())
    reasonings: tuple[()] = field(default=())

    def to_dict(self) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
        """Render the template as the needs-map wire document."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "phases": [phase.to_dict() for phase in self.phases],
            "sections": [section.to_dict() for section in self.sections],
            "topics": [topic.to_dict() for topic in self.topics],
            "relations": list(self.relations),
            "reasonings": list(self.reasonings),
            "tags": list(self.tags),
        }


# =============================================================================
# Validation Results
# =============================================================================


@dataclass(frozen=True, slots=True)
class ValidationStatistics:
    """Summary counts gathered while validating CSV input.

    Attributes:
        total_rows: Number of data rows (header excluded).
        phase_count: Distinct non-empty phase names.
        section_count: Distinct non-empty section names.
        topic_count: Distinct non-empty topic titles.
    """

    total_rows: int
    phase_count: int
    section_count: int
    topic_count: int

    def to_dict(self) -> dict[str, int]:
        return {
            "totalRows": self.total_rows,
            "phaseCount": self.phase_count,
            "sectionCount": self.section_count,
            "topicCount": self.topic_count,
        }


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating CSV input.

    Attributes:
        errors: Error messages in detection order.
        warnings: Warning messages in detection order.
        statistics: Summary counts, or None when parsing failed or the input
            had no data rows.
    """

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    statistics: ValidationStatistics | None = None

    @property
    def is_valid(self) -> bool:
        """Whether the input passed validation. Warnings never affect this."""
        return not self.errors

    def to_dict(self) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
        data: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
        if self.statistics is not None:
            data["statistics"] = self.statistics.to_dict()
        return data
