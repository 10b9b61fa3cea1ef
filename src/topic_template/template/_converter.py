"""CSV to needs-map template conversion.

Conversion is a single pass over validated CSV records. All per-run state
(identifier memo tables, collected entities, the topic counter and the tag
set) lives on a ConversionContext created for each call, so independent
conversions never share state.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path

from structlog.typing import FilteringBoundLogger

from topic_template.exceptions import TemplateValidationError
from topic_template.template._ids import NameToIdMapper, color_by_index, generate_id
from topic_template.template._io import read_csv_file
from topic_template.template._models import (
    DEFAULT_CATEGORY,
    Phase,
    Record,
    Section,
    Template,
    Topic,
    TopicIdentity,
    TopicStatus,
)
from topic_template.template._validator import validate_records
from topic_template.utils import create_logger

__all__ = ["ConversionContext", "convert", "convert_file", "topic_identity_key"]


def topic_identity_key(
    record: Record, policy: TopicIdentity
) -> str | tuple[str, str, str]:
    """Return the memo key that decides which topic a record belongs to.

    Under TITLE a title recurring in another phase or section resolves to
    the topic created on its first row; only that topic's tags grow.

    Args:
        record: The CSV record.
        policy: The topic identity policy.

    Returns:
        The key to look up in the topic memo table: the title under TITLE,
        the (phase, section, title) tuple under SECTION.
    """
    if policy is TopicIdentity.SECTION:
        return (record.phase, record.section, record.topic)
    return record.topic


@dataclass(slots=True)
class ConversionContext:
    """Mutable state for one conversion run.

    Attributes:
        topic_identity: Policy used to match rows to existing topics.
        phase_ids: Phase name to identifier memo table.
        section_ids: Section name to identifier memo table.
        topic_ids: Topic identity key to identifier memo table.
        phases: Created phases keyed by id, in creation order.
        sections: Section lists keyed by owning phase id.
        section_owners: Owning phase id keyed by section id.
        topics: Created topics keyed by id, in creation order.
        topic_tags: Tags collected per topic id, in first-seen order.
        tags: Every tag seen on any row.
        topic_index: Index assigned to the next new topic.
    """

    topic_identity: TopicIdentity = TopicIdentity.TITLE
    phase_ids: NameToIdMapper = field(default_factory=NameToIdMapper)
    section_ids: NameToIdMapper = field(default_factory=NameToIdMapper)
    topic_ids: NameToIdMapper = field(default_factory=NameToIdMapper)
    phases: dict[str, Phase] = field(default_factory=dict)
    sections: dict[str, list[Section]] = field(default_factory=dict)
    section_owners: dict[str, str] = field(default_factory=dict)
    topics: dict[str, Topic] = field(default_factory=dict)
    topic_tags: dict[str, list[str]] = field(default_factory=dict)
    tags: set[str] = field(default_factory=set)
    topic_index: int = 1

    def add_record(self, record: Record) -> None:
        """Fold one CSV record into the collected entities."""
        phase_id = self.phase_ids.get_or_create_id(record.phase)
        section_id = self.section_ids.get_or_create_id(record.section)
        topic_id = self.topic_ids.get_or_create_id(
            topic_identity_key(record, self.topic_identity)
        )

        if phase_id not in self.phases:
            self.phases[phase_id] = Phase(
                id=phase_id,
                name=record.phase,
                color=color_by_index(len(self.phases)),
            )

        phase_sections = self.sections.setdefault(phase_id, [])
        # A section stays with the phase it first appeared under
        if section_id not in self.section_owners:
            self.section_owners[section_id] = phase_id
            phase_sections.append(
                Section(
                    id=section_id,
                    name=record.section,
                    phase_id=phase_id,
                    index=len(phase_sections) + 1,
                )
            )

        if topic_id not in self.topics:
            self.topics[topic_id] = Topic(
                id=topic_id,
                title=record.topic,
                phase_id=phase_id,
                section_id=section_id,
                index=self.topic_index,
                extraction_prompt=record.extraction_prompt,
                status=TopicStatus.PENDING,
                error=None,
            )
            self.topic_tags[topic_id] = []
            self.topic_index += 1

        if record.tag:
            topic_tags = self.topic_tags[topic_id]
            if record.tag not in topic_tags:
                topic_tags.append(record.tag)
            self.tags.add(record.tag)

    def build_template(
        self,
        name: str,
        description: str,
        category: str = DEFAULT_CATEGORY,
    ) -> Template:
        """Assemble the template document from the collected entities."""
        sections = [
            section
            for phase_id in self.phases
            for section in self.sections.get(phase_id, [])
        ]
        topics = [
            replace(topic, tags=tuple(self.topic_tags[topic_id]))
            for topic_id, topic in self.topics.items()
        ]

        return Template(
            id=generate_id(),
            name=name,
            description=description,
            category=category,
            phases=tuple(self.phases.values()),
            sections=tuple(sections),
            topics=tuple(topics),
            tags=tuple(sorted(self.tags)),
        )


def convert(
    text: str,
    name: str,
    description: str,
    category: str = DEFAULT_CATEGORY,
    *,
    topic_identity: TopicIdentity = TopicIdentity.TITLE,
    logger: FilteringBoundLogger | None = None,
) -> Template:
    """Convert CSV text into a needs-map template document.

    The text is validated first. Warnings and statistics are logged; any
    validation error aborts the conversion.

    Args:
        text: Raw CSV text with phase, section and topic columns.
        name: Template name.
        description: Template description.
        category: Template category.
        topic_identity: Policy used to match rows to existing topics.
        logger: Optional logger for diagnostics.

    Returns:
        The assembled template.

    Raises:
        TemplateValidationError: If the CSV fails validation. Carries every
            error message.
    """
    if logger is None:
        logger = create_logger()

    result, records = validate_records(text)
    for warning in result.warnings:
        logger.warning("CSV validation warning", message=warning)

    if not result.is_valid:
        logger.error("CSV validation failed", error_count=len(result.errors))
        raise TemplateValidationError(result.errors, warnings=result.warnings)

    if result.statistics is not None:
        logger.info(
            "CSV statistics",
            total_rows=result.statistics.total_rows,
            phases=result.statistics.phase_count,
            sections=result.statistics.section_count,
            topics=result.statistics.topic_count,
        )

    context = ConversionContext(topic_identity=topic_identity)
    for record in records:
        context.add_record(record)

    template = context.build_template(name, description, category)
    logger.debug(
        "Template converted",
        template_id=template.id,
        phases=len(template.phases),
        sections=len(template.sections),
        topics=len(template.topics),
        tags=len(template.tags),
    )
    return template


def convert_file(
    path: Path,
    name: str,
    description: str,
    category: str = DEFAULT_CATEGORY,
    *,
    topic_identity: TopicIdentity = TopicIdentity.TITLE,
    logger: FilteringBoundLogger | None = None,
) -> Template:
    """Read a CSV file and convert it into a template document.

    Args:
        path: Path to the CSV file (UTF-8).
        name: Template name.
        description: Template description.
        category: Template category.
        topic_identity: Policy used to match rows to existing topics.
        logger: Optional logger for diagnostics.

    Returns:
        The assembled template.

    Raises:
        TemplateIOError: If the file cannot be read.
        TemplateValidationError: If the CSV fails validation.
    """
    return convert(
        read_csv_file(path),
        name,
        description,
        category,
        topic_identity=topic_identity,
        logger=logger,
    )
