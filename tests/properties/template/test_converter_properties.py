"""Property-based tests for template conversion invariants.

Rows are drawn from small name pools so phases, sections, topics and tags
recur often:
- Topic indexes are 1..n in first-seen order with no gaps
- Phases and sections keep first-seen order and never interleave
- A section belongs to the phase it first appeared under
- Tags are deduplicated per topic and sorted globally
"""

from hypothesis import given, strategies as st

from tests.conftest import make_csv
from topic_template.template import (
    PHASE_COLORS,
    ConversionContext,
    Record,
    Template,
    TopicIdentity,
    convert,
    validate,
)
from topic_template.utils import create_logger

# =============================================================================
# Strategies
# =============================================================================

_names = st.sampled_from(["A", "B", "C", "D", "E"])
_tags = st.sampled_from(["", "x", "y", "z"])

record_strategy = st.builds(
    Record,
    phase=_names.map(lambda n: f"P{n}"),
    section=_names.map(lambda n: f"S{n}"),
    topic=_names.map(lambda n: f"T{n}"),
    tag=_tags,
    extraction_prompt=st.just("Ask"),
)

records_strategy = st.lists(record_strategy, min_size=1, max_size=30)


def _first_seen(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def _build(
    records: list[Record], policy: TopicIdentity = TopicIdentity.TITLE
) -> Template:
    context = ConversionContext(topic_identity=policy)
    for record in records:
        context.add_record(record)
    return context.build_template("n", "d")


# =============================================================================
# Properties
# =============================================================================


@given(records_strategy)
def test_topic_indexes_are_contiguous(records: list[Record]) -> None:
    template = _build(records)

    assert [t.index for t in template.topics] == list(
        range(1, len(template.topics) + 1)
    )
    assert [t.title for t in template.topics] == _first_seen([r.topic for r in records])


@given(records_strategy)
def test_phases_keep_first_seen_order_and_colors(records: list[Record]) -> None:
    template = _build(records)

    assert [p.name for p in template.phases] == _first_seen([r.phase for r in records])
    for position, phase in enumerate(template.phases):
        assert phase.color == PHASE_COLORS[position % len(PHASE_COLORS)]


@given(records_strategy)
def test_sections_grouped_by_phase(records: list[Record]) -> None:
    template = _build(records)
    phase_order = [p.id for p in template.phases]

    owners = [s.phase_id for s in template.sections]
    assert owners == sorted(owners, key=phase_order.index)

    for phase_id in phase_order:
        indexes = [s.index for s in template.sections if s.phase_id == phase_id]
        assert indexes == list(range(1, len(indexes) + 1))


@given(records_strategy)
def test_section_owned_by_first_phase(records: list[Record]) -> None:
    template = _build(records)
    phase_names = {p.id: p.name for p in template.phases}

    first_phase: dict[str, str] = {}
    for record in records:
        _ = first_phase.setdefault(record.section, record.phase)

    assert len(template.sections) == len(first_phase)
    for section in template.sections:
        assert phase_names[section.phase_id] == first_phase[section.name]


@given(records_strategy)
def test_tags_deduplicated_and_sorted(records: list[Record]) -> None:
    template = _build(records)

    for topic in template.topics:
        assert len(topic.tags) == len(set(topic.tags))
        expected = _first_seen(
            [r.tag for r in records if r.topic == topic.title and r.tag]
        )
        assert list(topic.tags) == expected

    assert list(template.tags) == sorted({r.tag for r in records if r.tag})


@given(records_strategy)
def test_section_policy_splits_topics_by_context(records: list[Record]) -> None:
    template = _build(records, TopicIdentity.SECTION)

    keys = _first_seen([f"{r.phase}/{r.section}/{r.topic}" for r in records])
    assert len(template.topics) == len(keys)
    assert [t.index for t in template.topics] == list(range(1, len(keys) + 1))


@given(records_strategy)
def test_csv_conversion_matches_statistics(records: list[Record]) -> None:
    text = make_csv(
        (r.tag, r.phase, r.section, r.topic, r.extraction_prompt) for r in records
    )

    result = validate(text)
    template = convert(text, "n", "d", logger=create_logger("error"))

    assert result.is_valid
    assert result.statistics is not None
    assert result.statistics.total_rows == len(records)
    assert result.statistics.phase_count == len(template.phases)
    assert result.statistics.section_count == len(template.sections)
    assert result.statistics.topic_count == len(template.topics)
