"""Shared test fixtures for topic-template tests."""

from collections.abc import Iterable

import pytest
from rich.console import Console

HEADER = ("tags", "phase", "section", "topic", "prompt")


def make_csv(
    rows: Iterable[Iterable[str]],
    header: Iterable[str] = HEADER,
) -> str:
    """Build CSV text from a header and rows of unquoted cells."""
    lines = [",".join(header)]
    lines.extend(",".join(row) for row in rows)
    return "\n".join(lines) + "\n"


@pytest.fixture
def example_csv() -> str:
    """Three rows where topic T1 recurs under a new section."""
    return make_csv(
        [
            ("a", "P1", "S1", "T1", "Ask about T1"),
            ("b", "P1", "S1", "T2", "Ask about T2"),
            ("c", "P1", "S2", "T1", "Ask about T1 again"),
        ]
    )


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
