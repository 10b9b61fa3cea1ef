"""ID generation and phase color assignment for the topic template system.

Identifiers are opaque random UUID strings. Within one conversion run a
NameToIdMapper memoizes one identifier per distinct name, so recurring names
resolve to the same entity.
"""

import uuid
from collections.abc import Hashable

__all__ = ["PHASE_COLORS", "NameToIdMapper", "color_by_index", "generate_id"]

PHASE_COLORS: tuple[str, ...] = (
    "#4287f5",
    "#3db063",
    "#f5a742",
    "#f54242",
    "#9c42f5",
    "#42c5f5",
    "#e67e22",
    "#7a7a7a",
)
"""Fixed phase palette, assigned in first-seen order and cycled."""


def generate_id() -> str:
    """Generate a new random identifier (RFC 4122 version 4 UUID string)."""
    return str(uuid.uuid4())


def color_by_index(index: int) -> str:
    """Return the palette color for the phase at a zero-based position.

    Args:
        index: Number of phases created before this one.

    Returns:
        The palette color, cycling once the palette is exhausted.
    """
    return PHASE_COLORS[index % len(PHASE_COLORS)]


class NameToIdMapper:
    """Memo table mapping names to identifiers.

    The first lookup of a name allocates a fresh identifier; later lookups
    return the same one. Iteration follows first-seen order.
    """

    _ids: dict[Hashable, str]

    def __init__(self) -> None:
        self._ids = {}

    def get_or_create_id(self, name: Hashable) -> str:
        """Return the identifier for a name, allocating one on first sight.

        Args:
            name: The entity name, or a composite key of names.

        Returns:
            The identifier memoized for the name.
        """
        if name not in self._ids:
            self._ids[name] = generate_id()
        return self._ids[name]

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def names(self) -> list[Hashable]:
        """Return the mapped names in first-seen order."""
        return list(self._ids)
