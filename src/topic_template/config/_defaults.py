"""Default configuration values.

DEFAULT_CONFIG is a plain dict so it can be passed straight to deep_merge,
which copies rather than mutates its inputs.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "level": "warning",
        "format": "text",
        "file": "",
    },
    "converter": {
        "default_category": "general",
        "topic_identity": "title",
    },
    "output": {
        "format": "json",
    },
}
