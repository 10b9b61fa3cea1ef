"""Exit codes for topic-template commands.

    0 - Success
    1 - Usage or configuration error (raised by cyclopts and config loading)
    2 - CSV validation failed
    3 - Warnings found with --strict (treated as errors)
    4 - File system error (read, write)
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standard exit codes for topic-template CLI commands."""

    SUCCESS = 0
    VALIDATION_ERROR = 2
    STRICT_WARNINGS = 3
    IO_ERROR = 4
