# pyright: reportAny=false
"""File I/O for the topic template system.

Reads CSV input files and writes template documents as JSON or YAML. All
write operations use an atomic temp-file-and-rename pattern so a failed
write never leaves a truncated document behind.
"""

import tempfile
from enum import StrEnum
from pathlib import Path
from typing import Any

import orjson
import yaml

from topic_template.exceptions import TemplateIOError

__all__ = [
    "DocumentFormat",
    "dump_document",
    "read_csv_file",
    "write_document_atomic",
]


class DocumentFormat(StrEnum):
    """Serialization formats for template documents."""

    JSON = "json"
    YAML = "yaml"


def _atomic_write(path: Path, content: bytes) -> None:
    """Write content to a file atomically.

    Writes to a temporary file in the same directory, then renames to the
    target path.

    Args:
        path: Destination file path.
        content: Content to write.

    Raises:
        TemplateIOError: If the write operation fails.
    """
    temp_path: Path | None = None
    try:
        _ = path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            _ = f.write(content)
            temp_path = Path(f.name)

        # Path.replace() is atomic on both POSIX and Windows
        _ = temp_path.replace(path)

    except OSError as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        msg = f"Failed to write file: {e}"
        raise TemplateIOError(msg, path=path, operation="write", cause=e) from e


def read_csv_file(path: Path) -> str:
    """Read a UTF-8 CSV file.

    Args:
        path: Path to the CSV file.

    Returns:
        The file content.

    Raises:
        TemplateIOError: If the file cannot be read or is not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Failed to read file: {e}"
        raise TemplateIOError(msg, path=path, operation="read", cause=e) from e


def dump_document(
    data: dict[str, Any],  # pyright: ignore[reportExplicitAny]
    document_format: DocumentFormat = DocumentFormat.JSON,
) -> bytes:
    """Serialize a document dictionary.

    JSON is indented with two spaces and keeps key order. YAML keeps key
    order and non-ASCII text as-is.

    Args:
        data: Document to serialize.
        document_format: Target format.

    Returns:
        The serialized document as UTF-8 bytes.
    """
    if document_format is DocumentFormat.YAML:
        text = yaml.safe_dump(
            data, default_flow_style=False, allow_unicode=True, sort_keys=False
        )
        return text.encode("utf-8")
    return orjson.dumps(data, option=orjson.OPT_INDENT_2)


def write_document_atomic(
    path: Path,
    data: dict[str, Any],  # pyright: ignore[reportExplicitAny]
    document_format: DocumentFormat = DocumentFormat.JSON,
) -> None:
    """Write a document atomically.

    Args:
        path: Destination file path.
        data: Document to serialize.
        document_format: Target format.

    Raises:
        TemplateIOError: If serialization or the write fails.
    """
    try:
        content = dump_document(data, document_format)
    except (TypeError, yaml.YAMLError) as e:
        msg = f"Failed to serialize document: {e}"
        raise TemplateIOError(msg, path=path, operation="write", cause=e) from e

    _atomic_write(path, content)
