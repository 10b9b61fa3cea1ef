"""CSV parsing for topic template input.

Parses raw CSV text into a header and a list of row dictionaries keyed by
column name. The first non-blank row is the header, blank lines are skipped,
and every cell is trimmed of surrounding whitespace. Rows whose cell count
differs from the header are rejected rather than padded.
"""

import csv
import io
from dataclasses import dataclass

from topic_template.exceptions import CsvParseError, CsvParseFailure

__all__ = ["ParsedCsv", "parse_csv"]

_BOM = "\ufeff"


@dataclass(frozen=True, slots=True)
class ParsedCsv:
    """Parsed CSV content.

    Attributes:
        columns: Trimmed header names in file order.
        rows: Data rows keyed by column name, in file order.
    """

    columns: tuple[str, ...]
    rows: tuple[dict[str, str], ...]


def _is_blank(row: list[str]) -> bool:
    return not row or (len(row) == 1 and not row[0].strip())


def _classify(error: csv.Error) -> CsvParseFailure:
    """Map a csv module error onto a parse failure cause."""
    message = str(error).lower()
    if "expected after" in message:
        return CsvParseFailure.INVALID_QUOTE
    if "unexpected end of data" in message or "eof" in message:
        return CsvParseFailure.UNCLOSED_QUOTE
    if "nul" in message:
        return CsvParseFailure.INVALID_CHARACTER
    return CsvParseFailure.MALFORMED


def _check_characters(text: str) -> None:
    position = text.find("\x00")
    if position == -1:
        return
    line = text.count("\n", 0, position) + 1
    msg = f"Invalid character (NUL) on line {line}"
    raise CsvParseError(msg, failure=CsvParseFailure.INVALID_CHARACTER, line=line)


def parse_csv(text: str) -> ParsedCsv:
    """Parse CSV text using the first row as column headers.

    Args:
        text: Raw CSV text.

    Returns:
        The parsed header and data rows. Both are empty for blank input.

    Raises:
        CsvParseError: If the text is not well-formed CSV or a row has a
            different number of cells than the header.
    """
    text = text.removeprefix(_BOM)
    _check_characters(text)

    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    columns: tuple[str, ...] | None = None
    rows: list[dict[str, str]] = []

    try:
        for raw in reader:
            if _is_blank(raw):
                continue

            cells = [cell.strip() for cell in raw]
            if columns is None:
                columns = tuple(cells)
                continue

            if len(cells) != len(columns):
                msg = (
                    f"Inconsistent column count on line {reader.line_num}: "
                    f"expected {len(columns)}, got {len(cells)}"
                )
                raise CsvParseError(
                    msg,
                    failure=CsvParseFailure.INCONSISTENT_COLUMNS,
                    line=reader.line_num,
                )

            rows.append(dict(zip(columns, cells, strict=True)))
    except csv.Error as e:
        failure = _classify(e)
        msg = f"Malformed CSV on line {reader.line_num}: {e}"
        raise CsvParseError(msg, failure=failure, line=reader.line_num) from e

    return ParsedCsv(columns=columns or (), rows=tuple(rows))
