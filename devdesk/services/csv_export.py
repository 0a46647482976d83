"""CSV serialization for the collection export endpoints.

A column specification is an ordered sequence of ``(key, header)`` pairs: the
header row lists the headers in that order and every data row reads the keys
from each record, either as mapping keys or as attributes.

Quoting is minimal: a field is wrapped in double quotes (inner quotes
doubled) only when it contains a comma, a double quote, a line feed or a
carriage return. Lines are joined with ``\\n`` and the output carries no
trailing newline, so an empty collection exports as the header line alone.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping, Sequence, Tuple

Column = Tuple[str, str]

TICKET_COLUMNS: Sequence[Column] = (
    ("id", "Ticket ID"),
    ("title", "Title"),
    ("description", "Description"),
    ("category", "Category"),
    ("status", "Status"),
    ("created_at", "Created At"),
)

ARTICLE_COLUMNS: Sequence[Column] = (
    ("id", "Article ID"),
    ("title", "Title"),
    ("content", "Content"),
    ("tags", "Tags"),
    ("created_at", "Created At"),
)

ASSET_COLUMNS: Sequence[Column] = (
    ("id", "Asset ID"),
    ("name", "Name"),
    ("asset_tag", "Asset Tag"),
    ("serial_number", "Serial Number"),
    ("assigned_to", "Assigned To"),
    ("notes", "Notes"),
    ("created_at", "Created At"),
)

TICKETS_FILENAME = "tickets.csv"
ARTICLES_FILENAME = "knowledge_base.csv"
ASSETS_FILENAME = "assets.csv"

_NEEDS_QUOTES = re.compile(r'[",\r\n]')


def escape_field(value: Any) -> str:
    if value is None:
        return ""
    text = str(value)
    if _NEEDS_QUOTES.search(text):
        return '"' + text.replace('"', '""') + '"'
    return text


def _field_value(row: Any, key: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(key)
    return getattr(row, key, None)


def to_csv(rows: Iterable[Any], columns: Sequence[Column]) -> str:
    lines = [",".join(escape_field(header) for _, header in columns)]
    for row in rows:
        lines.append(",".join(escape_field(_field_value(row, key)) for key, _ in columns))
    return "\n".join(lines)


def attachment_headers(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}
