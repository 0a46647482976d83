import csv
import io
import os
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")

from devdesk.services.csv_export import (
    ARTICLE_COLUMNS,
    ASSET_COLUMNS,
    TICKET_COLUMNS,
    escape_field,
    to_csv,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", "plain"),
        ("", ""),
        (None, ""),
        (42, "42"),
        ("a,b", '"a,b"'),
        ('say "hi"', '"say ""hi"""'),
        ("line1\nline2", '"line1\nline2"'),
        ("carriage\rreturn", '"carriage\rreturn"'),
        ("semi;colon and 'single' quotes", "semi;colon and 'single' quotes"),
    ],
)
def test_escape_field(value, expected):
    assert escape_field(value) == expected


def test_empty_collection_is_header_only():
    assert to_csv([], ARTICLE_COLUMNS) == "Article ID,Title,Content,Tags,Created At"


def test_fixed_headers_per_collection():
    assert to_csv([], TICKET_COLUMNS) == "Ticket ID,Title,Description,Category,Status,Created At"
    assert to_csv([], ASSET_COLUMNS) == (
        "Asset ID,Name,Asset Tag,Serial Number,Assigned To,Notes,Created At"
    )


def test_rows_follow_column_order_and_accept_mappings_or_objects():
    columns = (("b", "Second"), ("a", "First"))
    rows = [
        {"a": 1, "b": "x"},
        SimpleNamespace(a=2, b=None),
        {"a": 3},
    ]

    assert to_csv(rows, columns) == "Second,First\nx,1\n,2\n,3"


def test_reparsed_csv_matches_source_values():
    rows = [
        {
            "id": 7,
            "name": 'Monitor 27", curved',
            "asset_tag": "IT-MON-007",
            "serial_number": None,
            "assigned_to": "Reception, front desk",
            "notes": "Line one\nLine two\r\nLine three",
            "created_at": "2026-01-05 09:30:00",
        },
        {
            "id": 6,
            "name": "Dock",
            "asset_tag": "",
            "serial_number": "SN-1",
            "assigned_to": "",
            "notes": "",
            "created_at": "2026-01-04 08:00:00",
        },
    ]

    text = to_csv(rows, ASSET_COLUMNS)
    parsed = list(csv.reader(io.StringIO(text, newline="")))

    assert parsed[0] == [header for _, header in ASSET_COLUMNS]
    assert len(parsed) == 3
    for source, record in zip(rows, parsed[1:]):
        expected = ["" if source[key] is None else str(source[key]) for key, _ in ASSET_COLUMNS]
        assert record == expected
