from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping


def utc_timestamp() -> str:
    """Creation timestamp in SQLite's CURRENT_TIMESTAMP layout."""

    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def clean_fields(payload: Mapping[str, Any], fields: Iterable[str]) -> dict[str, str]:
    """Pick ``fields`` out of ``payload`` as trimmed strings; absent becomes ``""``."""

    cleaned: dict[str, str] = {}
    for field in fields:
        value = payload.get(field)
        cleaned[field] = value.strip() if isinstance(value, str) else ""
    return cleaned


def require_fields(data: Mapping[str, str], required: Iterable[str]) -> None:
    missing = [field for field in required if not data.get(field)]
    if not missing:
        return
    verb = "is" if len(missing) == 1 else "are"
    raise ValueError(f"{', '.join(missing)} {verb} required")
