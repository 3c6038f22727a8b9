from __future__ import annotations

import json
from typing import Any

from pyoutline.domain.models import MAX_LEVEL, Document, Row


def to_records(doc: Document) -> list[dict[str, Any]]:
    return [
        {"id": r.id, "text": r.text, "checked": r.checked, "level": r.level} for r in doc
    ]


def dumps_document(doc: Document) -> str:
    return json.dumps(to_records(doc), ensure_ascii=False)


def _row_from_record(rec: Any) -> Row | None:
    if not isinstance(rec, dict):
        return None
    rid = rec.get("id")
    text = rec.get("text", "")
    checked = rec.get("checked", False)
    level = rec.get("level", 0)
    if not isinstance(rid, str) or not rid:
        return None
    if not isinstance(text, str) or not isinstance(checked, bool):
        return None
    # bool is an int subclass; a boolean level is a corrupt record.
    if isinstance(level, bool) or not isinstance(level, int):
        return None
    return Row(id=rid, text=text, checked=checked, level=max(0, min(MAX_LEVEL, level)))


def from_records(records: Any) -> Document | None:
    """Build a document from decoded records, or None if they are not a valid document."""
    if not isinstance(records, list) or not records:
        return None
    rows: list[Row] = []
    seen: set[str] = set()
    for rec in records:
        row = _row_from_record(rec)
        if row is None or row.id in seen:
            return None
        seen.add(row.id)
        rows.append(row)
    return tuple(rows)


def loads_document(raw: str | bytes | None) -> Document | None:
    """
    Decode a persisted document.

    Absence and every kind of malformed input (bad JSON, wrong shape, empty
    list, invalid or duplicate records) all return None.
    """
    if raw is None:
        return None
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        return None
    return from_records(data)
