from __future__ import annotations

import time
from dataclasses import replace
from secrets import token_hex

from pyoutline.domain.models import MAX_LEVEL, Document, Indent, Row


def _clamp(n: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, n))


def new_row_id() -> str:
    return f"{token_hex(6)}{int(time.time() * 1000):x}"


def new_row(*, level: int = 0, text: str = "") -> Row:
    return Row(id=new_row_id(), text=text, checked=False, level=_clamp(level, 0, MAX_LEVEL))


def default_document() -> Document:
    """The minimum-viable document: one empty, unchecked, top-level row."""
    return (new_row(),)


def clear() -> Document:
    return default_document()


def index_of(doc: Document, row_id: str) -> int:
    for i, row in enumerate(doc):
        if row.id == row_id:
            return i
    return -1


def _replace_by_id(doc: Document, row_id: str, **changes) -> Document:
    i = index_of(doc, row_id)
    if i < 0:
        return doc
    return doc[:i] + (replace(doc[i], **changes),) + doc[i + 1 :]


def set_text(doc: Document, row_id: str, text: str) -> Document:
    return _replace_by_id(doc, row_id, text=text)


def set_checked(doc: Document, row_id: str, checked: bool) -> Document:
    return _replace_by_id(doc, row_id, checked=bool(checked))


def insert_after(doc: Document, index: int, row: Row) -> Document:
    """
    Insert `row` right after position `index`.

    index >= len-1 appends; index <= -1 inserts at the head. A row whose id
    already exists in the document is given a fresh one.
    """
    existing = {r.id for r in doc}
    while row.id in existing:
        row = replace(row, id=new_row_id())
    pos = _clamp(index + 1, 0, len(doc))
    return doc[:pos] + (row,) + doc[pos:]


def append_row(doc: Document, *, level: int = 0) -> Document:
    return insert_after(doc, len(doc) - 1, new_row(level=level))


def remove_at(doc: Document, index: int) -> Document:
    # The last remaining row can never be removed.
    if len(doc) <= 1 or not 0 <= index < len(doc):
        return doc
    return doc[:index] + doc[index + 1 :]


def swap(doc: Document, i: int, j: int) -> Document:
    n = len(doc)
    if not (0 <= i < n and 0 <= j < n):
        return doc
    rows = list(doc)
    rows[i], rows[j] = rows[j], rows[i]
    return tuple(rows)


def reindent(doc: Document, index: int, direction: Indent) -> Document:
    """
    Move the row at `index` one level in or out.

    Indenting in is capped at one level deeper than the row above (a first row
    cannot be indented at all). A target equal to the current level returns
    `doc` itself.
    """
    if not 0 <= index < len(doc):
        return doc
    direction = Indent(direction)
    here = doc[index]
    prev = doc[index - 1] if index > 0 else None
    cap = prev.level + 1 if prev is not None else 0

    if direction is Indent.IN:
        target = _clamp(here.level + 1, 0, min(cap, MAX_LEVEL))
    else:
        target = _clamp(here.level - 1, 0, MAX_LEVEL)

    if target == here.level:
        return doc
    return doc[:index] + (replace(here, level=target),) + doc[index + 1 :]


def visible(doc: Document, hide_completed: bool) -> tuple[Row, ...]:
    if not hide_completed:
        return tuple(doc)
    return tuple(r for r in doc if not r.checked)
