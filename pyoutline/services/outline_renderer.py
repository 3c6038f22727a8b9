from __future__ import annotations

from html import escape

import markdown

from pyoutline.domain.models import Document
from pyoutline.utils.constants import CSS_EXPORT, HTML_TEMPLATE

# python-markdown only nests list items indented by a full tab stop
INDENT = "    "


def _depths(document: Document) -> list[int]:
    # Loaded outlines may skip levels; markdown cannot, so clamp each row to
    # one level below its predecessor.
    out: list[int] = []
    prev = -1
    for row in document:
        depth = min(row.level, prev + 1)
        out.append(depth)
        prev = depth
    return out


class OutlineRenderer:
    """Converts an outline document to a Markdown task list or a standalone HTML page."""

    def __init__(self, title: str = "Tasks") -> None:
        self.title = title

    def to_markdown(self, document: Document) -> str:
        lines = []
        for row, depth in zip(document, _depths(document)):
            mark = "[x]" if row.checked else "[ ]"
            lines.append(f"{INDENT * depth}- {mark} {row.text}".rstrip())
        return "\n".join(lines) + "\n"

    def to_html(self, document: Document) -> str:
        lines = []
        for row, depth in zip(document, _depths(document)):
            text = escape(row.text)
            if row.checked:
                lines.append(f"{INDENT * depth}- ☑ <del>{text}</del>")
            else:
                lines.append(f"{INDENT * depth}- ☐ {text}")
        body = markdown.markdown(
            "\n".join(lines),
            extensions=["sane_lists"],
            output_format="html",
        )
        return HTML_TEMPLATE.format(
            title=escape(self.title), css=CSS_EXPORT, body=f"<h1>{escape(self.title)}</h1>\n{body}"
        )
