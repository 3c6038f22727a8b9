from __future__ import annotations

from pathlib import Path

from pyoutline.domain.interfaces import IExporter
from pyoutline.domain.models import Document
from pyoutline.services.outline_renderer import OutlineRenderer


class MarkdownExporter(IExporter):
    name = "markdown"
    label = "Export Markdown…"
    file_ext = "md"

    def __init__(self, renderer: OutlineRenderer | None = None) -> None:
        self._renderer = renderer or OutlineRenderer()

    def export(self, document: Document, out_path: Path) -> None:
        out_path.write_text(self._renderer.to_markdown(document), encoding="utf-8")
