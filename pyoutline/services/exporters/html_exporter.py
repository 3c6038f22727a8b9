from __future__ import annotations

from pathlib import Path

from pyoutline.domain.interfaces import IExporter
from pyoutline.domain.models import Document
from pyoutline.services.outline_renderer import OutlineRenderer


class HtmlExporter(IExporter):
    name = "html"
    label = "Export HTML…"
    file_ext = "html"

    def __init__(self, renderer: OutlineRenderer | None = None) -> None:
        self._renderer = renderer or OutlineRenderer()

    def export(self, document: Document, out_path: Path) -> None:
        out_path.write_text(self._renderer.to_html(document), encoding="utf-8")
