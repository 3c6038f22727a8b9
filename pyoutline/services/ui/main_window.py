from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from pyoutline.domain.commands import AnyCommand
from pyoutline.domain.interfaces import IExporter, IExporterRegistry, ISettingsService
from pyoutline.domain.models import Document, Indent, Row
from pyoutline.services.exporters.base import ExporterRegistryInst
from pyoutline.services.outline_session import OutlineSession
from pyoutline.services.ui.adapters.qt_focus import QtFocusMover
from pyoutline.services.ui.ports.messages import IMessageService
from pyoutline.services.ui.row_widget import RowWidget
from pyoutline.utils.constants import SHORTCUTS_HINT
from pyoutline.utils.logging import get_logger

log = get_logger(__name__)


class MainWindow(QMainWindow):
    """Thin PyQt window: renders the session's visible rows and forwards user intents to it."""

    def __init__(
        self,
        session: OutlineSession,
        settings: ISettingsService,
        messages: IMessageService,
        *,
        exporter_registry: IExporterRegistry | None = None,
        app_title: str = "PyOutlineEditor",
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(760, 640)

        self.session = session
        self.settings = settings
        self.messages = messages
        self._exporters = exporter_registry or ExporterRegistryInst()
        self._rows: dict[str, RowWidget] = {}
        self._order: list[str] = []

        # Header
        self.title_label = QLabel("Tasks", self)
        font = self.title_label.font()
        font.setPointSize(20)
        self.title_label.setFont(font)
        self.btn_hide = QPushButton(self)
        self.btn_hide.clicked.connect(lambda: self._toggle_hide_completed())
        self.btn_clear = QPushButton("Clear", self)
        self.btn_clear.clicked.connect(lambda: self._clear())

        header = QHBoxLayout()
        header.addWidget(self.title_label)
        header.addStretch(1)
        header.addWidget(self.btn_hide)
        header.addWidget(self.btn_clear)

        # Row list
        self.list_widget = QWidget(self)
        self.list_layout = QVBoxLayout(self.list_widget)
        self.list_layout.setSpacing(4)
        self.list_layout.addStretch(1)
        self.scroll = QScrollArea(self)
        self.scroll.setWidgetResizable(True)
        self.scroll.setWidget(self.list_widget)

        # Footer
        self.btn_new = QPushButton("+ New task", self)
        self.btn_new.clicked.connect(lambda: self.session.append_row())
        hint = QLabel(SHORTCUTS_HINT, self)
        hint.setEnabled(False)
        footer = QHBoxLayout()
        footer.addWidget(self.btn_new)
        footer.addWidget(hint)
        footer.addStretch(1)

        central = QWidget(self)
        root = QVBoxLayout(central)
        root.addLayout(header)
        root.addWidget(self.scroll, 1)
        root.addLayout(footer)
        self.setCentralWidget(central)

        self._build_actions()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))

        self.focus_mover = QtFocusMover(self.editor_for)
        self.session.attach(focus=self.focus_mover, on_changed=self._render)
        self._render(self.session.document)

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_new_row = QAction(
            "New Task", self, shortcut="Ctrl+N", triggered=lambda: self.session.append_row()
        )
        self.act_hide = QAction(
            "Hide Completed",
            self,
            checkable=True,
            checked=self.session.hide_completed,
            triggered=lambda _on=False: self._toggle_hide_completed(),
        )
        self.act_clear = QAction("Clear", self, triggered=lambda: self._clear())
        self.act_quit = QAction(
            "Quit", self, shortcut=QKeySequence.StandardKey.Quit, triggered=self.close
        )

        self.export_actions: list[QAction] = []
        for exporter in self._exporters.all():
            act = QAction(
                exporter.label,
                self,
                triggered=lambda chk=False, e=exporter: self._export_with(e),
            )
            self.export_actions.append(act)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_new_row)
        filem.addSeparator()
        for a in self.export_actions:
            filem.addAction(a)
        filem.addSeparator()
        filem.addAction(self.act_quit)

        editm = m.addMenu("&Edit")
        editm.addAction(self.act_clear)

        viewm = m.addMenu("&View")
        viewm.addAction(self.act_hide)

    # ---------- Rendering ----------
    def editor_for(self, row_id: str) -> QLineEdit | None:
        w = self._rows.get(row_id)
        return w.editor if w is not None else None

    def row_widgets(self) -> list[RowWidget]:
        return [self._rows[rid] for rid in self._order]

    def _render(self, _document: Document | None = None) -> None:
        visible = self.session.visible_rows()
        ids = [r.id for r in visible]

        keep = set(ids)
        for rid in [rid for rid in self._rows if rid not in keep]:
            w = self._rows.pop(rid)
            self.list_layout.removeWidget(w)
            w.hide()
            # may be the widget whose key press triggered this render
            w.deleteLater()

        for row in visible:
            w = self._rows.get(row.id)
            if w is None:
                w = self._make_row(row)
                self._rows[row.id] = w
            else:
                w.update_row(row)

        if ids != self._order:
            for rid in ids:
                self.list_layout.removeWidget(self._rows[rid])
            for pos, rid in enumerate(ids):
                self.list_layout.insertWidget(pos, self._rows[rid])
                self._rows[rid].show()
            self._order = ids

        hide = self.session.hide_completed
        self.btn_hide.setText("Show completed" if hide else "Hide completed")
        self.act_hide.setChecked(hide)

    def _make_row(self, row: Row) -> RowWidget:
        w = RowWidget(row, self._on_command, self.list_widget)
        w.text_edited.connect(self.session.set_text)
        w.checked_changed.connect(self.session.set_checked)
        w.indent_requested.connect(self._on_indent)
        w.remove_requested.connect(self._on_remove)
        return w

    # ---------- Intents ----------
    def _on_command(self, row_id: str, command: AnyCommand) -> bool:
        index = self.session.index_of(row_id)
        return self.session.handle_command(command, index).handled

    def _on_indent(self, row_id: str, direction: Indent) -> None:
        self.session.indent(self.session.index_of(row_id), direction)

    def _on_remove(self, row_id: str) -> None:
        self.session.remove(self.session.index_of(row_id))

    def _toggle_hide_completed(self) -> None:
        self.session.toggle_hide_completed()

    def _clear(self) -> None:
        if not self.messages.confirm(self, "Clear list?", "Remove every row and start over?"):
            return
        self.session.clear()
        self.statusBar().showMessage("Cleared", 3000)

    def _export_with(self, exporter: IExporter) -> None:
        recents = self.settings.get_recent_exports()
        start_dir = Path(recents[0]).parent if recents else Path.home()
        default = start_dir / f"tasks.{exporter.file_ext}"
        filt = f"{exporter.name.upper()} (*.{exporter.file_ext})"
        out_str, _ = QFileDialog.getSaveFileName(self, exporter.label, str(default), filt)
        if not out_str:
            return
        self.export_to(exporter, Path(out_str))

    def export_to(self, exporter: IExporter, out_path: Path) -> bool:
        try:
            exporter.export(self.session.document, out_path)
        except Exception as e:
            log.exception("Export to %s failed", out_path)
            self.messages.error(
                self, "Export Error", f"Failed to export {exporter.name.upper()}:\n{e}"
            )
            return False
        self._add_recent_export(out_path)
        self.statusBar().showMessage(f"Exported {exporter.name.upper()}: {out_path}", 3000)
        return True

    def _add_recent_export(self, path: Path) -> None:
        s = str(path)
        recents = [r for r in self.settings.get_recent_exports() if r != s]
        recents.insert(0, s)
        self.settings.set_recent_exports(recents)

    # ---------- Close ----------
    def closeEvent(self, event):
        self.settings.set_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)

    def showEvent(self, event):
        super().showEvent(event)
        if self._order and QApplication.focusWidget() is None:
            self.focus_mover.focus_row(self._order[0])
