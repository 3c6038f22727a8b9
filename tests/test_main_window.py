from __future__ import annotations

from pathlib import Path

import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtTest import QTest
from PyQt6.QtWidgets import QApplication

from pyoutline.domain.commands import NewRowBelow
from pyoutline.domain.interfaces import IExporter
from pyoutline.domain.serialization import dumps_document, loads_document
from pyoutline.services.exporters import ExporterRegistryInst, MarkdownExporter
from pyoutline.services.outline_session import OutlineSession
from pyoutline.services.ui.main_window import MainWindow

from conftest import MemoryOutlineStore

# ------------------------------
# Fakes & helpers
# ------------------------------


class FakeMessages:
    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.errors: list[tuple[str, str]] = []
        self.confirms: list[str] = []

    def error(self, parent, title, text) -> None:
        self.errors.append((title, text))

    def confirm(self, parent, title, text) -> bool:
        self.confirms.append(title)
        return self.answer


class FailingExporter(IExporter):
    name = "broken"
    label = "Export Broken"
    file_ext = "txt"

    def export(self, document, out_path: Path) -> None:
        raise PermissionError("read-only volume")


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def store(doc_factory) -> MemoryOutlineStore:
    return MemoryOutlineStore(dumps_document(doc_factory(("A", 0), ("B", 1))))


@pytest.fixture()
def window(qapp, store, settings_service, messages) -> MainWindow:
    reg = ExporterRegistryInst()
    reg.register(MarkdownExporter())
    session = OutlineSession(store, settings=settings_service)
    w = MainWindow(
        session,
        settings_service,
        messages,
        exporter_registry=reg,
        app_title="Test",
    )
    w.show()
    w.activateWindow()
    qapp.processEvents()
    yield w
    w.close()
    w.deleteLater()
    qapp.processEvents()


def shown_texts(w: MainWindow) -> list[str]:
    return [rw.editor.text() for rw in w.row_widgets()]


def focused_row(qapp, w: MainWindow) -> str | None:
    qapp.processEvents()
    for rw in w.row_widgets():
        if QApplication.focusWidget() is rw.editor:
            return rw.row_id
    return None


# ------------------------------
# Rendering
# ------------------------------


def test_initial_render_matches_document(window: MainWindow):
    assert shown_texts(window) == ["A", "B"]
    levels = [rw.row.level for rw in window.row_widgets()]
    assert levels == [0, 1]
    assert window.btn_hide.text() == "Hide completed"


def test_typing_updates_document_without_rebuilding_rows(window: MainWindow, store):
    first = window.row_widgets()[0]
    first.editor.setFocus()
    QTest.keyClicks(first.editor, "!")
    assert window.session.document[0].text == "A!"
    assert window.row_widgets()[0] is first
    assert loads_document(store.data)[0].text == "A!"


# ------------------------------
# Keyboard commands
# ------------------------------


def test_enter_inserts_row_below_with_same_level(qapp, window: MainWindow):
    second = window.row_widgets()[1]
    QTest.keyClick(second.editor, Qt.Key.Key_Return)
    qapp.processEvents()

    doc = window.session.document
    assert [(r.text, r.level) for r in doc] == [("A", 0), ("B", 1), ("", 1)]
    assert shown_texts(window) == ["A", "B", ""]
    assert window.editor_for(doc[2].id) is not None


def test_tab_indents_and_shift_tab_outdents(window: MainWindow):
    second = window.row_widgets()[1]
    QTest.keyClick(second.editor, Qt.Key.Key_Tab)
    assert window.session.document[1].level == 1  # already at the cap

    QTest.keyClick(second.editor, Qt.Key.Key_Backtab, Qt.KeyboardModifier.ShiftModifier)
    assert window.session.document[1].level == 0
    assert second.layout().contentsMargins().left() == 12


def test_backspace_on_empty_row_removes_it(qapp, window: MainWindow):
    window._on_command(window.session.document[1].id, NewRowBelow())
    qapp.processEvents()
    empty = window.row_widgets()[2]
    QTest.keyClick(empty.editor, Qt.Key.Key_Backspace)
    qapp.processEvents()
    assert shown_texts(window) == ["A", "B"]


def test_backspace_with_text_edits_normally(window: MainWindow):
    first = window.row_widgets()[0]
    first.editor.end(False)
    QTest.keyClick(first.editor, Qt.Key.Key_Backspace)
    assert window.session.document[0].text == ""
    assert len(window.session.document) == 2


def test_alt_down_moves_row(window: MainWindow):
    first = window.row_widgets()[0]
    QTest.keyClick(first.editor, Qt.Key.Key_Down, Qt.KeyboardModifier.AltModifier)
    assert [r.text for r in window.session.document] == ["B", "A"]
    assert shown_texts(window) == ["B", "A"]


# ------------------------------
# Focus
# ------------------------------


def test_focus_follows_enter_backspace_and_move(qapp, window: MainWindow):
    second = window.row_widgets()[1]
    QTest.keyClick(second.editor, Qt.Key.Key_Return)
    new_id = window.session.document[2].id
    assert focused_row(qapp, window) == new_id
    assert QApplication.focusWidget() is window.editor_for(new_id)

    QTest.keyClick(window.editor_for(new_id), Qt.Key.Key_Backspace)
    assert focused_row(qapp, window) == "r1"
    assert window.editor_for(new_id) is None

    QTest.keyClick(window.editor_for("r1"), Qt.Key.Key_Up, Qt.KeyboardModifier.AltModifier)
    assert [r.id for r in window.session.document] == ["r1", "r0"]
    assert focused_row(qapp, window) == "r1"


def test_new_task_button_focuses_appended_row(qapp, window: MainWindow):
    window.btn_new.click()
    assert focused_row(qapp, window) == window.session.document[-1].id


# ------------------------------
# Buttons / menu intents
# ------------------------------


def test_new_task_button_appends_top_level_row(window: MainWindow):
    window.btn_new.click()
    doc = window.session.document
    assert len(doc) == 3
    assert doc[-1].level == 0
    assert len(window.row_widgets()) == 3


def test_hide_completed_filters_view_only(window: MainWindow):
    first = window.row_widgets()[0]
    first.checkbox.click()
    assert window.session.document[0].checked is True
    assert first.editor.font().strikeOut() is True

    window.btn_hide.click()
    assert shown_texts(window) == ["B"]
    assert len(window.session.document) == 2
    assert window.act_hide.isChecked() is True
    assert window.btn_hide.text() == "Show completed"

    window.act_hide.trigger()
    assert shown_texts(window) == ["A", "B"]


def test_clear_asks_for_confirmation(qapp, window: MainWindow, messages: FakeMessages):
    messages.answer = False
    window.btn_clear.click()
    assert len(window.session.document) == 2

    messages.answer = True
    window.btn_clear.click()
    assert messages.confirms == ["Clear list?", "Clear list?"]
    assert shown_texts(window) == [""]
    assert focused_row(qapp, window) == window.session.document[0].id


def test_indent_and_remove_buttons(window: MainWindow):
    second = window.row_widgets()[1]
    second.btn_out.click()
    assert window.session.document[1].level == 0
    second.btn_remove.click()
    assert shown_texts(window) == ["A"]
    window.row_widgets()[0].btn_remove.click()
    assert shown_texts(window) == ["A"]


# ------------------------------
# Export
# ------------------------------


def test_export_to_writes_and_records_recent(tmp_path: Path, window: MainWindow, settings_service):
    out = tmp_path / "tasks.md"
    assert window.export_to(MarkdownExporter(), out) is True
    assert out.read_text(encoding="utf-8") == "- [ ] A\n    - [ ] B\n"
    assert settings_service.get_recent_exports()[0] == str(out)


def test_export_failure_reports_error(tmp_path: Path, window: MainWindow, messages: FakeMessages):
    assert window.export_to(FailingExporter(), tmp_path / "x.txt") is False
    assert messages.errors
    title, text = messages.errors[0]
    assert title == "Export Error"
    assert "read-only volume" in text


def test_geometry_saved_on_close(window: MainWindow, settings_service):
    window.close()
    assert settings_service.get_geometry() is not None
