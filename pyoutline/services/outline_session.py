from __future__ import annotations

from collections.abc import Callable

from pyoutline.domain import outline_model as om
from pyoutline.domain.commands import Command, CommandResult, apply_command
from pyoutline.domain.interfaces import IOutlineStore, ISettingsService
from pyoutline.domain.models import Document, Indent, Row
from pyoutline.domain.serialization import dumps_document, loads_document
from pyoutline.services.ui.ports.focus import IFocusMover
from pyoutline.utils.logging import get_logger

log = get_logger(__name__)


class OutlineSession:
    """
    Owns the authoritative document for one editing session.

    Every change is applied through the pure outline operations, then handed to
    the store (fire-and-forget), then announced to the view. Focus directives
    go to the attached focus mover; the session never touches widgets.
    """

    def __init__(
        self,
        store: IOutlineStore,
        *,
        settings: ISettingsService | None = None,
        focus: IFocusMover | None = None,
        on_changed: Callable[[Document], None] | None = None,
        hide_completed_default: bool = False,
    ) -> None:
        self._store = store
        self._settings = settings
        self._focus = focus
        self._on_changed = on_changed
        self._document = self._load()
        if settings is not None:
            self._hide_completed = settings.get_hide_completed(hide_completed_default)
        else:
            self._hide_completed = hide_completed_default

    def attach(
        self,
        *,
        focus: IFocusMover | None = None,
        on_changed: Callable[[Document], None] | None = None,
    ) -> None:
        """Bind the view-side collaborators once the view exists."""
        if focus is not None:
            self._focus = focus
        if on_changed is not None:
            self._on_changed = on_changed

    # ---------- State ----------

    @property
    def document(self) -> Document:
        return self._document

    @property
    def hide_completed(self) -> bool:
        return self._hide_completed

    def visible_rows(self) -> tuple[Row, ...]:
        return om.visible(self._document, self._hide_completed)

    def index_of(self, row_id: str) -> int:
        return om.index_of(self._document, row_id)

    # ---------- Keyboard ----------

    def handle_command(self, command: Command | None, index: int) -> CommandResult:
        result = apply_command(self._document, command, index)
        if not result.handled:
            return result
        self._commit(result.document)
        if result.focus is not None:
            self._move_focus(result.focus)
        return result

    # ---------- Direct edits (checkbox, text, buttons) ----------

    def set_text(self, row_id: str, text: str) -> bool:
        return self._commit(om.set_text(self._document, row_id, text))

    def set_checked(self, row_id: str, checked: bool) -> bool:
        return self._commit(om.set_checked(self._document, row_id, checked))

    def indent(self, index: int, direction: Indent) -> bool:
        return self._commit(om.reindent(self._document, index, direction))

    def remove(self, index: int) -> bool:
        return self._commit(om.remove_at(self._document, index))

    def append_row(self) -> str:
        self._commit(om.append_row(self._document))
        new_id = self._document[-1].id
        self._move_focus(new_id)
        return new_id

    def clear(self) -> None:
        self._commit(om.clear())
        self._move_focus(self._document[0].id)

    def toggle_hide_completed(self) -> bool:
        self._hide_completed = not self._hide_completed
        if self._settings is not None:
            try:
                self._settings.set_hide_completed(self._hide_completed)
            except Exception:
                log.exception("Failed to store hide-completed preference")
        self._notify()
        return self._hide_completed

    # ---------- Internals ----------

    def _load(self) -> Document:
        try:
            raw = self._store.load()
        except Exception:
            log.exception("Outline store failed to load; starting with an empty outline")
            return om.default_document()
        doc = loads_document(raw)
        if doc is None:
            if raw is not None:
                log.warning("Persisted outline is malformed; starting with an empty outline")
            return om.default_document()
        log.info("Loaded outline with %d rows", len(doc))
        return doc

    def _commit(self, doc: Document) -> bool:
        # Operations hand back the same tuple when nothing changed.
        if doc is self._document:
            return False
        self._document = doc
        self._persist(doc)
        self._notify()
        return True

    def _persist(self, doc: Document) -> None:
        try:
            self._store.save(dumps_document(doc))
        except Exception:
            # Saving is best-effort; the in-memory document stays authoritative.
            log.exception("Failed to persist outline")

    def _notify(self) -> None:
        if self._on_changed is not None:
            self._on_changed(self._document)

    def _move_focus(self, row_id: str) -> None:
        if self._focus is not None:
            self._focus.focus_row(row_id)
