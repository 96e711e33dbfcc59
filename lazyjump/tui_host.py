"""Terminal implementation of ``EditorHost``.

The display is a list of ``Pane``s tiled by a ``LayoutPlan``; one pane is
focused and owns the live cursor. Snapshots copy every pane so a restore
puts scroll positions and cursors back exactly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from .documents import Document
from .highlight import highlight_lines
from .host import SELECTION_ABORTED, MarkerHandle, SelectionResult
from .layout import LayoutPlan, SubViewRect, grid_rects
from .points import Location
from .render import FrameView, Marker, Pane, render_frame, text_rows_for
from .ui_theme import UITheme, theme_for

logger = logging.getLogger(__name__)

SINGLE_PANE = LayoutPlan(rows=1, columns_per_row=(1,))


@dataclass(frozen=True)
class DisplayConfiguration:
    """Opaque pane snapshot handed out by ``save_display_configuration``."""

    plan: LayoutPlan
    panes: tuple[Pane, ...]
    focused: int


class TerminalHost:
    """Pane/document state plus terminal I/O callbacks."""

    def __init__(
        self,
        documents: Iterable[Document],
        *,
        read_key: Callable[[], str],
        write: Callable[[str], None],
        terminal_size: Callable[[], tuple[int, int]],
        abort_keys: Iterable[str] = ("CTRL_G", "ESC"),
        style: str = "monokai",
        no_color: bool = False,
        theme: UITheme | None = None,
        status_text: Callable[[], str] | None = None,
    ) -> None:
        self.documents: dict[Path, Document] = {}
        self.order: list[Path] = []
        for document in documents:
            self._add_document(document)
        if not self.order:
            raise ValueError("TerminalHost needs at least one document")

        self._read_key = read_key
        self._write = write
        self._terminal_size = terminal_size
        self.abort_keys = frozenset(abort_keys)
        self.style = style
        self.no_color = no_color
        self.theme = theme if theme is not None else theme_for(no_color)
        self.status_text = status_text

        self.plan = SINGLE_PANE
        self.panes: list[Pane] = [Pane(self.order[0])]
        self.focused = 0
        self.markers: dict[MarkerHandle, Marker] = {}
        self._next_marker = 1
        self._styled: dict[Path, list[str]] = {}
        self.message = ""
        self.message_is_error = False
        self.prompt = ""

    def _add_document(self, document: Document) -> None:
        if document.path not in self.documents:
            self.order.append(document.path)
        self.documents[document.path] = document

    def document_for(self, path: Path) -> Document:
        """Return the open document for ``path``, loading it on first use."""
        document = self.documents.get(path)
        if document is None:
            document = Document.load(path)
            self._add_document(document)
            path = document.path
        return self.documents[path]

    def styled_lines(self, path: Path) -> list[str]:
        lines = self._styled.get(path)
        if lines is None:
            lines = highlight_lines(self.documents[path], self.style, self.no_color)
            self._styled[path] = lines
        return lines

    @property
    def focused_pane(self) -> Pane:
        return self.panes[self.focused]

    # EditorHost

    def current_location(self) -> Location:
        pane = self.focused_pane
        return Location(pane.document, pane.cursor)

    def split_display_grid(self, rows: int, columns_per_row: tuple[int, ...]) -> None:
        plan = LayoutPlan(rows=rows, columns_per_row=tuple(columns_per_row))
        template = self.focused_pane
        self.plan = plan
        self.panes = [template.copy() for _ in range(plan.cells)]
        self.focused = 0

    def focus_sub_view(self, index: int) -> None:
        if not 0 <= index < len(self.panes):
            raise IndexError(f"no sub-view {index} (have {len(self.panes)})")
        self.focused = index

    def show_document_at(self, location: Location) -> None:
        document = self.document_for(location.document)
        pane = self.focused_pane
        pane.document = document.path
        pane.cursor = location.clamped(len(document)).offset

    def place_marker(self, location: Location, character: str, style: str) -> MarkerHandle:
        handle = self._next_marker
        self._next_marker += 1
        self.markers[handle] = Marker(location=location, glyph=character, style=style)
        return handle

    def remove_marker(self, handle: MarkerHandle) -> None:
        self.markers.pop(handle, None)

    def save_display_configuration(self) -> DisplayConfiguration:
        return DisplayConfiguration(
            plan=self.plan,
            panes=tuple(pane.copy() for pane in self.panes),
            focused=self.focused,
        )

    def restore_display_configuration(self, handle: object) -> None:
        if not isinstance(handle, DisplayConfiguration):
            raise TypeError(f"not a display configuration: {handle!r}")
        self.plan = handle.plan
        self.panes = [pane.copy() for pane in handle.panes]
        self.focused = handle.focused

    def read_single_character(self, prompt: str) -> SelectionResult:
        self.prompt = prompt
        try:
            self.render()
            key = self._read_key()
        finally:
            self.prompt = ""
        if key in self.abort_keys:
            return SELECTION_ABORTED
        return key

    def report_user_error(self, message: str) -> None:
        logger.warning("user error: %s", message)
        self.message = message
        self.message_is_error = True

    # Cursor motion and chrome

    def show_hint(self, message: str) -> None:
        self.message = message
        self.message_is_error = False

    def clear_message(self) -> None:
        self.message = ""
        self.message_is_error = False

    def move_lines(self, delta: int) -> None:
        """Move the cursor ``delta`` lines, keeping its column when possible."""
        pane = self.focused_pane
        document = self.documents[pane.document]
        line, column = document.line_col(pane.cursor)
        pane.cursor = document.offset_for(line + delta, column)

    def move_columns(self, delta: int) -> None:
        pane = self.focused_pane
        document = self.documents[pane.document]
        pane.cursor = document.clamp_offset(pane.cursor + delta)

    def move_to_line_start(self) -> None:
        pane = self.focused_pane
        document = self.documents[pane.document]
        line, _ = document.line_col(pane.cursor)
        pane.cursor = document.offset_for(line, 0)

    def move_to_line_end(self) -> None:
        pane = self.focused_pane
        document = self.documents[pane.document]
        line, _ = document.line_col(pane.cursor)
        pane.cursor = document.offset_for(line, document.line_length(line))

    def move_to_start(self) -> None:
        self.focused_pane.cursor = 0

    def move_to_end(self) -> None:
        pane = self.focused_pane
        pane.cursor = len(self.documents[pane.document])

    def page(self, direction: int) -> None:
        rects = self.rects()
        rows = text_rows_for(rects[self.focused]) if self.focused < len(rects) else 1
        self.move_lines(direction * max(1, rows - 1))

    def cycle_document(self, step: int = 1) -> None:
        """Show the next (or previous) open document in the focused pane."""
        pane = self.focused_pane
        idx = self.order.index(pane.document) if pane.document in self.order else 0
        target = self.order[(idx + step) % len(self.order)]
        if target == pane.document:
            return
        pane.document = target
        pane.cursor = 0
        pane.top = 0
        pane.left = 0

    def rects(self) -> list[SubViewRect]:
        columns, rows = self._terminal_size()
        return grid_rects(self.plan, columns, max(1, rows - 1))

    def frame(self) -> str:
        """Build the ANSI frame for the current state."""
        columns, rows = self._terminal_size()
        rects = grid_rects(self.plan, columns, max(1, rows - 1))
        for pane, rect in zip(self.panes, rects):
            pane.scroll_to_cursor(self.documents[pane.document], text_rows_for(rect), rect.width)
        status = ""
        pane = self.focused_pane
        if self.status_text is not None:
            status = f"{pane.document.name}{self.status_text()}"
        view = FrameView(
            width=columns,
            height=max(1, rows - 1),
            panes=self.panes,
            rects=rects,
            focused=self.focused,
            documents=self.documents,
            styled_lines=self.styled_lines,
            markers=tuple(self.markers.values()),
            status=status,
            message=self.message,
            message_is_error=self.message_is_error,
            prompt=self.prompt,
            theme=self.theme,
        )
        return render_frame(view)

    def render(self) -> None:
        self._write(self.frame())
