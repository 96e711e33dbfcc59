"""Frame composition for tiled document panes.

Everything here is pure: it turns panes, rectangles, markers, and status
text into one ANSI string ready to be written to the terminal.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .ansi import RESET, display_width, overlay_cell, slice_ansi_line, strip_ansi
from .documents import Document
from .layout import SubViewRect
from .points import Location
from .ui_theme import DEFAULT_THEME, UITheme

DIVIDER = "│"
FILLER = "~"


@dataclass
class Pane:
    """One sub-view: a document, its cursor offset, and scroll position."""

    document: Path
    cursor: int = 0
    top: int = 0
    left: int = 0

    def copy(self) -> Pane:
        return Pane(self.document, self.cursor, self.top, self.left)

    def scroll_to_cursor(self, document: Document, text_rows: int, text_cols: int) -> None:
        """Adjust ``top``/``left`` so the cursor cell is inside the viewport."""
        text_rows = max(1, text_rows)
        text_cols = max(1, text_cols)
        line, column = document.line_col(self.cursor)
        if line < self.top:
            self.top = line
        elif line >= self.top + text_rows:
            self.top = line - text_rows + 1
        cursor_col = display_width(document.line_text(line)[:column])
        if cursor_col < self.left:
            self.left = cursor_col
        elif cursor_col >= self.left + text_cols:
            self.left = cursor_col - text_cols + 1


@dataclass(frozen=True)
class Marker:
    location: Location
    glyph: str
    style: str


@dataclass
class FrameView:
    """Inputs for one rendered frame."""

    width: int
    height: int
    panes: Sequence[Pane]
    rects: Sequence[SubViewRect]
    focused: int
    documents: dict[Path, Document]
    styled_lines: Callable[[Path], list[str]]
    markers: Sequence[Marker] = ()
    status: str = ""
    message: str = ""
    message_is_error: bool = False
    prompt: str = ""
    theme: UITheme = field(default=DEFAULT_THEME)


def text_rows_for(rect: SubViewRect) -> int:
    """Rows available for text once the pane's mode line is reserved."""
    return rect.height - 1 if rect.height >= 2 else max(0, rect.height)


def pad_to_width(styled: str, width: int) -> str:
    shown = display_width(strip_ansi(styled))
    if shown >= width:
        return styled
    return styled + " " * (width - shown)


def _cell_glyph(line_text: str, column: int) -> str:
    if column >= len(line_text):
        return " "
    ch = line_text[column]
    if ch == "\t" or not ch.isprintable():
        return " "
    return ch


def _pane_text_rows(view: FrameView, pane: Pane, rect: SubViewRect, is_focused: bool) -> list[str]:
    theme = view.theme
    document = view.documents[pane.document]
    styled = view.styled_lines(pane.document)
    rows: list[str] = []
    cursor_line, cursor_column = document.line_col(pane.cursor)
    line_markers: dict[int, list[tuple[int, Marker]]] = {}
    for marker in view.markers:
        if marker.location.document != pane.document:
            continue
        line, column = document.line_col(marker.location.offset)
        line_markers.setdefault(line, []).append((column, marker))

    for row in range(text_rows_for(rect)):
        line_no = pane.top + row
        if line_no >= document.line_count:
            rows.append(pad_to_width(f"{theme.filler}{FILLER}{RESET}", rect.width))
            continue
        plain = document.line_text(line_no)
        out = slice_ansi_line(styled[line_no], pane.left, rect.width)
        if is_focused and line_no == cursor_line:
            col = display_width(plain[:cursor_column]) - pane.left
            out = overlay_cell(out, col, _cell_glyph(plain, cursor_column), theme.cursor, rect.width)
        for column, marker in line_markers.get(line_no, ()):
            col = display_width(plain[:column]) - pane.left
            out = overlay_cell(out, col, marker.glyph, marker.style, rect.width)
        rows.append(pad_to_width(out + RESET, rect.width))
    return rows


def _mode_line(view: FrameView, pane: Pane, rect: SubViewRect, is_focused: bool) -> str:
    document = view.documents[pane.document]
    line, column = document.line_col(pane.cursor)
    label = f" {pane.document.name}  {line + 1}:{column + 1} "
    label = slice_ansi_line(label, 0, rect.width)
    style = view.theme.mode_line_active if is_focused else view.theme.mode_line_inactive
    return f"{style}{pad_to_width(label, rect.width)}{RESET}"


def render_pane(view: FrameView, index: int) -> list[str]:
    """Return exactly ``rect.height`` rows, each ``rect.width`` columns wide."""
    pane = view.panes[index]
    rect = view.rects[index]
    is_focused = index == view.focused
    rows = _pane_text_rows(view, pane, rect, is_focused)
    if rect.height >= 2:
        rows.append(_mode_line(view, pane, rect, is_focused))
    return rows


def render_status_row(view: FrameView) -> str:
    theme = view.theme
    if view.prompt:
        text = f"{theme.status_prompt}{view.prompt}{RESET}"
    elif view.message:
        style = theme.status_error if view.message_is_error else theme.status_hint
        text = f"{theme.status}{view.status}{RESET}  {style}{view.message}{RESET}"
    else:
        text = f"{theme.status}{view.status}{RESET}"
    return pad_to_width(slice_ansi_line(text, 0, view.width) + RESET, view.width)


def render_frame(view: FrameView) -> str:
    """Compose the whole screen: tiled panes plus the status row."""
    screen: list[list[tuple[int, str]]] = [[] for _ in range(max(0, view.height))]
    for index, rect in enumerate(view.rects[: len(view.panes)]):
        for offset, row in enumerate(render_pane(view, index)):
            y = rect.top + offset
            if 0 <= y < len(screen):
                screen[y].append((rect.left, row))

    divider = f"{view.theme.divider}{DIVIDER}{RESET}"
    lines: list[str] = []
    for segments in screen:
        segments.sort(key=lambda item: item[0])
        lines.append(divider.join(row for _, row in segments))
    lines.append(render_status_row(view))
    return "\033[H" + "\r\n".join(f"{line}\033[K" for line in lines)
