"""ANSI-aware measurement, clipping, and cell overlay helpers.

Escape sequences never count toward width. Tabs expand to 8-column stops,
combining marks take no columns, and East Asian wide characters take two.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
RESET = "\033[0m"
TAB_STOP = 8


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the display width of plain (escape-free) ``text``."""
    col = 0
    for ch in text:
        col += char_display_width(ch, col)
    return col


def slice_ansi_line(text: str, start_cols: int, max_cols: int) -> str:
    """Return a horizontal viewport of a styled line.

    The slice starts at ``start_cols`` display columns and includes up to
    ``max_cols`` columns. If the viewport begins after a color/style sequence,
    the latest pending SGR sequence is injected so visible text keeps the
    original styling.
    """
    if max_cols <= 0 or not text:
        return ""
    if start_cols < 0:
        start_cols = 0

    out: list[str] = []
    col = 0
    shown = 0
    i = 0
    n = len(text)
    pending_sgr = ""
    injected_style = False
    while i < n and shown < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                seq = match.group(0)
                if seq.endswith("m"):
                    pending_sgr = seq
                if col >= start_cols:
                    out.append(seq)
                    injected_style = True
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if col + w <= start_cols:
            col += w
            i += 1
            continue
        if col < start_cols:
            # Wide glyph or tab straddling the left edge.
            pad = min(col + w - start_cols, max_cols - shown)
            out.append(" " * pad)
            shown += pad
            col += w
            i += 1
            continue
        if not injected_style and pending_sgr:
            out.append(pending_sgr)
            injected_style = True
        if ch == "\t":
            pad = min(w, max_cols - shown)
            out.append(" " * pad)
            shown += pad
            col += w
            i += 1
            continue
        if shown + w > max_cols:
            break
        out.append(ch)
        shown += w
        col += w
        i += 1

    return "".join(out)


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns."""
    return slice_ansi_line(text, 0, max_cols)


def overlay_cell(line: str, col: int, glyph: str, style: str, max_cols: int) -> str:
    """Draw ``glyph`` in ``style`` at display column ``col`` of a styled line.

    The result is clipped to ``max_cols``; lines shorter than ``col`` are
    padded with spaces so markers past the end of a line stay visible.
    """
    if col < 0 or col >= max_cols:
        return clip_ansi_line(line, max_cols)
    head = clip_ansi_line(line, col)
    head_width = display_width(strip_ansi(head))
    if head_width < col:
        head += " " * (col - head_width)
    glyph_width = max(1, display_width(glyph))
    tail = slice_ansi_line(line, col + glyph_width, max_cols - col - glyph_width)
    return f"{head}{RESET}{style}{glyph}{RESET}{tail}"
