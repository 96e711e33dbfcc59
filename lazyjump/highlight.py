"""Syntax highlighting of whole documents into per-line ANSI strings.

Control bytes are escaped before highlighting so file content can never
move the terminal cursor or ring the bell.
"""

from __future__ import annotations

import re
from functools import lru_cache

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.util import ClassNotFound

from .documents import Document

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
FALLBACK_STYLE = "monokai"


def sanitize_terminal_text(source: str) -> str:
    """Replace control characters with visible one-character stand-ins.

    Each control character maps to exactly one replacement character (carriage
    returns become spaces) so character offsets stay aligned with columns.
    """
    source = source.replace("\r", " ")
    if _CONTROL_RE.search(source) is None:
        return source
    return _CONTROL_RE.sub("\N{REPLACEMENT CHARACTER}", source)


@lru_cache(maxsize=16)
def _formatter_for_style(style: str) -> Terminal256Formatter:
    try:
        return Terminal256Formatter(style=style)
    except ClassNotFound:
        return Terminal256Formatter(style=FALLBACK_STYLE)


def highlight_lines(document: Document, style: str = FALLBACK_STYLE, no_color: bool = False) -> list[str]:
    """Return one styled string per document line, newline stripped."""
    source = sanitize_terminal_text(document.text)
    if no_color:
        return source.split("\n")

    try:
        lexer = get_lexer_for_filename(document.path.name, source, stripnl=False, ensurenl=False)
    except ClassNotFound:
        lexer = TextLexer(stripnl=False, ensurenl=False)
    rendered = highlight(source, lexer, _formatter_for_style(style))
    lines = rendered.split("\n")
    if len(lines) < document.line_count:
        lines.extend([""] * (document.line_count - len(lines)))
    return lines[: document.line_count]
