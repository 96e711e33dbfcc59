"""Loaded text documents and offset/line-column conversion.

Offsets are character indices into the decoded text, which is what points
store. Lines are split on ``\\n`` only so offsets map back one-to-one.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from pathlib import Path


def read_text(path: Path) -> str:
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


@dataclass
class Document:
    path: Path
    text: str
    _line_starts: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        starts = [0]
        for idx, ch in enumerate(self.text):
            if ch == "\n":
                starts.append(idx + 1)
        self._line_starts = starts

    @classmethod
    def load(cls, path: Path) -> Document:
        """Read ``path`` with encoding fallback and keep its resolved path."""
        resolved = path.resolve()
        return cls(path=resolved, text=read_text(resolved))

    def __len__(self) -> int:
        return len(self.text)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_text(self, line: int) -> str:
        """Return line ``line`` without its trailing newline."""
        start = self._line_starts[line]
        if line + 1 < len(self._line_starts):
            return self.text[start : self._line_starts[line + 1] - 1]
        return self.text[start:]

    def line_length(self, line: int) -> int:
        return len(self.line_text(line))

    def clamp_offset(self, offset: int) -> int:
        return max(0, min(offset, len(self.text)))

    def line_col(self, offset: int) -> tuple[int, int]:
        """Convert a character offset into 0-based ``(line, column)``."""
        offset = self.clamp_offset(offset)
        line = bisect.bisect_right(self._line_starts, offset) - 1
        return line, offset - self._line_starts[line]

    def offset_for(self, line: int, column: int) -> int:
        """Convert ``(line, column)`` to an offset, clamping both to the text."""
        line = max(0, min(line, self.line_count - 1))
        column = max(0, min(column, self.line_length(line)))
        return self._line_starts[line] + column
