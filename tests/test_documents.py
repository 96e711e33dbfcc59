"""Tests for document loading and offset conversion."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lazyjump.documents import Document, read_text


class DocumentTests(unittest.TestCase):
    def test_line_col_round_trip_points(self) -> None:
        doc = Document(Path("/tmp/x.txt"), "ab\ncde\n\nf")

        self.assertEqual(doc.line_count, 4)
        self.assertEqual(doc.line_col(0), (0, 0))
        self.assertEqual(doc.line_col(2), (0, 2))
        self.assertEqual(doc.line_col(3), (1, 0))
        self.assertEqual(doc.line_col(7), (2, 0))
        self.assertEqual(doc.line_col(8), (3, 0))
        self.assertEqual(doc.line_col(9), (3, 1))
        self.assertEqual(doc.line_col(500), (3, 1))

    def test_offset_for_clamps_line_and_column(self) -> None:
        doc = Document(Path("/tmp/x.txt"), "ab\ncde\n")

        self.assertEqual(doc.offset_for(1, 2), 5)
        self.assertEqual(doc.offset_for(1, 99), 6)
        self.assertEqual(doc.offset_for(99, 0), 7)
        self.assertEqual(doc.offset_for(-1, 1), 1)

    def test_line_text_strips_newline(self) -> None:
        doc = Document(Path("/tmp/x.txt"), "ab\ncde\n")
        self.assertEqual(doc.line_text(0), "ab")
        self.assertEqual(doc.line_text(1), "cde")
        self.assertEqual(doc.line_text(2), "")

    def test_empty_document_has_one_line(self) -> None:
        doc = Document(Path("/tmp/empty.txt"), "")
        self.assertEqual(doc.line_count, 1)
        self.assertEqual(doc.line_col(0), (0, 0))
        self.assertEqual(len(doc), 0)

    def test_load_resolves_path_and_falls_back_to_latin1(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "latin.txt"
            path.write_bytes(b"caf\xe9\n")

            doc = Document.load(path)

            self.assertEqual(doc.path, path.resolve())
            self.assertEqual(doc.text, "café\n")
            self.assertEqual(read_text(path), "café\n")


if __name__ == "__main__":
    unittest.main()
