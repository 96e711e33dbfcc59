"""Tests for file-based logging setup."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from lazyjump import logs


class SetupLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._root_handlers = list(root.handlers)
        self._root_level = root.level
        self._app_level = logging.getLogger(logs.APP_NAME).level

    def tearDown(self) -> None:
        root = logging.getLogger()
        for handler in list(root.handlers):
            if handler not in self._root_handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(self._root_level)
        logging.getLogger(logs.APP_NAME).setLevel(self._app_level)

    def test_records_from_package_loggers_reach_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_file = logs.setup_logging(log_dir=Path(tmp) / "logs")

            logging.getLogger("lazyjump.points").info("saved point b")
            for handler in logging.getLogger().handlers:
                handler.flush()

            self.assertIsNotNone(log_file)
            self.assertIn("saved point b", log_file.read_text(encoding="utf-8"))
            self.assertEqual(logging.getLogger(logs.APP_NAME).level, logging.INFO)

    def test_debug_flag_lowers_package_level(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            logs.setup_logging(debug=True, log_dir=Path(tmp))
            self.assertEqual(logging.getLogger(logs.APP_NAME).level, logging.DEBUG)

    def test_unwritable_directory_returns_none(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")
            self.assertIsNone(logs.setup_logging(log_dir=blocker / "sub"))


if __name__ == "__main__":
    unittest.main()
