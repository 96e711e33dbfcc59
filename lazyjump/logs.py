"""File logging for the TUI session.

The terminal belongs to the UI, so log records go to a rotating file under
the user log directory instead of stderr.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "lazyjump"
LOG_DIR = Path(user_log_dir(APP_NAME, appauthor=False))
LOG_FILENAME = "lazyjump.log"
MAX_LOG_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 2
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(debug: bool = False, log_dir: Path | None = None) -> Path | None:
    """Route root WARNING and ``lazyjump`` INFO (or DEBUG) to a log file.

    Returns the log file path, or ``None`` when the directory cannot be
    created; logging then stays unconfigured and the app still runs.
    """
    target_dir = LOG_DIR if log_dir is None else log_dir
    log_file = target_dir / LOG_FILENAME
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(log_file, maxBytes=MAX_LOG_BYTES, backupCount=BACKUP_COUNT)
    except OSError:
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    if not root.handlers:
        root.setLevel(logging.WARNING)
    root.addHandler(handler)
    logging.getLogger(APP_NAME).setLevel(logging.DEBUG if debug else logging.INFO)
    return log_file
