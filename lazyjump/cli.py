"""Command-line front door for lazyjump.

Parses CLI options, loads the requested files, and hands them to the
interactive session.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from . import config
from .app import run_app
from .documents import Document
from .logs import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyjump",
        description="View files in the terminal and jump between named cursor points.",
    )
    parser.add_argument("paths", nargs="+", metavar="PATH", help="Files to open.")
    parser.add_argument("--style", default=None, help="Pygments style name (default from config or monokai).")
    parser.add_argument("--no-color", action="store_true", help="Disable syntax and UI colors.")
    parser.add_argument("--debug", action="store_true", help="Write debug records to the log file.")
    return parser


def load_documents(paths: Sequence[str]) -> list[Document]:
    """Load each path, exiting with a message for anything that is not a file."""
    documents: list[Document] = []
    for raw in paths:
        path = Path(raw)
        if not path.exists():
            raise SystemExit(f"Path not found: {path}")
        if not path.is_file():
            raise SystemExit(f"Not a file: {path}")
        documents.append(Document.load(path))
    return documents


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments and launch the interactive viewer."""
    args = build_parser().parse_args(argv)
    documents = load_documents(args.paths)
    setup_logging(debug=args.debug)
    style = args.style if args.style else config.load_syntax_style()
    run_app(documents, style, args.no_color)


if __name__ == "__main__":
    main()
