"""Interactive session wiring.

Builds the terminal host, point jumper, and key registry, then runs the
read-dispatch-render loop until the user quits.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence

from . import config
from .commands import PointCommands
from .documents import Document
from .input import read_key
from .jump import PointJumper
from .key_registry import KeyBinding, KeyRegistry
from .terminal import TerminalController
from .tui_host import TerminalHost

logger = logging.getLogger(__name__)

QUIT_KEYS = ("q", "CTRL_C")
HELP_TEXT = "m save point  ' jump  C clear  TAB next file  hjkl/arrows move  q quit"


def build_navigation_bindings(host: TerminalHost, toggle_help: Callable[[], None]) -> tuple[KeyBinding, ...]:
    """Cursor motion, document cycling, and help bindings."""
    return (
        KeyBinding(("UP", "k"), lambda: host.move_lines(-1)),
        KeyBinding(("DOWN", "j"), lambda: host.move_lines(1)),
        KeyBinding(("LEFT", "h"), lambda: host.move_columns(-1)),
        KeyBinding(("RIGHT", "l"), lambda: host.move_columns(1)),
        KeyBinding(("HOME", "0"), host.move_to_line_start),
        KeyBinding(("END", "$"), host.move_to_line_end),
        KeyBinding(("g",), host.move_to_start),
        KeyBinding(("G",), host.move_to_end),
        KeyBinding(("PAGE_UP",), lambda: host.page(-1)),
        KeyBinding(("PAGE_DOWN", " "), lambda: host.page(1)),
        KeyBinding(("TAB",), lambda: host.cycle_document(1)),
        KeyBinding(("?",), toggle_help),
    )


class Session:
    """One editing session: host, jumper, and key dispatch."""

    def __init__(self, host: TerminalHost, jumper: PointJumper, command_keys: dict[str, tuple[str, ...]]) -> None:
        self.host = host
        self.jumper = jumper
        self.commands = PointCommands(jumper)
        self.show_help = False
        self.keys = KeyRegistry()
        self.keys.register_bindings(*build_navigation_bindings(host, self.toggle_help))
        self.commands.register(self.keys, command_keys)
        host.status_text = jumper.status_text

    def toggle_help(self) -> None:
        self.show_help = not self.show_help
        if self.show_help:
            self.host.show_hint(HELP_TEXT)
        else:
            self.host.clear_message()

    def start(self) -> None:
        """Activate point tracking: one fresh point at the cursor."""
        self.jumper.clear()

    def handle_key(self, key: str) -> bool:
        """Dispatch one key; return ``False`` when the session should end."""
        if key in QUIT_KEYS or key == "":
            return False
        if not self.show_help:
            self.host.clear_message()
        if self.keys.dispatch(key) is None:
            logger.debug("unbound key %r", key)
        return True

    def run(self, next_key: Callable[[], str]) -> None:
        self.start()
        while True:
            self.host.render()
            if not self.handle_key(next_key()):
                return


def run_app(
    documents: Sequence[Document],
    style: str,
    no_color: bool,
) -> None:
    """Run the interactive viewer on ``documents`` until quit."""
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("lazyjump needs an interactive terminal.")
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)

    host = TerminalHost(
        documents,
        read_key=lambda: read_key(stdin_fd),
        write=terminal.write,
        terminal_size=terminal.size,
        abort_keys=config.load_abort_keys(),
        style=style,
        no_color=no_color,
    )
    jumper = PointJumper(host, marker_style=config.load_marker_style())
    session = Session(host, jumper, config.load_command_keys())
    logger.info("session started with %d document(s)", len(documents))
    with terminal.raw_mode():
        session.run(lambda: read_key(stdin_fd))
