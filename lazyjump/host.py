"""Editor-side capabilities the jump controller depends on.

``PointJumper`` never draws or reads keys itself; it drives an ``EditorHost``.
``TerminalHost`` is the shipped implementation and tests use a recording
fake.
"""

from __future__ import annotations

from typing import Final, Protocol, Union

from .points import Location

MarkerHandle = int


class SelectionAborted:
    """Sentinel type returned by ``read_single_character`` on an abort key."""

    def __repr__(self) -> str:
        return "SELECTION_ABORTED"


SELECTION_ABORTED: Final = SelectionAborted()
SelectionResult = Union[str, SelectionAborted]


class EditorHost(Protocol):
    """Display, cursor, and keyboard primitives provided by the editor."""

    def current_location(self) -> Location:
        """Return the live cursor position."""
        ...

    def split_display_grid(self, rows: int, columns_per_row: tuple[int, ...]) -> None:
        """Replace the visible layout with a grid of sub-views."""
        ...

    def focus_sub_view(self, index: int) -> None:
        """Make sub-view ``index`` (row-major) the target of later calls."""
        ...

    def show_document_at(self, location: Location) -> None:
        """Show ``location`` in the focused sub-view and put its cursor there."""
        ...

    def place_marker(self, location: Location, character: str, style: str) -> MarkerHandle:
        ...

    def remove_marker(self, handle: MarkerHandle) -> None:
        ...

    def save_display_configuration(self) -> object:
        """Return an opaque snapshot of panes, documents, and focus."""
        ...

    def restore_display_configuration(self, handle: object) -> None:
        ...

    def read_single_character(self, prompt: str) -> SelectionResult:
        """Block for one key; abort keys yield ``SELECTION_ABORTED``."""
        ...

    def report_user_error(self, message: str) -> None:
        ...
