"""ANSI palette for pane chrome, cursor, and status row.

Syntax colors come from the pygments style; this only covers the UI.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the frame renderer."""

    name: str
    divider: str
    reset: str
    cursor: str
    filler: str
    mode_line_active: str
    mode_line_inactive: str
    status: str
    status_error: str
    status_prompt: str
    status_hint: str


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[2m",
    reset="\033[0m",
    cursor="\033[7m",
    filler="\033[2;38;5;244m",
    mode_line_active="\033[7;1m",
    mode_line_inactive="\033[2;7m",
    status="\033[38;5;252m",
    status_error="\033[1;31m",
    status_prompt="\033[1;38;5;81m",
    status_hint="\033[2;38;5;250m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reset="\033[0m",
    cursor="\033[7m",
    filler="",
    mode_line_active="\033[7m",
    mode_line_inactive="",
    status="",
    status_error="",
    status_prompt="",
    status_hint="",
)


def theme_for(no_color: bool) -> UITheme:
    return PLAIN_THEME if no_color else DEFAULT_THEME
