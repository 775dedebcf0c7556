"""Rich console formatting utilities.

Provides the shared stdout/stderr consoles and the print helpers used by
the CLI.
"""

import sys

from rich.console import Console
from rich.markup import escape

from lsicons.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def print_listing_line(line: str) -> None:
    """Write one listing line verbatim to stdout.

    File names may contain markup, emoji codes, tabs or control characters,
    so the line bypasses Rich rendering and goes straight to the console's
    file.
    """
    console.file.write(f"{line}\n")


def print_error(message: str) -> None:
    """Print an error message to stderr.

    The message is escaped, so it is printed as given.
    """
    err_console.print(f"[error]{escape(message)}[/]", emoji=False, highlight=False, soft_wrap=True)

