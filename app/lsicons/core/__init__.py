"""Core building blocks shared by the CLI: presentation theme."""

from lsicons.core.theme import ERROR_STYLE, get_theme

__all__ = ["ERROR_STYLE", "get_theme"]
