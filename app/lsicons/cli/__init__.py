"""CLI package for lsicons.

This package contains the Typer application.
"""

from lsicons.cli.main import app

__all__ = ["app"]
