"""Directory listing module.

This module provides entry classification, icon selection, directory
scanning and the directories-first listing renderer.
"""

from lsicons.listing.classifier import RawEntry, classify
from lsicons.listing.icons import char_device_icon, icon_for, split_device_id
from lsicons.listing.kinds import EntryKind
from lsicons.listing.models import PLACEHOLDER, ListingEntry
from lsicons.listing.renderer import format_entry, render, render_lines, sort_entries
from lsicons.listing.scanner import DirectoryOpenError, DirectoryScanner, list_directory

__all__ = [
    "PLACEHOLDER",
    "DirectoryOpenError",
    "DirectoryScanner",
    "EntryKind",
    "ListingEntry",
    "RawEntry",
    "char_device_icon",
    "classify",
    "format_entry",
    "icon_for",
    "list_directory",
    "render",
    "render_lines",
    "sort_entries",
    "split_device_id",
]
