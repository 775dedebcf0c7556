"""Listing renderer.

Sorts entries by name and prints them in two passes: directories first,
then everything else. Both passes walk the same sorted sequence, so each
group keeps alphabetical order. The input collection is never modified.
"""

from collections.abc import Callable, Iterable
from typing import Final

from lsicons.listing.models import ListingEntry

LINK_SEPARATOR: Final = " -> "


def sort_entries(entries: Iterable[ListingEntry]) -> list[ListingEntry]:
    """Return entries sorted by name (case-sensitive, code-point order).

    The sort is stable, so entries sharing a name (e.g. several ``???``
    placeholders) keep their enumeration order.
    """
    return sorted(entries, key=lambda entry: entry.name)


def format_entry(entry: ListingEntry) -> str:
    """Format one entry as ``<icon> <name>``, plus `` -> <target>`` for links."""
    line = f"{entry.icon} {entry.name}"
    if entry.is_symlink:
        line += f"{LINK_SEPARATOR}{entry.target}"
    return line


def render_lines(entries: Iterable[ListingEntry]) -> list[str]:
    """Build the output lines without writing them.

    Args:
        entries: Classified entries, in any order.

    Returns:
        One line per entry: all directories, then all other entries,
        each group sorted by name.
    """
    ordered = sort_entries(entries)

    lines = [format_entry(entry) for entry in ordered if entry.is_directory]
    lines.extend(format_entry(entry) for entry in ordered if not entry.is_directory)
    return lines


def render(
    entries: Iterable[ListingEntry],
    write: Callable[[str], None] | None = None,
) -> int:
    """Write the listing, one line per entry.

    Args:
        entries: Classified entries, in any order.
        write: Line writer. Defaults to the shared stdout console.

    Returns:
        Number of lines written.
    """
    if write is None:
        from lsicons.utils.formatting import print_listing_line

        write = print_listing_line

    lines = render_lines(entries)
    for line in lines:
        write(line)
    return len(lines)
