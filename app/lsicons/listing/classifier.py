"""Entry classifier: raw directory entries to listing entries.

:func:`classify` never raises. Each probe it performs (name decoding, type
query, link target, device metadata) has its own fallback, so a failure in
one probe only degrades the field it was meant to fill.
"""

import logging
import os
import stat
from typing import Protocol

from lsicons.listing.models import PLACEHOLDER, ListingEntry

logger = logging.getLogger(__name__)


class RawEntry(Protocol):
    """Structural type of a raw directory entry (see :class:`os.DirEntry`)."""

    @property
    def name(self) -> str: ...

    @property
    def path(self) -> str: ...

    def stat(self, *, follow_symlinks: bool = True) -> os.stat_result: ...


def _as_text(value: str) -> str | None:
    """Return value if it is valid text, else None.

    Undecodable bytes in file names surface in Python as lone surrogates
    (``surrogateescape``), which cannot be encoded as UTF-8.
    """
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return value


def _read_link_target(raw_entry: RawEntry) -> str:
    """Read a symlink destination, falling back to the placeholder."""
    try:
        target = os.readlink(raw_entry.path)
    except OSError as e:
        logger.debug("Cannot read link target of %r: %s", raw_entry.path, e)
        return PLACEHOLDER

    text = _as_text(target)
    if text is None:
        logger.debug("Link target of %r is not valid text", raw_entry.path)
        return PLACEHOLDER
    return text


def _read_device_id(raw_entry: RawEntry) -> int:
    """Read the raw device identifier of a device node, defaulting to 0."""
    try:
        return raw_entry.stat(follow_symlinks=False).st_rdev
    except OSError as e:
        logger.debug("Cannot read device metadata of %r: %s", raw_entry.path, e)
        return 0


def classify(raw_entry: RawEntry) -> ListingEntry:
    """Convert one raw directory entry into a :class:`ListingEntry`.

    Classification order:

    1. Undecodable or empty name: ``Unknown("???")``, nothing else is
       probed.
    2. Unreadable type: ``Unknown(name)``.
    3. Directory, symlink, FIFO, character device, block device, socket;
       anything else is a regular file.

    Symlinks are never followed: a link is listed as a link whether or not
    its target exists.

    Args:
        raw_entry: Entry produced by directory enumeration.

    Returns:
        The classified entry. Never raises for filesystem errors.
    """
    name = _as_text(raw_entry.name)
    if not name:
        logger.debug("Entry name is not valid text: %r", raw_entry.name)
        return ListingEntry.unknown()

    try:
        mode = raw_entry.stat(follow_symlinks=False).st_mode
    except OSError as e:
        logger.debug("Cannot determine type of %r: %s", raw_entry.path, e)
        return ListingEntry.unknown(name)

    if stat.S_ISDIR(mode):
        return ListingEntry.directory(name)
    if stat.S_ISLNK(mode):
        return ListingEntry.symlink(name, _read_link_target(raw_entry))
    if stat.S_ISFIFO(mode):
        return ListingEntry.pipe(name)
    if stat.S_ISCHR(mode):
        return ListingEntry.char_device(name, _read_device_id(raw_entry))
    if stat.S_ISBLK(mode):
        return ListingEntry.block_device(name, _read_device_id(raw_entry))
    if stat.S_ISSOCK(mode):
        return ListingEntry.socket(name)

    return ListingEntry.regular(name)
