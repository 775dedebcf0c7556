"""Directory scanner for single-directory listings.

Opens one directory, walks its entries once (non-recursive) and hands
each raw entry to the classifier. Failing to open the directory is the
only error that escapes; everything that goes wrong afterwards is turned
into a placeholder entry.
"""

import logging
import os
from collections.abc import Iterator

from lsicons.listing.classifier import classify
from lsicons.listing.models import ListingEntry

logger = logging.getLogger(__name__)


class DirectoryOpenError(OSError):
    """Raised when the target path cannot be opened as a directory.

    Attributes:
        path: Path as given by the caller.
        reason: System error description (e.g. "No such file or directory").
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not open '{path}': {reason}")
        self.path = path
        self.reason = reason


class DirectoryScanner:
    """Lists the entries of a single directory.

    Hidden entries are included; ``.`` and ``..`` are not, since
    :func:`os.scandir` never yields them.

    Args:
        path: Directory to list. Defaults to the current directory.
    """

    def __init__(self, path: str | os.PathLike[str] = ".") -> None:
        self._path = os.fspath(path)

    @property
    def path(self) -> str:
        """Directory this scanner lists."""
        return self._path

    def open(self) -> "os._ScandirIterator[str]":
        """Open the directory stream.

        Returns:
            The :func:`os.scandir` iterator; the caller must close it.

        Raises:
            DirectoryOpenError: If the path is missing, not a directory,
                or not readable.
        """
        try:
            return os.scandir(self._path)
        except OSError as e:
            reason = e.strerror or str(e)
            logger.debug("Cannot open directory %r: %s", self._path, reason)
            raise DirectoryOpenError(self._path, reason) from e

    def scan(self) -> Iterator[ListingEntry]:
        """Yield one classified entry per directory slot.

        The directory is opened on the first ``next()``. If advancing the
        stream fails, a single ``Unknown("???")`` entry is yielded and
        enumeration ends, because the stream is closed after such an error.

        Yields:
            ListingEntry instances in directory order (unsorted).

        Raises:
            DirectoryOpenError: If the directory cannot be opened.
        """
        with self.open() as entries:
            while True:
                try:
                    raw_entry = next(entries)
                except StopIteration:
                    return
                except OSError as e:
                    logger.debug("Error while reading %r: %s", self._path, e)
                    yield ListingEntry.unknown()
                    return

                yield classify(raw_entry)


def list_directory(path: str | os.PathLike[str] = ".") -> list[ListingEntry]:
    """Classify every entry of ``path``.

    Args:
        path: Directory to list.

    Returns:
        Unsorted list of entries.

    Raises:
        DirectoryOpenError: If the directory cannot be opened.
    """
    return list(DirectoryScanner(path).scan())
