"""Entry kind discriminant for directory listings."""

from enum import Enum


class EntryKind(str, Enum):
    """On-disk type of a listed directory entry.

    Attributes:
        UNKNOWN: Name or type could not be read.
        REGULAR: Plain file (and any type not matched otherwise).
        DIRECTORY: Directory.
        SYMLINK: Symbolic link, never followed.
        PIPE: Named pipe (FIFO).
        SOCKET: Unix domain socket.
        CHAR_DEVICE: Character device node.
        BLOCK_DEVICE: Block device node.
    """

    UNKNOWN = "unknown"
    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    PIPE = "pipe"
    SOCKET = "socket"
    CHAR_DEVICE = "char_device"
    BLOCK_DEVICE = "block_device"

    @property
    def is_device(self) -> bool:
        """Whether entries of this kind carry a device identifier."""
        return self in (EntryKind.CHAR_DEVICE, EntryKind.BLOCK_DEVICE)
