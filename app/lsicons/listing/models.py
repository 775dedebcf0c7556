"""Listing domain models.

This module defines the immutable value that represents one slot of a
directory listing. Each entry has exactly one kind; kind-specific data
(link target, device identifier) is only present on the kinds that carry
it, and the icon is fixed when the entry is built.
"""

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Final

from lsicons.listing.icons import icon_for, split_device_id
from lsicons.listing.kinds import EntryKind

# Shown wherever a name or link target cannot be represented as text
PLACEHOLDER: Final = "???"


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class ListingEntry:
    """A single entry of a directory listing.

    Equality, ordering and hashing consider the name only; two entries
    with the same name compare equal whatever their kind.

    Use the named constructors (:meth:`directory`, :meth:`symlink`, ...)
    rather than calling the class directly.

    Attributes:
        name: Entry name as text, or ``"???"`` if it could not be decoded.
        kind: On-disk type of the entry.
        target: Link destination text (symlinks only).
        device_id: Raw device identifier (character/block devices only).
        icon: Glyph chosen at construction time.
    """

    name: str
    kind: EntryKind
    target: str | None = None
    device_id: int | None = None
    icon: str = field(init=False)

    def __post_init__(self) -> None:
        """Validate kind-specific fields and assign the icon."""
        if not self.name:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)
        if (self.kind == EntryKind.SYMLINK) != (self.target is not None):
            msg = f"Only symlinks carry a target (kind={self.kind.value})"
            raise ValueError(msg)
        if self.kind.is_device != (self.device_id is not None):
            msg = f"Only devices carry a device_id (kind={self.kind.value})"
            raise ValueError(msg)
        if self.device_id is not None and self.device_id < 0:
            msg = f"device_id must be non-negative, got {self.device_id}"
            raise ValueError(msg)

        object.__setattr__(self, "icon", icon_for(self.kind, self.device_id))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListingEntry):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ListingEntry):
            return NotImplemented
        return self.name < other.name

    def __hash__(self) -> int:
        return hash(self.name)

    @property
    def is_directory(self) -> bool:
        """Check if this entry is a directory."""
        return self.kind == EntryKind.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        """Check if this entry is a symbolic link."""
        return self.kind == EntryKind.SYMLINK

    @property
    def device_major(self) -> int | None:
        """Major device number (bits 8-15), or None for non-devices."""
        if self.device_id is None:
            return None
        return split_device_id(self.device_id)[0]

    @property
    def device_minor(self) -> int | None:
        """Minor device number (bits 0-7), or None for non-devices."""
        if self.device_id is None:
            return None
        return split_device_id(self.device_id)[1]

    # -------------------------------------------------------------------------
    # Named constructors
    # -------------------------------------------------------------------------

    @classmethod
    def unknown(cls, name: str = PLACEHOLDER) -> "ListingEntry":
        """Entry whose name or type could not be read."""
        return cls(name=name, kind=EntryKind.UNKNOWN)

    @classmethod
    def regular(cls, name: str) -> "ListingEntry":
        return cls(name=name, kind=EntryKind.REGULAR)

    @classmethod
    def directory(cls, name: str) -> "ListingEntry":
        return cls(name=name, kind=EntryKind.DIRECTORY)

    @classmethod
    def symlink(cls, name: str, target: str = PLACEHOLDER) -> "ListingEntry":
        """Symbolic link; ``target`` defaults to the placeholder."""
        return cls(name=name, kind=EntryKind.SYMLINK, target=target)

    @classmethod
    def pipe(cls, name: str) -> "ListingEntry":
        return cls(name=name, kind=EntryKind.PIPE)

    @classmethod
    def socket(cls, name: str) -> "ListingEntry":
        return cls(name=name, kind=EntryKind.SOCKET)

    @classmethod
    def char_device(cls, name: str, device_id: int = 0) -> "ListingEntry":
        """Character device; the icon depends on ``device_id``."""
        return cls(name=name, kind=EntryKind.CHAR_DEVICE, device_id=device_id)

    @classmethod
    def block_device(cls, name: str, device_id: int = 0) -> "ListingEntry":
        return cls(name=name, kind=EntryKind.BLOCK_DEVICE, device_id=device_id)
