"""Icon glyphs and icon selection for listing entries.

Every glyph is a single pictograph followed by U+FE0E (VARIATION
SELECTOR-15) so terminals render it in text presentation. Selection is a
pure lookup: one fixed glyph per entry kind, except character devices,
whose glyph depends on the device major/minor numbers.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from lsicons.listing.kinds import EntryKind

_TEXT_STYLE: Final = "\ufe0e"

ICON_ERROR: Final = "\u2753" + _TEXT_STYLE
ICON_FILE: Final = "\U0001f5ce" + _TEXT_STYLE
ICON_DIRECTORY: Final = "\U0001f4c1" + _TEXT_STYLE
ICON_SYMLINK: Final = "\U0001f517" + _TEXT_STYLE
ICON_PIPE: Final = "\U0001f6b0" + _TEXT_STYLE
ICON_SOCKET: Final = "\U0001f50c" + _TEXT_STYLE
ICON_CHAR_DEVICE: Final = "\U0001f5a8" + _TEXT_STYLE
ICON_BLOCK_DEVICE: Final = "\U0001f4bf" + _TEXT_STYLE
ICON_DEV_NULL: Final = "\U0001f6bd" + _TEXT_STYLE
ICON_TTY: Final = "\U0001f4bb" + _TEXT_STYLE
ICON_DISK: Final = "\U0001f5d4" + _TEXT_STYLE

KIND_ICONS: Final[Mapping[EntryKind, str]] = MappingProxyType(
    {
        EntryKind.UNKNOWN: ICON_ERROR,
        EntryKind.REGULAR: ICON_FILE,
        EntryKind.DIRECTORY: ICON_DIRECTORY,
        EntryKind.SYMLINK: ICON_SYMLINK,
        EntryKind.PIPE: ICON_PIPE,
        EntryKind.SOCKET: ICON_SOCKET,
        EntryKind.CHAR_DEVICE: ICON_CHAR_DEVICE,
        EntryKind.BLOCK_DEVICE: ICON_BLOCK_DEVICE,
    }
)

# Device numbers known to have dedicated glyphs
_MAJOR_MEM: Final = 1
_MINOR_NULL: Final = 3
_MAJOR_TTY: Final = 4
_MAJOR_TTYAUX: Final = 5
_MINORS_CONSOLE: Final = frozenset({0, 1})  # /dev/tty, /dev/console
_MAJOR_DISK: Final = 241


def split_device_id(device_id: int) -> tuple[int, int]:
    """Split a raw device identifier into its 8-bit major and minor fields.

    Only the legacy 16-bit layout is inspected: the major number lives in
    bits 8-15, the minor number in bits 0-7.

    Args:
        device_id: Raw device identifier (``st_rdev``).

    Returns:
        Tuple of (major, minor).
    """
    return (device_id & 0xFF00) >> 8, device_id & 0x00FF


def char_device_icon(device_id: int) -> str:
    """Pick the glyph for a character device.

    Args:
        device_id: Raw device identifier (``st_rdev``).

    Returns:
        Null-device, terminal or disk glyph for well-known devices,
        otherwise the generic character-device glyph.
    """
    major, minor = split_device_id(device_id)

    if major == _MAJOR_MEM and minor == _MINOR_NULL:
        return ICON_DEV_NULL
    if major == _MAJOR_TTY:
        return ICON_TTY
    if major == _MAJOR_TTYAUX and minor in _MINORS_CONSOLE:
        return ICON_TTY
    if major == _MAJOR_DISK:
        return ICON_DISK

    return ICON_CHAR_DEVICE


def icon_for(kind: EntryKind, device_id: int | None = None) -> str:
    """Return the glyph for an entry of the given kind.

    Args:
        kind: Entry kind.
        device_id: Raw device identifier, only consulted for character
            devices.

    Returns:
        Icon glyph string.
    """
    if kind == EntryKind.CHAR_DEVICE:
        return char_device_icon(device_id or 0)
    return KIND_ICONS[kind]
