"""lsicons - directory listing with an icon per entry type."""

__version__ = "0.1.0"
