"""Theme for lsicons diagnostics.

Only error messages are styled; listing lines are always written unstyled.
"""

import logging
from typing import Final

from rich.theme import Theme

logger = logging.getLogger(__name__)

ERROR_STYLE: Final = "bold #f53263"

# Module-level cached theme instance
_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, building and caching it on first use.

    Returns:
        Cached Rich Theme instance defining the ``error`` style.
    """
    global _cached_theme
    if _cached_theme is None:
        logger.debug("Building default theme")
        _cached_theme = Theme({"error": ERROR_STYLE})
    return _cached_theme
