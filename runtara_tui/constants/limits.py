"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Navigation limits
# ============================================================================

MAX_NAVIGATION_DEPTH: Final = 3

# ============================================================================
# Fetch limits
# ============================================================================

LIST_LIMIT_DEFAULT: Final = 100
LIST_LIMIT_MAX: Final = 1000

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 1

__all__ = [
    "LIST_LIMIT_DEFAULT",
    "LIST_LIMIT_MAX",
    "MAX_NAVIGATION_DEPTH",
    "REFRESH_INTERVAL_MIN",
]
