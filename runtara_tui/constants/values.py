"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "Runtara"
APP_NAME: Final = "runtara-tui"

# ============================================================================
# Environment variables
# ============================================================================

ENV_SERVER_ADDR: Final = "RUNTARA_ENV_ADDR"
ENV_SKIP_CERT_VERIFICATION: Final = "RUNTARA_SKIP_CERT_VERIFICATION"

# ============================================================================
# Display strings
# ============================================================================

NEVER: Final = "Never"
UNREADABLE: Final = "unreadable"
NO_VALUE: Final = "-"

# ============================================================================
# Status colors (rich style names)
# ============================================================================

STATUS_COLORS: Final = {
    "Pending": "yellow",
    "Running": "blue",
    "Suspended": "magenta",
    "Completed": "green",
    "Failed": "red",
    "Cancelled": "grey50",
    "Unknown": "grey37",
}

__all__ = [
    "APP_NAME",
    "APP_TITLE",
    "ENV_SERVER_ADDR",
    "ENV_SKIP_CERT_VERIFICATION",
    "NEVER",
    "NO_VALUE",
    "STATUS_COLORS",
    "UNREADABLE",
]
