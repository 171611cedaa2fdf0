"""Timeout constants for the TUI.

All timeout values for management API requests, in seconds.
"""

from typing import Final

CONNECT_TIMEOUT: Final = 5.0
REQUEST_TIMEOUT: Final = 10.0

__all__ = [
    "CONNECT_TIMEOUT",
    "REQUEST_TIMEOUT",
]
