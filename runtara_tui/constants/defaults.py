"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Connection defaults
# ============================================================================

SERVER_DEFAULT: Final = "127.0.0.1:8002"
SKIP_CERT_VERIFICATION_DEFAULT: Final = True

# ============================================================================
# UI defaults
# ============================================================================

REFRESH_INTERVAL_DEFAULT: Final = 5
FRAME_INTERVAL_DEFAULT: Final = 0.25

__all__ = [
    "FRAME_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "SERVER_DEFAULT",
    "SKIP_CERT_VERIFICATION_DEFAULT",
]
