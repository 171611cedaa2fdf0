"""Constants module for the Runtara TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, numbers with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
"""

from runtara_tui.constants.defaults import (
    FRAME_INTERVAL_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    SERVER_DEFAULT,
    SKIP_CERT_VERIFICATION_DEFAULT,
)
from runtara_tui.constants.enums import (
    TAB_LIST_KEYS,
    InstanceStatus,
    ListKey,
    MetricsGranularity,
    StatusFilter,
    Tab,
    ViewMode,
)
from runtara_tui.constants.limits import (
    LIST_LIMIT_DEFAULT,
    LIST_LIMIT_MAX,
    MAX_NAVIGATION_DEPTH,
    REFRESH_INTERVAL_MIN,
)
from runtara_tui.constants.timeouts import (
    CONNECT_TIMEOUT,
    REQUEST_TIMEOUT,
)
from runtara_tui.constants.values import (
    APP_NAME,
    APP_TITLE,
    ENV_SERVER_ADDR,
    ENV_SKIP_CERT_VERIFICATION,
    NEVER,
    NO_VALUE,
    STATUS_COLORS,
    UNREADABLE,
)

__all__ = [
    "APP_NAME",
    "APP_TITLE",
    "CONNECT_TIMEOUT",
    "ENV_SERVER_ADDR",
    "ENV_SKIP_CERT_VERIFICATION",
    "FRAME_INTERVAL_DEFAULT",
    "LIST_LIMIT_DEFAULT",
    "LIST_LIMIT_MAX",
    "MAX_NAVIGATION_DEPTH",
    "NEVER",
    "NO_VALUE",
    "REFRESH_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_MIN",
    "REQUEST_TIMEOUT",
    "SERVER_DEFAULT",
    "SKIP_CERT_VERIFICATION_DEFAULT",
    "STATUS_COLORS",
    "TAB_LIST_KEYS",
    "UNREADABLE",
    "InstanceStatus",
    "ListKey",
    "MetricsGranularity",
    "StatusFilter",
    "Tab",
    "ViewMode",
]
