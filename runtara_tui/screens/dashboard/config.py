"""Dashboard screen configuration - widget IDs, column definitions, key hints."""

from __future__ import annotations

from runtara_tui.constants.enums import Tab, ViewMode

# =============================================================================
# Widget IDs
# =============================================================================

HEADER_ID = "dashboard-header"
TABS_ID = "dashboard-tabs"
BANNER_ID = "dashboard-banner"
CONTENT_ID = "dashboard-content"
FOOTER_ID = "dashboard-footer"

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

INSTANCE_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Instance ID", 38),
    ("Tenant", 16),
    ("Status", 11),
    ("Image", 24),
    ("Created", 19),
    ("Updated", 19),
]

IMAGE_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Name", 30),
    ("Tag", 14),
    ("Tenant", 16),
    ("Runner", 10),
    ("Size", 10),
    ("Created", 19),
]

METRICS_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Time", 12),
    ("Invocations", 12),
    ("Success", 10),
    ("Failed", 10),
    ("Success %", 10),
    ("Avg Duration", 12),
    ("Max Duration", 12),
]

CHECKPOINT_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Seq", 6),
    ("Checkpoint ID", 38),
    ("Size", 10),
    ("Created", 19),
]

# =============================================================================
# Success-rate thresholds (percent)
# =============================================================================

SUCCESS_RATE_GOOD = 95.0
SUCCESS_RATE_WARN = 80.0

# =============================================================================
# Footer key hints
# =============================================================================

LIST_KEY_HINTS: dict[Tab, str] = {
    Tab.INSTANCES: "q:Quit | Tab:Switch Tab | 1-4:Tab | j/k:Navigate | Enter:Details | f:Filter | r:Refresh",
    Tab.IMAGES: "q:Quit | Tab:Switch Tab | 1-4:Tab | j/k:Navigate | r:Refresh",
    Tab.METRICS: "q:Quit | Tab:Switch Tab | 1-4:Tab | j/k:Navigate | g:Granularity | r:Refresh",
    Tab.HEALTH: "q:Quit | Tab:Switch Tab | 1-4:Tab | r:Refresh",
}

DETAIL_KEY_HINTS: dict[ViewMode, str] = {
    ViewMode.INSTANCE_DETAIL: "Esc:Back | c:Checkpoints | j/k:Scroll | r:Refresh",
    ViewMode.CHECKPOINTS_LIST: "Esc:Back | Enter:View Data | j/k:Navigate | r:Refresh",
    ViewMode.CHECKPOINT_DETAIL: "Esc:Back | j/k:Scroll | r:Refresh",
}

__all__ = [
    "BANNER_ID",
    "CHECKPOINT_TABLE_COLUMNS",
    "CONTENT_ID",
    "DETAIL_KEY_HINTS",
    "FOOTER_ID",
    "HEADER_ID",
    "IMAGE_TABLE_COLUMNS",
    "INSTANCE_TABLE_COLUMNS",
    "LIST_KEY_HINTS",
    "METRICS_TABLE_COLUMNS",
    "SUCCESS_RATE_GOOD",
    "SUCCESS_RATE_WARN",
    "TABS_ID",
]
