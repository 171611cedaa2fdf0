"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from __future__ import annotations

from enum import Enum

# =============================================================================
# Platform Enums
# =============================================================================


class InstanceStatus(Enum):
    """Instance status values reported by the Runtara management API."""

    RUNNING = "Running"
    COMPLETED = "Completed"
    FAILED = "Failed"
    PENDING = "Pending"
    SUSPENDED = "Suspended"
    CANCELLED = "Cancelled"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: object) -> InstanceStatus:
        """Parse a server status string, case-insensitively.

        Unrecognised values map to UNKNOWN rather than failing the whole
        payload.
        """
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        return cls.UNKNOWN


class MetricsGranularity(Enum):
    """Time-bucket width used to aggregate tenant metrics."""

    HOURLY = "hourly"
    DAILY = "daily"

    def toggled(self) -> MetricsGranularity:
        if self is MetricsGranularity.HOURLY:
            return MetricsGranularity.DAILY
        return MetricsGranularity.HOURLY

    @property
    def label(self) -> str:
        return self.value.capitalize()


# =============================================================================
# Navigation Enums
# =============================================================================


class Tab(Enum):
    """Top-level tabs, in display order."""

    INSTANCES = "Instances"
    IMAGES = "Images"
    METRICS = "Metrics"
    HEALTH = "Health"


class ViewMode(Enum):
    """Current view mode (main list or one of the detail views)."""

    LIST = "list"
    INSTANCE_DETAIL = "instance_detail"
    CHECKPOINTS_LIST = "checkpoints_list"
    CHECKPOINT_DETAIL = "checkpoint_detail"


class StatusFilter(Enum):
    """Status filter for the instances list, in cycle order."""

    ALL = "All"
    RUNNING = "Running"
    COMPLETED = "Completed"
    FAILED = "Failed"
    PENDING = "Pending"
    SUSPENDED = "Suspended"

    def next(self) -> StatusFilter:
        members = list(StatusFilter)
        return members[(members.index(self) + 1) % len(members)]

    def to_instance_status(self) -> InstanceStatus | None:
        if self is StatusFilter.ALL:
            return None
        return InstanceStatus(self.value)

    def matches(self, status: InstanceStatus) -> bool:
        expected = self.to_instance_status()
        return expected is None or status is expected


class ListKey(Enum):
    """Identifiers of the selectable lists tracked by ViewState."""

    INSTANCES = "instances"
    IMAGES = "images"
    METRICS = "metrics"
    CHECKPOINTS = "checkpoints"


TAB_LIST_KEYS: dict[Tab, ListKey | None] = {
    Tab.INSTANCES: ListKey.INSTANCES,
    Tab.IMAGES: ListKey.IMAGES,
    Tab.METRICS: ListKey.METRICS,
    Tab.HEALTH: None,
}


__all__ = [
    "TAB_LIST_KEYS",
    "InstanceStatus",
    "ListKey",
    "MetricsGranularity",
    "StatusFilter",
    "Tab",
    "ViewMode",
]
