"""Periodic snapshot models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from runtara_tui.constants.enums import MetricsGranularity, StatusFilter
from runtara_tui.models.core import (
    HealthSnapshot,
    ImageInfo,
    InstanceInfo,
    TenantMetrics,
)


def filter_instances(
    instances: tuple[InstanceInfo, ...], status_filter: StatusFilter
) -> tuple[InstanceInfo, ...]:
    """Return the instances matching a status filter, in original order."""
    return tuple(
        instance for instance in instances if status_filter.matches(instance.status)
    )


@dataclass(frozen=True)
class FetchRequest:
    """Parameters of one periodic fetch, captured on the main loop."""

    tenant_id: str | None
    status_filter: StatusFilter
    granularity: MetricsGranularity


@dataclass(frozen=True)
class Snapshot:
    """Atomically fetched copy of all periodic collections."""

    instances: tuple[InstanceInfo, ...]
    images: tuple[ImageInfo, ...]
    metrics: TenantMetrics | None
    health: HealthSnapshot
    request: FetchRequest
    fetched_at: datetime
    duration_ms: float = 0.0

    def visible_instances(self, status_filter: StatusFilter) -> tuple[InstanceInfo, ...]:
        return filter_instances(self.instances, status_filter)

    def find_instance(self, instance_id: str) -> InstanceInfo | None:
        for instance in self.instances:
            if instance.instance_id == instance_id:
                return instance
        return None


__all__ = ["FetchRequest", "Snapshot", "filter_instances"]
