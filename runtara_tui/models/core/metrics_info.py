"""Tenant metrics models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, computed_field

from runtara_tui.constants.enums import MetricsGranularity


class MetricBucket(BaseModel):
    """Aggregated invocation statistics for one time bucket."""

    model_config = ConfigDict(frozen=True)

    tenant_id: str
    granularity: MetricsGranularity
    bucket_time: datetime
    invocation_count: int = 0
    success_count: int = 0
    failure_count: int = 0
    avg_duration_seconds: float | None = None
    max_duration_seconds: float | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def success_rate_percent(self) -> float | None:
        completed = self.success_count + self.failure_count
        if completed <= 0:
            return None
        return self.success_count * 100.0 / completed

    @property
    def key(self) -> str:
        """Stable identity of the bucket inside one metrics result."""
        return self.bucket_time.isoformat()


class TenantMetrics(BaseModel):
    """Metrics result for one tenant and granularity."""

    model_config = ConfigDict(frozen=True)

    tenant_id: str
    granularity: MetricsGranularity
    start_time: datetime | None = None
    end_time: datetime | None = None
    buckets: tuple[MetricBucket, ...] = ()


__all__ = ["MetricBucket", "TenantMetrics"]
