"""Core domain models for the Runtara management API."""

from runtara_tui.models.core.checkpoint_info import CheckpointInfo
from runtara_tui.models.core.health_info import HealthSnapshot
from runtara_tui.models.core.image_info import ImageInfo
from runtara_tui.models.core.instance_info import InstanceInfo
from runtara_tui.models.core.metrics_info import MetricBucket, TenantMetrics

__all__ = [
    "CheckpointInfo",
    "HealthSnapshot",
    "ImageInfo",
    "InstanceInfo",
    "MetricBucket",
    "TenantMetrics",
]
