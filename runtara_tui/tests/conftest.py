"""Shared fixtures for the Runtara TUI tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any
from unittest.mock import AsyncMock

import pytest

from runtara_tui.constants.enums import InstanceStatus, MetricsGranularity, StatusFilter
from runtara_tui.controllers.base.base_controller import MonitoringClient
from runtara_tui.models.cache.snapshot import FetchRequest, Snapshot
from runtara_tui.models.core import (
    CheckpointInfo,
    HealthSnapshot,
    ImageInfo,
    InstanceInfo,
    MetricBucket,
    TenantMetrics,
)
from runtara_tui.models.state.app_settings import AppSettings

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _instance(
    instance_id: str,
    status: InstanceStatus = InstanceStatus.RUNNING,
    **overrides: Any,
) -> InstanceInfo:
    data: dict[str, Any] = {
        "instance_id": instance_id,
        "tenant_id": "acme",
        "status": status,
        "image_id": "img-1",
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    data.update(overrides)
    return InstanceInfo.model_validate(data)


def _image(image_id: str, name: str = "orders") -> ImageInfo:
    return ImageInfo(
        image_id=image_id,
        name=name,
        tag="v1",
        tenant_id="acme",
        runner_type="Oci",
        created_at=BASE_TIME,
        size_bytes=2048,
    )


def _metrics(
    granularity: MetricsGranularity = MetricsGranularity.HOURLY,
    buckets: int = 3,
) -> TenantMetrics:
    step = timedelta(hours=1) if granularity is MetricsGranularity.HOURLY else timedelta(days=1)
    return TenantMetrics(
        tenant_id="acme",
        granularity=granularity,
        start_time=BASE_TIME,
        end_time=BASE_TIME + step * buckets,
        buckets=tuple(
            MetricBucket(
                tenant_id="acme",
                granularity=granularity,
                bucket_time=BASE_TIME + step * index,
                invocation_count=10,
                success_count=9,
                failure_count=1,
                avg_duration_seconds=1.5,
                max_duration_seconds=4.0,
            )
            for index in range(buckets)
        ),
    )


def _checkpoint(checkpoint_id: str, sequence: int, instance_id: str = "inst-1") -> CheckpointInfo:
    return CheckpointInfo(
        checkpoint_id=checkpoint_id,
        instance_id=instance_id,
        sequence=sequence,
        created_at=BASE_TIME,
        size_bytes=128,
    )


def _snapshot(
    instances: tuple[InstanceInfo, ...] = (),
    images: tuple[ImageInfo, ...] = (),
    metrics: TenantMetrics | None = None,
    health: HealthSnapshot | None = None,
    request: FetchRequest | None = None,
) -> Snapshot:
    return Snapshot(
        instances=tuple(instances),
        images=tuple(images),
        metrics=metrics,
        health=health or HealthSnapshot(healthy=True, version="1.2.0", uptime_ms=90_000),
        request=request
        or FetchRequest(
            tenant_id="acme",
            status_filter=StatusFilter.ALL,
            granularity=MetricsGranularity.HOURLY,
        ),
        fetched_at=BASE_TIME,
    )


@pytest.fixture
def make_instance() -> Callable[..., InstanceInfo]:
    return _instance


@pytest.fixture
def make_image() -> Callable[..., ImageInfo]:
    return _image


@pytest.fixture
def make_metrics() -> Callable[..., TenantMetrics]:
    return _metrics


@pytest.fixture
def make_checkpoint() -> Callable[..., CheckpointInfo]:
    return _checkpoint


@pytest.fixture
def make_snapshot() -> Callable[..., Snapshot]:
    return _snapshot


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(server="runtara.test:8002", tenant_id="acme", refresh_interval=5)


@pytest.fixture
def fake_client() -> AsyncMock:
    """Monitoring client double answering with a small healthy environment."""
    client = AsyncMock(spec=MonitoringClient)
    client.list_instances.return_value = [
        _instance("inst-1", InstanceStatus.RUNNING),
        _instance("inst-2", InstanceStatus.COMPLETED, output={"ok": True}),
    ]
    client.list_images.return_value = [_image("img-1")]
    client.get_metrics.return_value = _metrics()
    client.get_health.return_value = HealthSnapshot(
        healthy=True, version="1.2.0", uptime_ms=90_000, active_instances=1
    )
    client.check_connection.return_value = client.get_health.return_value
    client.list_checkpoints.return_value = [
        _checkpoint("cp-1", 1),
        _checkpoint("cp-2", 2),
    ]
    client.get_checkpoint_data.return_value = b'{"step": 2}'
    return client
