"""Unit tests for core domain models and enums."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from runtara_tui.constants.enums import InstanceStatus, MetricsGranularity, StatusFilter
from runtara_tui.models.core import ImageInfo, InstanceInfo, MetricBucket

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


class TestInstanceStatus:
    """Tests for InstanceStatus.parse."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Running", InstanceStatus.RUNNING),
            ("completed", InstanceStatus.COMPLETED),
            (" FAILED ", InstanceStatus.FAILED),
            ("Cancelled", InstanceStatus.CANCELLED),
            ("Exploded", InstanceStatus.UNKNOWN),
            (None, InstanceStatus.UNKNOWN),
            (InstanceStatus.PENDING, InstanceStatus.PENDING),
        ],
    )
    def test_parse(self, raw: object, expected: InstanceStatus) -> None:
        assert InstanceStatus.parse(raw) is expected


class TestStatusFilter:
    """Tests for StatusFilter cycling and matching."""

    def test_cycle_order(self) -> None:
        order = [StatusFilter.ALL]
        for _ in range(len(StatusFilter) - 1):
            order.append(order[-1].next())
        assert order == list(StatusFilter)
        assert order[-1].next() is StatusFilter.ALL

    def test_all_matches_unknown(self) -> None:
        assert StatusFilter.ALL.matches(InstanceStatus.UNKNOWN)

    def test_specific_filter(self) -> None:
        assert StatusFilter.FAILED.matches(InstanceStatus.FAILED)
        assert not StatusFilter.FAILED.matches(InstanceStatus.RUNNING)


class TestInstanceInfo:
    """Tests for InstanceInfo validation."""

    def test_error_kept_for_failed(self) -> None:
        info = InstanceInfo.model_validate(
            {"instance_id": "a", "tenant_id": "t", "status": "Failed", "created_at": NOW, "error": "boom"}
        )
        assert info.error == "boom"

    def test_error_dropped_unless_failed(self) -> None:
        info = InstanceInfo.model_validate(
            {"instance_id": "a", "tenant_id": "t", "status": "Running", "created_at": NOW, "error": "stale"}
        )
        assert info.error is None

    def test_missing_created_at_rejected(self) -> None:
        with pytest.raises(ValidationError):
            InstanceInfo.model_validate({"instance_id": "a", "tenant_id": "t"})

    def test_frozen(self) -> None:
        info = InstanceInfo(instance_id="a", tenant_id="t", created_at=NOW)
        with pytest.raises(ValidationError):
            info.status = InstanceStatus.FAILED  # type: ignore[misc]


class TestMetricBucket:
    """Tests for MetricBucket derived values."""

    def test_success_rate(self) -> None:
        bucket = MetricBucket(
            tenant_id="t",
            granularity=MetricsGranularity.HOURLY,
            bucket_time=NOW,
            invocation_count=4,
            success_count=3,
            failure_count=1,
        )
        assert bucket.success_rate_percent == pytest.approx(75.0)

    def test_success_rate_without_completions(self) -> None:
        bucket = MetricBucket(tenant_id="t", granularity=MetricsGranularity.DAILY, bucket_time=NOW)
        assert bucket.success_rate_percent is None

    def test_granularity_toggle(self) -> None:
        assert MetricsGranularity.HOURLY.toggled() is MetricsGranularity.DAILY
        assert MetricsGranularity.DAILY.label == "Daily"


class TestImageInfo:
    def test_reference(self) -> None:
        image = ImageInfo(image_id="i", name="orders", tag="v2", tenant_id="t", created_at=NOW)
        assert image.reference == "orders:v2"
