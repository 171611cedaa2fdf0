"""Payload parser for the management API - turns JSON bodies into models."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from runtara_tui.constants.enums import MetricsGranularity
from runtara_tui.controllers.monitoring.errors import MonitoringServerError
from runtara_tui.models.core import (
    CheckpointInfo,
    HealthSnapshot,
    ImageInfo,
    InstanceInfo,
    MetricBucket,
    TenantMetrics,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class PayloadParser:
    """Parses management API payloads into structured models.

    Collection endpoints answer either with a bare JSON array or with an
    envelope such as ``{"instances": [...], "total_count": 3}``; both shapes
    are accepted. Any payload that does not validate is reported as a server
    error so it fails the fetch like any other bad response.
    """

    def _items(self, payload: Any, envelope_key: str) -> list[Any]:
        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict):
            items = payload.get(envelope_key, payload.get("items"))
            if isinstance(items, list):
                return items
        raise MonitoringServerError(200, f"expected a list of {envelope_key}")

    def _validate(self, model: type[ModelT], data: Any, what: str) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Malformed {what} payload: {e.error_count()} validation error(s)")
            raise MonitoringServerError(200, f"malformed {what} payload") from e

    def parse_instances(self, payload: Any) -> list[InstanceInfo]:
        return [
            self._validate(InstanceInfo, item, "instance")
            for item in self._items(payload, "instances")
        ]

    def parse_images(self, payload: Any) -> list[ImageInfo]:
        return [
            self._validate(ImageInfo, item, "image")
            for item in self._items(payload, "images")
        ]

    def parse_checkpoints(self, payload: Any) -> list[CheckpointInfo]:
        checkpoints = [
            self._validate(CheckpointInfo, item, "checkpoint")
            for item in self._items(payload, "checkpoints")
        ]
        return sorted(checkpoints, key=lambda checkpoint: checkpoint.sequence)

    def parse_health(self, payload: Any) -> HealthSnapshot:
        return self._validate(HealthSnapshot, payload, "health")

    def parse_metrics(
        self,
        payload: Any,
        tenant_id: str,
        granularity: MetricsGranularity,
    ) -> TenantMetrics:
        """Parse a metrics result, filling tenant and granularity into buckets."""
        if not isinstance(payload, dict):
            raise MonitoringServerError(200, "expected a metrics object")
        buckets = [
            self._validate(
                MetricBucket,
                {"tenant_id": tenant_id, "granularity": granularity, **item},
                "metric bucket",
            )
            for item in self._items(payload, "buckets")
        ]
        return self._validate(
            TenantMetrics,
            {
                "tenant_id": tenant_id,
                "granularity": granularity,
                "start_time": payload.get("start_time"),
                "end_time": payload.get("end_time"),
                "buckets": tuple(buckets),
            },
            "metrics",
        )


__all__ = ["PayloadParser"]
