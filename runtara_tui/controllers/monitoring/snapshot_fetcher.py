"""Snapshot fetcher - fetches the four periodic collections as one unit."""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone

from runtara_tui.controllers.base.base_controller import MonitoringClient
from runtara_tui.controllers.monitoring.errors import MonitoringError
from runtara_tui.models.cache.snapshot import FetchRequest, Snapshot

logger = logging.getLogger(__name__)


async def _no_metrics() -> None:
    return None


async def fetch_snapshot(client: MonitoringClient, request: FetchRequest) -> Snapshot:
    """Fetch instances, images, metrics and health concurrently.

    All four calls run to completion; if any of them failed, the first
    failure (in collection order) is raised and no snapshot is produced.
    Metrics are only requested when a tenant is set.
    """
    start = time.monotonic()
    metrics_call = (
        client.get_metrics(request.tenant_id, request.granularity)
        if request.tenant_id
        else _no_metrics()
    )
    results = await asyncio.gather(
        client.list_instances(request.status_filter, request.tenant_id),
        client.list_images(request.tenant_id),
        metrics_call,
        client.get_health(),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            if not isinstance(result, MonitoringError):
                logger.error(f"Unexpected error during snapshot fetch: {result!r}")
            raise result

    instances, images, metrics, health = results
    duration_ms = (time.monotonic() - start) * 1000
    logger.debug(
        f"Fetched snapshot: {len(instances)} instances, {len(images)} images "
        f"({duration_ms:.2f}ms)"
    )
    return Snapshot(
        instances=tuple(instances),
        images=tuple(images),
        metrics=metrics,
        health=health,
        request=request,
        fetched_at=datetime.now(timezone.utc),
        duration_ms=duration_ms,
    )


__all__ = ["fetch_snapshot"]
