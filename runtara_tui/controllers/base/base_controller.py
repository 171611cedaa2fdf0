"""Base monitoring client contract for the Runtara TUI.

Implementations perform the network I/O and return typed collections or
raise one of the ``MonitoringError`` subclasses. They are driven from
Textual workers so the UI loop never blocks on a request.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from types import TracebackType

from runtara_tui.constants.enums import MetricsGranularity, StatusFilter
from runtara_tui.models.core import (
    CheckpointInfo,
    HealthSnapshot,
    ImageInfo,
    InstanceInfo,
    TenantMetrics,
)

logger = logging.getLogger(__name__)


class MonitoringClient(ABC):
    """Read-only client for the Runtara management API."""

    @abstractmethod
    async def list_instances(
        self,
        status_filter: StatusFilter = StatusFilter.ALL,
        tenant_id: str | None = None,
    ) -> list[InstanceInfo]:
        """List instances, optionally scoped by status and tenant."""
        ...

    @abstractmethod
    async def list_images(self, tenant_id: str | None = None) -> list[ImageInfo]:
        """List registered images."""
        ...

    @abstractmethod
    async def get_metrics(
        self, tenant_id: str, granularity: MetricsGranularity
    ) -> TenantMetrics:
        """Get bucketed invocation metrics for one tenant."""
        ...

    @abstractmethod
    async def get_health(self) -> HealthSnapshot:
        """Get management service health."""
        ...

    @abstractmethod
    async def list_checkpoints(self, instance_id: str) -> list[CheckpointInfo]:
        """List checkpoints of one instance, oldest first."""
        ...

    @abstractmethod
    async def get_checkpoint_data(self, instance_id: str, checkpoint_id: str) -> bytes:
        """Get the serialized state blob of one checkpoint."""
        ...

    async def check_connection(self) -> HealthSnapshot:
        """Probe the server, raising MonitoringError when unreachable."""
        health = await self.get_health()
        logger.debug(f"Connected to management API version {health.version}")
        return health

    async def aclose(self) -> None:
        """Release network resources."""

    async def __aenter__(self) -> MonitoringClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__ = ["MonitoringClient"]
