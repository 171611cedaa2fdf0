"""HTTP implementation of the monitoring client, built on httpx."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from runtara_tui.constants.enums import MetricsGranularity, StatusFilter
from runtara_tui.controllers.base.base_controller import MonitoringClient
from runtara_tui.controllers.monitoring.errors import (
    MonitoringConnectionError,
    MonitoringServerError,
    MonitoringTimeoutError,
)
from runtara_tui.controllers.monitoring.parsers import PayloadParser
from runtara_tui.models.core import (
    CheckpointInfo,
    HealthSnapshot,
    ImageInfo,
    InstanceInfo,
    TenantMetrics,
)
from runtara_tui.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def _segment(value: str) -> str:
    """Escape one path segment so ids cannot change the resource path."""
    return quote(value, safe="")


class HttpMonitoringClient(MonitoringClient):
    """Talks to the Runtara management API over HTTPS.

    Transport failures surface as ``MonitoringConnectionError``, timeouts as
    ``MonitoringTimeoutError`` and non-2xx answers as
    ``MonitoringServerError``.
    """

    def __init__(
        self,
        settings: AppSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._parser = PayloadParser()
        self._client = httpx.AsyncClient(
            base_url=settings.base_url,
            verify=not settings.skip_cert_verification,
            timeout=httpx.Timeout(
                settings.request_timeout, connect=settings.connect_timeout
            ),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    # =========================================================================
    # Transport
    # =========================================================================

    async def _request(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        query = {key: value for key, value in (params or {}).items() if value is not None}
        try:
            response = await self._client.get(f"{API_PREFIX}{path}", params=query)
        except httpx.TimeoutException as e:
            raise MonitoringTimeoutError(f"request to {path} timed out") from e
        except httpx.TransportError as e:
            raise MonitoringConnectionError(f"cannot reach {self._settings.server}: {e}") from e
        if response.is_error:
            raise MonitoringServerError(response.status_code, self._error_message(response))
        return response

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        response = await self._request(path, params)
        try:
            return response.json()
        except ValueError as e:
            raise MonitoringServerError(response.status_code, "response is not JSON") from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text.strip() or response.reason_phrase
        if isinstance(body, dict):
            for key in ("message", "error", "detail"):
                if body.get(key):
                    return str(body[key])
        return response.reason_phrase

    # =========================================================================
    # Periodic collections
    # =========================================================================

    async def list_instances(
        self,
        status_filter: StatusFilter = StatusFilter.ALL,
        tenant_id: str | None = None,
    ) -> list[InstanceInfo]:
        status = status_filter.to_instance_status()
        payload = await self._get_json(
            "/instances",
            {
                "tenant_id": tenant_id,
                "status": status.value if status else None,
                "limit": self._settings.list_limit,
            },
        )
        return self._parser.parse_instances(payload)

    async def list_images(self, tenant_id: str | None = None) -> list[ImageInfo]:
        payload = await self._get_json(
            "/images",
            {"tenant_id": tenant_id, "limit": self._settings.list_limit},
        )
        return self._parser.parse_images(payload)

    async def get_metrics(
        self, tenant_id: str, granularity: MetricsGranularity
    ) -> TenantMetrics:
        payload = await self._get_json(
            f"/tenants/{_segment(tenant_id)}/metrics",
            {"granularity": granularity.value},
        )
        return self._parser.parse_metrics(payload, tenant_id, granularity)

    async def get_health(self) -> HealthSnapshot:
        return self._parser.parse_health(await self._get_json("/health"))

    # =========================================================================
    # On-demand collections
    # =========================================================================

    async def list_checkpoints(self, instance_id: str) -> list[CheckpointInfo]:
        payload = await self._get_json(
            f"/instances/{_segment(instance_id)}/checkpoints",
            {"limit": self._settings.list_limit},
        )
        return self._parser.parse_checkpoints(payload)

    async def get_checkpoint_data(self, instance_id: str, checkpoint_id: str) -> bytes:
        path = (
            f"/instances/{_segment(instance_id)}"
            f"/checkpoints/{_segment(checkpoint_id)}/data"
        )
        response = await self._request(path)
        return response.content


__all__ = ["API_PREFIX", "HttpMonitoringClient"]
