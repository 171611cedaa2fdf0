"""Unit tests for HttpMonitoringClient over a mocked httpx transport."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from runtara_tui.constants.enums import InstanceStatus, MetricsGranularity, StatusFilter
from runtara_tui.controllers.monitoring.errors import (
    MonitoringConnectionError,
    MonitoringServerError,
    MonitoringTimeoutError,
)
from runtara_tui.controllers.monitoring.http_client import HttpMonitoringClient
from runtara_tui.models.state.app_settings import AppSettings

Handler = Callable[[httpx.Request], httpx.Response]


def _client(handler: Handler, **settings) -> HttpMonitoringClient:
    return HttpMonitoringClient(
        AppSettings(server="runtara.test:8002", **settings),
        transport=httpx.MockTransport(handler),
    )


class TestRequests:
    """Tests for URLs, query parameters and decoding."""

    @pytest.mark.asyncio
    async def test_list_instances_query(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "instances": [
                        {
                            "instance_id": "inst-1",
                            "tenant_id": "acme",
                            "status": "Failed",
                            "created_at": "2026-01-01T00:00:00Z",
                            "error": "boom",
                        }
                    ]
                },
            )

        async with _client(handler) as client:
            instances = await client.list_instances(StatusFilter.FAILED, "acme")

        request = seen[0]
        assert request.url.host == "runtara.test"
        assert request.url.scheme == "https"
        assert request.url.path == "/api/v1/instances"
        assert request.url.params["status"] == "Failed"
        assert request.url.params["tenant_id"] == "acme"
        assert request.url.params["limit"] == "100"
        assert instances[0].status is InstanceStatus.FAILED
        assert instances[0].error == "boom"

    @pytest.mark.asyncio
    async def test_unset_parameters_are_omitted(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        async with _client(handler) as client:
            await client.list_instances()

        assert "status" not in seen[0].url.params
        assert "tenant_id" not in seen[0].url.params

    @pytest.mark.asyncio
    async def test_metrics_path(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"buckets": []})

        async with _client(handler) as client:
            metrics = await client.get_metrics("acme", MetricsGranularity.DAILY)

        assert seen[0].url.path == "/api/v1/tenants/acme/metrics"
        assert seen[0].url.params["granularity"] == "daily"
        assert metrics.buckets == ()

    @pytest.mark.asyncio
    async def test_checkpoint_data_returns_bytes(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/v1/instances/inst-1/checkpoints/cp-1/data"
            return httpx.Response(200, content=b"\x00\x01")

        async with _client(handler) as client:
            assert await client.get_checkpoint_data("inst-1", "cp-1") == b"\x00\x01"

    @pytest.mark.asyncio
    async def test_ids_are_escaped_in_paths(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.url.raw_path.startswith(b"/api/v1/tenants/"):
                return httpx.Response(200, json={"buckets": []})
            if request.url.raw_path.endswith(b"/data"):
                return httpx.Response(200, content=b"{}")
            return httpx.Response(200, json=[])

        async with _client(handler) as client:
            await client.get_metrics("acme#eu", MetricsGranularity.HOURLY)
            await client.list_checkpoints("wf/1?x=1")
            await client.get_checkpoint_data("wf/1", "cp#2")

        assert seen[0].url.raw_path == b"/api/v1/tenants/acme%23eu/metrics?granularity=hourly"
        assert seen[1].url.raw_path == b"/api/v1/instances/wf%2F1%3Fx%3D1/checkpoints?limit=100"
        assert seen[2].url.raw_path == b"/api/v1/instances/wf%2F1/checkpoints/cp%232/data"

    @pytest.mark.asyncio
    async def test_check_connection(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"healthy": True, "version": "2.0.0"})

        async with _client(handler) as client:
            health = await client.check_connection()
        assert health.version == "2.0.0"


class TestErrorMapping:
    """Tests for mapping httpx failures onto the error taxonomy."""

    @pytest.mark.asyncio
    async def test_server_error_message(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, json={"message": "draining"})

        async with _client(handler) as client:
            with pytest.raises(MonitoringServerError) as excinfo:
                await client.get_health()
        assert excinfo.value.code == 503
        assert excinfo.value.message == "draining"

    @pytest.mark.asyncio
    async def test_non_json_error_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="bad gateway")

        async with _client(handler) as client:
            with pytest.raises(MonitoringServerError, match="bad gateway"):
                await client.list_images()

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        async with _client(handler) as client:
            with pytest.raises(MonitoringTimeoutError):
                await client.get_health()

    @pytest.mark.asyncio
    async def test_connection_refused(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(MonitoringConnectionError, match="runtara.test:8002"):
                await client.list_checkpoints("inst-1")

    @pytest.mark.asyncio
    async def test_invalid_json(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        async with _client(handler) as client:
            with pytest.raises(MonitoringServerError, match="not JSON"):
                await client.get_health()
