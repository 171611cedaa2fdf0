"""Runtara management API client and snapshot fetching."""

from runtara_tui.controllers.monitoring.errors import (
    MonitoringConnectionError,
    MonitoringError,
    MonitoringServerError,
    MonitoringTimeoutError,
)
from runtara_tui.controllers.monitoring.http_client import HttpMonitoringClient
from runtara_tui.controllers.monitoring.parsers import PayloadParser
from runtara_tui.controllers.monitoring.snapshot_fetcher import fetch_snapshot
from runtara_tui.models.cache.snapshot import FetchRequest, Snapshot

__all__ = [
    "FetchRequest",
    "HttpMonitoringClient",
    "MonitoringConnectionError",
    "MonitoringError",
    "MonitoringServerError",
    "MonitoringTimeoutError",
    "PayloadParser",
    "Snapshot",
    "fetch_snapshot",
]
