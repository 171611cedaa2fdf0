"""Controllers for the Runtara TUI.

- base: MonitoringClient contract
- monitoring: httpx client, payload parsing, snapshot fetching
- refresh_scheduler: periodic/manual refresh decisions
- dashboard_controller: main-loop owner of navigation and fetched data
"""

from runtara_tui.controllers.base.base_controller import MonitoringClient
from runtara_tui.controllers.dashboard_controller import (
    DashboardController,
    FrameSnapshot,
)
from runtara_tui.controllers.monitoring import HttpMonitoringClient, fetch_snapshot
from runtara_tui.controllers.refresh_scheduler import RefreshScheduler

__all__ = [
    "DashboardController",
    "FrameSnapshot",
    "HttpMonitoringClient",
    "MonitoringClient",
    "RefreshScheduler",
    "fetch_snapshot",
]
