"""Dashboard screen module exports."""

from runtara_tui.screens.dashboard.dashboard_screen import DashboardScreen
from runtara_tui.screens.dashboard.presenter import (
    DashboardPresenter,
    status_style,
    success_rate_style,
)

__all__ = [
    "DashboardPresenter",
    "DashboardScreen",
    "status_style",
    "success_rate_style",
]
