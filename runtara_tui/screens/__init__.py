"""Runtara TUI Screens.

Domain Structure:
    - dashboard/ - Tabbed monitor view with instance, checkpoint and health panes
"""

from __future__ import annotations

from runtara_tui.screens.dashboard import DashboardPresenter, DashboardScreen

__all__ = [
    "DashboardPresenter",
    "DashboardScreen",
]
