"""Base controller contracts."""

from runtara_tui.controllers.base.base_controller import MonitoringClient

__all__ = ["MonitoringClient"]
