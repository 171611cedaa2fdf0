"""Application and navigation state models."""

from runtara_tui.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigManager,
)
from runtara_tui.models.state.view_state import (
    ListContext,
    NavFrame,
    Selections,
    ViewState,
)

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ListContext",
    "NavFrame",
    "Selections",
    "ViewState",
]
