"""App-level keyboard bindings.

Every binding forwards its key to the dispatcher through
``action_dispatch_key`` so that navigation stays in one pure function.
Bindings are priority bindings: the dashboard has no focusable widgets that
should see keys first.
"""

from textual.binding import Binding

from runtara_tui.keyboard.keys import (
    KEY_BACK,
    KEY_CHECKPOINTS,
    KEY_FILTER,
    KEY_GRANULARITY,
    KEY_NEXT_TAB,
    KEY_OPEN,
    KEY_PREVIOUS_TAB,
    KEY_QUIT,
    KEY_REFRESH,
)


def _forward(key: str, description: str, *, keys: str | None = None) -> Binding:
    return Binding(
        keys or key,
        f"dispatch_key('{key}')",
        description,
        show=False,
        priority=True,
    )


# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    _forward(KEY_QUIT, "Quit"),
    _forward(KEY_BACK, "Back"),
    _forward(KEY_REFRESH, "Refresh"),
    _forward(KEY_OPEN, "Open"),
    _forward(KEY_CHECKPOINTS, "Checkpoints"),
    _forward(KEY_FILTER, "Filter"),
    _forward(KEY_GRANULARITY, "Granularity"),
    _forward(KEY_NEXT_TAB, "Next tab"),
    _forward(KEY_PREVIOUS_TAB, "Previous tab"),
    _forward("down", "Down", keys="down,j"),
    _forward("up", "Up", keys="up,k"),
    _forward("1", "Instances"),
    _forward("2", "Images"),
    _forward("3", "Metrics"),
    _forward("4", "Health"),
]

__all__ = [
    "APP_BINDINGS",
]
