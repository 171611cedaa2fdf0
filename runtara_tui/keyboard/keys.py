"""Key names understood by the dispatcher.

Names follow Textual's key naming so events can be forwarded unchanged.
"""

from typing import Final

from runtara_tui.constants.enums import Tab

KEY_QUIT: Final = "q"
KEY_BACK: Final = "escape"
KEY_REFRESH: Final = "r"
KEY_OPEN: Final = "enter"
KEY_CHECKPOINTS: Final = "c"
KEY_FILTER: Final = "f"
KEY_GRANULARITY: Final = "g"
KEY_NEXT_TAB: Final = "tab"
KEY_PREVIOUS_TAB: Final = "shift+tab"

KEYS_DOWN: Final = frozenset({"down", "j"})
KEYS_UP: Final = frozenset({"up", "k"})

TAB_KEYS: Final[dict[str, Tab]] = {
    "1": Tab.INSTANCES,
    "2": Tab.IMAGES,
    "3": Tab.METRICS,
    "4": Tab.HEALTH,
}

__all__ = [
    "KEYS_DOWN",
    "KEYS_UP",
    "KEY_BACK",
    "KEY_CHECKPOINTS",
    "KEY_FILTER",
    "KEY_GRANULARITY",
    "KEY_NEXT_TAB",
    "KEY_OPEN",
    "KEY_PREVIOUS_TAB",
    "KEY_QUIT",
    "KEY_REFRESH",
    "TAB_KEYS",
]
