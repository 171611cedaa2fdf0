"""Keyboard module.

This module provides key handling for the Runtara TUI:

- keys: key names understood by the dispatcher
- commands: side-effecting commands returned as data
- dispatcher: the pure (ViewState, key) -> (ViewState, command) function
- app: Textual bindings forwarding keys to the dispatcher (APP_BINDINGS)
"""

from runtara_tui.keyboard.app import APP_BINDINGS
from runtara_tui.keyboard.commands import (
    Command,
    FetchCheckpointData,
    FetchCheckpoints,
    Quit,
    TriggerRefresh,
)
from runtara_tui.keyboard.dispatcher import DispatchResult, dispatch

__all__ = [
    "APP_BINDINGS",
    "Command",
    "DispatchResult",
    "FetchCheckpointData",
    "FetchCheckpoints",
    "Quit",
    "TriggerRefresh",
    "dispatch",
]
