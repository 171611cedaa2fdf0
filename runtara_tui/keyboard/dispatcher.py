"""Key dispatcher - the dashboard's navigation state machine.

``dispatch`` maps (ViewState, key) to a new ViewState plus an optional
command. It performs no I/O: commands such as "fetch checkpoints" are
returned as data for the controller to execute.

Transitions by view mode (every other key is a no-op):

    List               tab / shift+tab / 1-4   switch tab
                       enter (Instances)       push InstanceDetail
                       f (Instances)           cycle status filter
                       g (Metrics)             toggle granularity, refresh
                       escape / q              quit
    InstanceDetail     c                       push CheckpointsList, fetch
    CheckpointsList    enter                   push CheckpointDetail, fetch
    any detail         escape                  pop one level
    any                r                       refresh
                       j / k / up / down       move selection or scroll
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from runtara_tui.constants.enums import ListKey, Tab, ViewMode
from runtara_tui.keyboard.commands import (
    Command,
    FetchCheckpointData,
    FetchCheckpoints,
    Quit,
    TriggerRefresh,
)
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
    KEYS_DOWN,
    KEYS_UP,
    TAB_KEYS,
)
from runtara_tui.models.state.view_state import ListContext, NavFrame, ViewState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of one key press."""

    state: ViewState
    command: Command | None = None


_Handler = Callable[[ViewState, str, ListContext], DispatchResult]


def _move(state: ViewState, key: str, lists: ListContext) -> DispatchResult | None:
    """Handle selection and scroll keys shared by every mode."""
    if key in KEYS_DOWN:
        delta = 1
    elif key in KEYS_UP:
        delta = -1
    else:
        return None
    list_key = state.active_list
    if list_key is not None:
        length = len(lists.ids(list_key, state.status_filter))
        return DispatchResult(state.move_selection(list_key, delta, length))
    if state.view_mode is ViewMode.LIST:
        return DispatchResult(state)
    return DispatchResult(state.scroll(delta))


def _handle_list(state: ViewState, key: str, lists: ListContext) -> DispatchResult:
    if key in (KEY_QUIT, KEY_BACK):
        return DispatchResult(state, Quit())
    if key == KEY_NEXT_TAB:
        return DispatchResult(state.next_tab())
    if key == KEY_PREVIOUS_TAB:
        return DispatchResult(state.previous_tab())
    if key in TAB_KEYS:
        return DispatchResult(state.switch_tab(TAB_KEYS[key]))
    if state.tab is Tab.INSTANCES:
        if key == KEY_OPEN:
            instance_id = state.selected_id(ListKey.INSTANCES, lists)
            if instance_id is None:
                return DispatchResult(state)
            return DispatchResult(
                state.push(NavFrame(ViewMode.INSTANCE_DETAIL, instance_id))
            )
        if key == KEY_FILTER:
            return DispatchResult(state.cycle_status_filter(lists), TriggerRefresh())
    if state.tab is Tab.METRICS and key == KEY_GRANULARITY:
        return DispatchResult(state.toggle_granularity(), TriggerRefresh())
    return DispatchResult(state)


def _handle_instance_detail(
    state: ViewState, key: str, lists: ListContext
) -> DispatchResult:
    frame = state.current_frame
    if key == KEY_CHECKPOINTS and frame is not None:
        return DispatchResult(
            state.push(NavFrame(ViewMode.CHECKPOINTS_LIST, frame.instance_id)),
            FetchCheckpoints(frame.instance_id),
        )
    return DispatchResult(state)


def _handle_checkpoints_list(
    state: ViewState, key: str, lists: ListContext
) -> DispatchResult:
    frame = state.current_frame
    if key == KEY_OPEN and frame is not None:
        checkpoint_id = state.selected_id(ListKey.CHECKPOINTS, lists)
        if checkpoint_id is None:
            return DispatchResult(state)
        return DispatchResult(
            state.push(
                NavFrame(ViewMode.CHECKPOINT_DETAIL, frame.instance_id, checkpoint_id)
            ),
            FetchCheckpointData(frame.instance_id, checkpoint_id),
        )
    return DispatchResult(state)


def _handle_checkpoint_detail(
    state: ViewState, key: str, lists: ListContext
) -> DispatchResult:
    return DispatchResult(state)


_HANDLERS: dict[ViewMode, _Handler] = {
    ViewMode.LIST: _handle_list,
    ViewMode.INSTANCE_DETAIL: _handle_instance_detail,
    ViewMode.CHECKPOINTS_LIST: _handle_checkpoints_list,
    ViewMode.CHECKPOINT_DETAIL: _handle_checkpoint_detail,
}


def dispatch(state: ViewState, key: str, lists: ListContext) -> DispatchResult:
    """Apply one key press to the navigation state.

    Total over every (state, key) pair: unknown keys and keys that are not
    valid in the current mode return the state unchanged. The selection
    invariant is re-established on the way out.
    """
    if key == KEY_REFRESH:
        result = DispatchResult(state, TriggerRefresh())
    elif key == KEY_BACK and state.view_mode is not ViewMode.LIST:
        result = DispatchResult(state.pop())
    else:
        result = _move(state, key, lists) or _HANDLERS[state.view_mode](
            state, key, lists
        )
    return DispatchResult(result.state.clamp_all(lists), result.command)


__all__ = ["DispatchResult", "dispatch"]
