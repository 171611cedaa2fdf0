"""Navigation state for the dashboard.

``ViewState`` is an immutable value: every transition returns a new instance,
which keeps the key dispatcher pure and lets the main loop swap state in one
assignment. Position lives here; fetched data lives in ``DataStore``.

The navigation stack holds the frames above the main list, so ``List`` is the
empty stack and the deepest path (instance detail, checkpoints list,
checkpoint detail) has exactly ``MAX_NAVIGATION_DEPTH`` frames.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from runtara_tui.constants.enums import (
    TAB_LIST_KEYS,
    InstanceStatus,
    ListKey,
    MetricsGranularity,
    StatusFilter,
    Tab,
    ViewMode,
)
from runtara_tui.constants.limits import MAX_NAVIGATION_DEPTH

logger = logging.getLogger(__name__)

# Mode each detail frame must be pushed from.
_PARENT_MODES: dict[ViewMode, ViewMode] = {
    ViewMode.INSTANCE_DETAIL: ViewMode.LIST,
    ViewMode.CHECKPOINTS_LIST: ViewMode.INSTANCE_DETAIL,
    ViewMode.CHECKPOINT_DETAIL: ViewMode.CHECKPOINTS_LIST,
}

_TABS: tuple[Tab, ...] = tuple(Tab)


@dataclass(frozen=True)
class NavFrame:
    """One detail level on the navigation stack."""

    mode: ViewMode
    instance_id: str
    checkpoint_id: str | None = None


@dataclass(frozen=True)
class ListContext:
    """Read-only identifiers of the selectable lists.

    Instances are kept unfiltered together with their status so that the
    filtered view can be recomputed for any status filter.
    """

    instances: tuple[tuple[str, InstanceStatus], ...] = ()
    images: tuple[str, ...] = ()
    metrics: tuple[str, ...] = ()
    checkpoints: tuple[str, ...] = ()

    def ids(
        self, key: ListKey, status_filter: StatusFilter = StatusFilter.ALL
    ) -> tuple[str, ...]:
        """Return the visible identifiers of a list, in original order."""
        if key is ListKey.INSTANCES:
            return tuple(
                instance_id
                for instance_id, status in self.instances
                if status_filter.matches(status)
            )
        if key is ListKey.IMAGES:
            return self.images
        if key is ListKey.METRICS:
            return self.metrics
        return self.checkpoints


@dataclass(frozen=True)
class Selections:
    """Selected index per list, or None when that list is empty."""

    instances: int | None = None
    images: int | None = None
    metrics: int | None = None
    checkpoints: int | None = None

    def get(self, key: ListKey) -> int | None:
        return getattr(self, key.value)

    def with_index(self, key: ListKey, index: int | None) -> Selections:
        return replace(self, **{key.value: index})


def clamp_index(index: int | None, length: int) -> int | None:
    """Clamp a selection to ``[0, length)``, or None for an empty list."""
    if length <= 0:
        return None
    if index is None:
        return 0
    return max(0, min(index, length - 1))


def reselect_index(
    index: int | None,
    old_ids: Sequence[str],
    new_ids: Sequence[str],
) -> int | None:
    """Carry a selection from one version of a list to the next.

    The previously selected item is followed by identity when it survived;
    otherwise the same position is kept, clamped to the new length.
    """
    if not new_ids:
        return None
    if index is not None and 0 <= index < len(old_ids):
        selected_id = old_ids[index]
        if selected_id in new_ids:
            return list(new_ids).index(selected_id)
    return clamp_index(index, len(new_ids))


@dataclass(frozen=True)
class ViewState:
    """Navigation position, independent of fetched data."""

    tab: Tab = Tab.INSTANCES
    stack: tuple[NavFrame, ...] = ()
    selections: Selections = field(default_factory=Selections)
    status_filter: StatusFilter = StatusFilter.ALL
    granularity: MetricsGranularity = MetricsGranularity.HOURLY
    detail_scroll: int = 0

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def view_mode(self) -> ViewMode:
        if not self.stack:
            return ViewMode.LIST
        return self.stack[-1].mode

    @property
    def current_frame(self) -> NavFrame | None:
        return self.stack[-1] if self.stack else None

    @property
    def depth(self) -> int:
        return len(self.stack)

    @property
    def active_list(self) -> ListKey | None:
        """List that selection keys act on in the current view mode."""
        mode = self.view_mode
        if mode is ViewMode.LIST:
            return TAB_LIST_KEYS[self.tab]
        if mode is ViewMode.CHECKPOINTS_LIST:
            return ListKey.CHECKPOINTS
        return None

    def selected(self, key: ListKey) -> int | None:
        return self.selections.get(key)

    def selected_id(self, key: ListKey, lists: ListContext) -> str | None:
        """Identifier of the selected item in the filtered list, if any."""
        ids = lists.ids(key, self.status_filter)
        index = self.selected(key)
        if index is None or not 0 <= index < len(ids):
            return None
        return ids[index]

    # =========================================================================
    # Tabs
    # =========================================================================

    def switch_tab(self, tab: Tab) -> ViewState:
        return replace(self, tab=tab)

    def next_tab(self) -> ViewState:
        return self.switch_tab(_TABS[(_TABS.index(self.tab) + 1) % len(_TABS)])

    def previous_tab(self) -> ViewState:
        return self.switch_tab(_TABS[(_TABS.index(self.tab) - 1) % len(_TABS)])

    # =========================================================================
    # Navigation stack
    # =========================================================================

    def push(self, frame: NavFrame) -> ViewState:
        """Push a detail frame along one of the allowed edges.

        Pushes from the wrong parent mode or beyond the depth bound leave the
        state unchanged.
        """
        parent = _PARENT_MODES.get(frame.mode)
        if parent is None or parent is not self.view_mode:
            logger.debug(f"Ignoring push of {frame.mode.value} from {self.view_mode.value}")
            return self
        if self.depth >= MAX_NAVIGATION_DEPTH:
            return self
        state = replace(self, stack=(*self.stack, frame), detail_scroll=0)
        if frame.mode is ViewMode.CHECKPOINTS_LIST:
            state = state.with_selection(ListKey.CHECKPOINTS, None)
        return state

    def pop(self) -> ViewState:
        """Return to the parent view. Popping the main list is a no-op."""
        if not self.stack:
            return self
        popped = self.stack[-1]
        state = replace(self, stack=self.stack[:-1], detail_scroll=0)
        if popped.mode is ViewMode.CHECKPOINTS_LIST:
            state = state.with_selection(ListKey.CHECKPOINTS, None)
        return state

    # =========================================================================
    # Selection
    # =========================================================================

    def with_selection(self, key: ListKey, index: int | None) -> ViewState:
        return replace(self, selections=self.selections.with_index(key, index))

    def move_selection(self, key: ListKey, delta: int, length: int) -> ViewState:
        """Move a selection by ``delta`` with wrap-around."""
        if length <= 0:
            return self.with_selection(key, None)
        current = self.selected(key)
        if current is None:
            return self.with_selection(key, 0)
        return self.with_selection(key, (current + delta) % length)

    def clamp_all(self, lists: ListContext) -> ViewState:
        """Re-establish the selection invariant for every list."""
        selections = self.selections
        for key in ListKey:
            length = len(lists.ids(key, self.status_filter))
            selections = selections.with_index(key, clamp_index(selections.get(key), length))
        if selections == self.selections:
            return self
        return replace(self, selections=selections)

    def reselect(
        self,
        key: ListKey,
        old_ids: Sequence[str],
        new_ids: Sequence[str],
    ) -> ViewState:
        return self.with_selection(key, reselect_index(self.selected(key), old_ids, new_ids))

    # =========================================================================
    # Filters
    # =========================================================================

    def cycle_status_filter(self, lists: ListContext) -> ViewState:
        """Advance the status filter, following the selected instance if visible."""
        old_ids = lists.ids(ListKey.INSTANCES, self.status_filter)
        state = replace(self, status_filter=self.status_filter.next())
        new_ids = lists.ids(ListKey.INSTANCES, state.status_filter)
        return state.reselect(ListKey.INSTANCES, old_ids, new_ids)

    def toggle_granularity(self) -> ViewState:
        state = replace(self, granularity=self.granularity.toggled())
        return state.with_selection(ListKey.METRICS, 0)

    # =========================================================================
    # Detail scrolling
    # =========================================================================

    def scroll(self, delta: int) -> ViewState:
        return replace(self, detail_scroll=max(0, self.detail_scroll + delta))


__all__ = [
    "ListContext",
    "NavFrame",
    "Selections",
    "ViewState",
    "clamp_index",
    "reselect_index",
]
