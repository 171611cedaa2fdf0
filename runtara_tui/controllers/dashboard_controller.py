"""Dashboard controller - owns navigation and fetched data on the main loop.

The controller ties the pure dispatcher, the data store and the refresh
scheduler together. It never performs I/O itself: the app runs the fetches
in Textual workers and hands the results back through the ``apply_*``
methods, which are the only places where fetched data enters the state.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from runtara_tui.constants.enums import ListKey, ViewMode
from runtara_tui.controllers.monitoring.errors import MonitoringError
from runtara_tui.controllers.refresh_scheduler import RefreshScheduler
from runtara_tui.keyboard.commands import Command, FetchCheckpointData, FetchCheckpoints
from runtara_tui.keyboard.dispatcher import dispatch
from runtara_tui.models.cache.data_store import DataStore, FetchError, OnDemandSlot
from runtara_tui.models.cache.snapshot import FetchRequest, Snapshot
from runtara_tui.models.core import CheckpointInfo
from runtara_tui.models.state.app_settings import AppSettings
from runtara_tui.models.state.view_state import ListContext, ViewState

logger = logging.getLogger(__name__)

# Lists whose contents come from the periodic snapshot.
_SNAPSHOT_LISTS = (ListKey.INSTANCES, ListKey.IMAGES, ListKey.METRICS)


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only view of everything the renderer may draw in one frame."""

    view: ViewState
    snapshot: Snapshot | None
    last_error: FetchError | None
    connected: bool
    in_flight: bool
    checkpoints: OnDemandSlot[tuple[CheckpointInfo, ...]]
    checkpoint_data: OnDemandSlot[bytes]
    next_refresh_in: float
    server: str
    tenant_id: str | None


def error_from_exception(error: BaseException) -> FetchError:
    """Convert a fetch exception into the error record kept by the store."""
    if isinstance(error, MonitoringError):
        return FetchError.now(error.kind, error.summary)
    return FetchError.now("error", f"{type(error).__name__}: {error}")


class DashboardController:
    """Main-loop owner of ViewState, DataStore and RefreshScheduler."""

    def __init__(
        self,
        settings: AppSettings,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._settings = settings
        self._clock = clock
        self._view = ViewState()
        self._store = DataStore()
        self._scheduler = RefreshScheduler(settings.refresh_interval, clock=clock)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def view(self) -> ViewState:
        return self._view

    @property
    def store(self) -> DataStore:
        return self._store

    @property
    def scheduler(self) -> RefreshScheduler:
        return self._scheduler

    def list_context(self) -> ListContext:
        return self._store.list_context()

    def frame(self) -> FrameSnapshot:
        return FrameSnapshot(
            view=self._view,
            snapshot=self._store.snapshot,
            last_error=self._store.last_error,
            connected=self._store.connected,
            in_flight=self._store.in_flight,
            checkpoints=self._store.checkpoints,
            checkpoint_data=self._store.checkpoint_data,
            next_refresh_in=self._scheduler.remaining(self._clock()),
            server=self._settings.server,
            tenant_id=self._settings.tenant_id,
        )

    # =========================================================================
    # Input
    # =========================================================================

    def handle_key(self, key: str) -> Command | None:
        """Dispatch one key and return the command for the caller to run."""
        result = dispatch(self._view, key, self.list_context())
        self._view = result.state
        self._release_closed_views()
        if result.command is not None:
            logger.debug(f"Key {key!r} -> {result.command!r}")
        return result.command

    def _release_closed_views(self) -> None:
        """Drop on-demand data belonging to views that are no longer open."""
        mode = self._view.view_mode
        if mode is not ViewMode.CHECKPOINT_DETAIL:
            self._store.clear_checkpoint_data()
        if mode not in (ViewMode.CHECKPOINTS_LIST, ViewMode.CHECKPOINT_DETAIL):
            self._store.clear_checkpoints()
        self._view = self._view.clamp_all(self.list_context())

    # =========================================================================
    # Periodic snapshot
    # =========================================================================

    def poll(self) -> bool:
        """Frame-tick check; True when a periodic fetch should start."""
        return self._scheduler.poll(self._clock())

    def request_refresh(self) -> bool:
        """Manual refresh; True when a fetch should start right away."""
        return self._scheduler.request_manual(self._clock())

    def build_request(self) -> FetchRequest:
        return FetchRequest(
            tenant_id=self._settings.tenant_id,
            status_filter=self._view.status_filter,
            granularity=self._view.granularity,
        )

    def begin_snapshot_fetch(self) -> FetchRequest:
        """Mark a fetch as started and capture its parameters."""
        self._scheduler.mark_started()
        self._store.begin_fetch()
        return self.build_request()

    def apply_snapshot(self, snapshot: Snapshot) -> bool:
        """Install a successful snapshot and carry selections across.

        Returns:
            True when an owed refresh should start immediately.
        """
        old_context = self._store.list_context()
        self._store.apply_success(snapshot)
        new_context = self._store.list_context()
        view = self._view
        for key in _SNAPSHOT_LISTS:
            view = view.reselect(
                key,
                old_context.ids(key, view.status_filter),
                new_context.ids(key, view.status_filter),
            )
        self._view = view.clamp_all(new_context)
        return self._scheduler.mark_completed(self._clock())

    def apply_snapshot_failure(self, error: BaseException) -> bool:
        """Record a failed fetch; the previous snapshot stays visible.

        Returns:
            True when an owed refresh should start immediately.
        """
        self._store.apply_failure(error_from_exception(error))
        return self._scheduler.mark_completed(self._clock())

    # =========================================================================
    # On-demand: checkpoints
    # =========================================================================

    def begin_checkpoints(self, command: FetchCheckpoints) -> None:
        self._store.begin_checkpoints(command.instance_id)
        self._view = self._view.clamp_all(self.list_context())

    def apply_checkpoints(
        self, instance_id: str, checkpoints: list[CheckpointInfo]
    ) -> None:
        old_ids = self.list_context().checkpoints
        if not self._store.apply_checkpoints(instance_id, tuple(checkpoints)):
            return
        new_ids = self.list_context().checkpoints
        self._view = self._view.reselect(ListKey.CHECKPOINTS, old_ids, new_ids)

    def fail_checkpoints(self, instance_id: str, error: BaseException) -> None:
        fetch_error = error_from_exception(error)
        if self._store.fail_checkpoints(instance_id, fetch_error):
            logger.warning(f"Checkpoints fetch for {instance_id} failed: {fetch_error.message}")

    # =========================================================================
    # On-demand: checkpoint data
    # =========================================================================

    def begin_checkpoint_data(self, command: FetchCheckpointData) -> None:
        self._store.begin_checkpoint_data(command.key)

    def apply_checkpoint_data(self, key: tuple[str, str], data: bytes) -> None:
        self._store.apply_checkpoint_data(key, data)

    def fail_checkpoint_data(self, key: tuple[str, str], error: BaseException) -> None:
        fetch_error = error_from_exception(error)
        if self._store.fail_checkpoint_data(key, fetch_error):
            logger.warning(f"Checkpoint data fetch for {key[1]} failed: {fetch_error.message}")


__all__ = [
    "DashboardController",
    "FrameSnapshot",
    "error_from_exception",
]
