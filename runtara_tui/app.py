"""Main application class for the Runtara TUI."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from textual.app import App
from textual.binding import Binding
from textual.message import Message
from textual.screen import Screen

from runtara_tui.constants import APP_TITLE, FRAME_INTERVAL_DEFAULT
from runtara_tui.controllers.base.base_controller import MonitoringClient
from runtara_tui.controllers.dashboard_controller import DashboardController
from runtara_tui.controllers.monitoring import (
    HttpMonitoringClient,
    MonitoringError,
    fetch_snapshot,
)
from runtara_tui.keyboard.app import APP_BINDINGS
from runtara_tui.keyboard.commands import (
    Command,
    FetchCheckpointData,
    FetchCheckpoints,
    Quit,
    TriggerRefresh,
)
from runtara_tui.models.cache.snapshot import FetchRequest, Snapshot
from runtara_tui.models.core import CheckpointInfo
from runtara_tui.models.state.app_settings import AppSettings
from runtara_tui.screens.dashboard import DashboardScreen

logger = logging.getLogger(__name__)

SNAPSHOT_WORKER_GROUP = "snapshot"
CHECKPOINTS_WORKER_GROUP = "checkpoints"
CHECKPOINT_DATA_WORKER_GROUP = "checkpoint-data"


# ============================================================================
# Worker Messages
# ============================================================================


class SnapshotFetched(Message):
    """A periodic fetch produced a complete snapshot."""

    def __init__(self, snapshot: Snapshot, duration_ms: float = 0.0) -> None:
        super().__init__()
        self.snapshot = snapshot
        self.duration_ms = duration_ms


class SnapshotFetchFailed(Message):
    """A periodic fetch failed; no collection is replaced."""

    def __init__(self, error: Exception, duration_ms: float = 0.0) -> None:
        super().__init__()
        self.error = error
        self.duration_ms = duration_ms


class CheckpointsLoaded(Message):
    def __init__(
        self,
        instance_id: str,
        checkpoints: list[CheckpointInfo],
        duration_ms: float = 0.0,
    ) -> None:
        super().__init__()
        self.instance_id = instance_id
        self.checkpoints = checkpoints
        self.duration_ms = duration_ms


class CheckpointsLoadFailed(Message):
    def __init__(self, instance_id: str, error: Exception) -> None:
        super().__init__()
        self.instance_id = instance_id
        self.error = error


class CheckpointDataLoaded(Message):
    def __init__(self, key: tuple[str, str], data: bytes, duration_ms: float = 0.0) -> None:
        super().__init__()
        self.key = key
        self.data = data
        self.duration_ms = duration_ms


class CheckpointDataLoadFailed(Message):
    def __init__(self, key: tuple[str, str], error: Exception) -> None:
        super().__init__()
        self.key = key
        self.error = error


def _log_unexpected(error: Exception, operation: str) -> None:
    if not isinstance(error, MonitoringError):
        logger.error(f"Unexpected error during {operation}: {error!r}", exc_info=error)


# ============================================================================
# Application
# ============================================================================


class RuntaraMonitorApp(App[None]):
    """Terminal dashboard for a Runtara management API.

    The app is the single owner of the dashboard controller. Keys are
    forwarded to the controller, commands it returns are executed here, and
    every fetch runs in a Textual worker that reports back with a message.
    """

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    def __init__(
        self,
        settings: AppSettings | None = None,
        client: MonitoringClient | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        frame_interval: float = FRAME_INTERVAL_DEFAULT,
    ) -> None:
        super().__init__()
        self.settings = settings or AppSettings()
        self._client = client or HttpMonitoringClient(self.settings)
        self._controller = DashboardController(self.settings, clock=clock)
        self._frame_interval = frame_interval
        self._dashboard: DashboardScreen | None = None

    @property
    def controller(self) -> DashboardController:
        return self._controller

    @property
    def client(self) -> MonitoringClient:
        return self._client

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def get_default_screen(self) -> Screen:
        self._dashboard = DashboardScreen()
        return self._dashboard

    def on_mount(self) -> None:
        logger.debug(f"Starting dashboard for {self.settings.server}")
        self.set_interval(self._frame_interval, self._on_frame_tick)
        self._on_frame_tick()

    async def on_unmount(self) -> None:
        await self._client.aclose()
        logger.debug("Monitoring client closed")

    def _on_frame_tick(self) -> None:
        if self._controller.poll():
            self._start_snapshot_fetch()
        self.refresh_view()

    def refresh_view(self) -> None:
        if self._dashboard is not None:
            self._dashboard.refresh_frame(self._controller.frame())

    # =========================================================================
    # Input
    # =========================================================================

    def action_dispatch_key(self, key: str) -> None:
        """Forward a bound key to the navigation state machine."""
        command = self._controller.handle_key(key)
        if command is not None:
            self._run_command(command)
        self.refresh_view()

    def _run_command(self, command: Command) -> None:
        if isinstance(command, Quit):
            logger.debug("Quit requested")
            self.exit()
        elif isinstance(command, TriggerRefresh):
            if self._controller.request_refresh():
                self._start_snapshot_fetch()
        elif isinstance(command, FetchCheckpoints):
            self._controller.begin_checkpoints(command)
            self.workers.cancel_group(self, CHECKPOINTS_WORKER_GROUP)
            self.run_worker(
                self._load_checkpoints(command.instance_id),
                group=CHECKPOINTS_WORKER_GROUP,
                exit_on_error=False,
            )
        elif isinstance(command, FetchCheckpointData):
            self._controller.begin_checkpoint_data(command)
            self.workers.cancel_group(self, CHECKPOINT_DATA_WORKER_GROUP)
            self.run_worker(
                self._load_checkpoint_data(command.key),
                group=CHECKPOINT_DATA_WORKER_GROUP,
                exit_on_error=False,
            )

    # =========================================================================
    # Workers
    # =========================================================================

    def _start_snapshot_fetch(self) -> None:
        request = self._controller.begin_snapshot_fetch()
        self.run_worker(
            self._fetch_snapshot(request),
            name=f"snapshot-{self._controller.scheduler.started_count}",
            group=SNAPSHOT_WORKER_GROUP,
            exit_on_error=False,
        )

    async def _fetch_snapshot(self, request: FetchRequest) -> None:
        start = time.monotonic()
        try:
            snapshot = await fetch_snapshot(self._client, request)
        except Exception as e:
            duration_ms = (time.monotonic() - start) * 1000
            self.post_message(SnapshotFetchFailed(e, duration_ms))
            return
        self.post_message(SnapshotFetched(snapshot, snapshot.duration_ms))

    async def _load_checkpoints(self, instance_id: str) -> None:
        start = time.monotonic()
        try:
            checkpoints = await self._client.list_checkpoints(instance_id)
        except Exception as e:
            _log_unexpected(e, "checkpoints fetch")
            self.post_message(CheckpointsLoadFailed(instance_id, e))
            return
        duration_ms = (time.monotonic() - start) * 1000
        self.post_message(CheckpointsLoaded(instance_id, checkpoints, duration_ms))

    async def _load_checkpoint_data(self, key: tuple[str, str]) -> None:
        instance_id, checkpoint_id = key
        start = time.monotonic()
        try:
            data = await self._client.get_checkpoint_data(instance_id, checkpoint_id)
        except Exception as e:
            _log_unexpected(e, "checkpoint data fetch")
            self.post_message(CheckpointDataLoadFailed(key, e))
            return
        duration_ms = (time.monotonic() - start) * 1000
        self.post_message(CheckpointDataLoaded(key, data, duration_ms))

    # =========================================================================
    # Worker results
    # =========================================================================

    def on_snapshot_fetched(self, message: SnapshotFetched) -> None:
        logger.debug(f"Snapshot applied ({message.duration_ms:.2f}ms)")
        if self._controller.apply_snapshot(message.snapshot):
            self._start_snapshot_fetch()
        self.refresh_view()

    def on_snapshot_fetch_failed(self, message: SnapshotFetchFailed) -> None:
        if self._controller.apply_snapshot_failure(message.error):
            self._start_snapshot_fetch()
        self.refresh_view()

    def on_checkpoints_loaded(self, message: CheckpointsLoaded) -> None:
        logger.debug(
            f"Loaded {len(message.checkpoints)} checkpoints for {message.instance_id} "
            f"({message.duration_ms:.2f}ms)"
        )
        self._controller.apply_checkpoints(message.instance_id, message.checkpoints)
        self.refresh_view()

    def on_checkpoints_load_failed(self, message: CheckpointsLoadFailed) -> None:
        self._controller.fail_checkpoints(message.instance_id, message.error)
        self.notify(f"Failed to list checkpoints: {message.error}", severity="error")
        self.refresh_view()

    def on_checkpoint_data_loaded(self, message: CheckpointDataLoaded) -> None:
        self._controller.apply_checkpoint_data(message.key, message.data)
        self.refresh_view()

    def on_checkpoint_data_load_failed(self, message: CheckpointDataLoadFailed) -> None:
        self._controller.fail_checkpoint_data(message.key, message.error)
        self.notify(f"Failed to get checkpoint: {message.error}", severity="error")
        self.refresh_view()


__all__ = [
    "CheckpointDataLoadFailed",
    "CheckpointDataLoaded",
    "CheckpointsLoadFailed",
    "CheckpointsLoaded",
    "RuntaraMonitorApp",
    "SnapshotFetchFailed",
    "SnapshotFetched",
]
