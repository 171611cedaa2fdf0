"""Data store holding the last successfully fetched snapshot.

Performance notes:
- The store is owned by the main loop. Background workers never touch it;
  they hand their results to the loop, which applies them here. No lock is
  needed because every mutation happens on the single asyncio thread.
- The periodic collections only ever change through ``apply_success``, which
  swaps the whole ``Snapshot`` in one assignment.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Generic, TypeVar

from runtara_tui.models.cache.snapshot import Snapshot
from runtara_tui.models.core import CheckpointInfo
from runtara_tui.models.state.view_state import ListContext

logger = logging.getLogger(__name__)

ValueT = TypeVar("ValueT")

CONNECTION_ERROR_KIND = "connection"


@dataclass(frozen=True)
class FetchError:
    """Most recent failure of a fetch, as shown to the operator."""

    kind: str
    message: str
    occurred_at: datetime

    @classmethod
    def now(cls, kind: str, message: str) -> FetchError:
        return cls(kind=kind, message=message, occurred_at=datetime.now(timezone.utc))


@dataclass(frozen=True)
class OnDemandSlot(Generic[ValueT]):
    """Single-collection result fetched when the operator opens a view.

    ``key`` identifies what the slot was requested for; results for any
    other key are stale and get discarded.
    """

    key: Hashable | None = None
    value: ValueT | None = None
    error: FetchError | None = None
    loading: bool = False


class DataStore:
    """Last atomic snapshot of the periodic collections plus fetch metadata."""

    def __init__(self) -> None:
        self._snapshot: Snapshot | None = None
        self._last_error: FetchError | None = None
        self._in_flight = False
        self._connected = False
        self._consecutive_failures = 0
        self._checkpoints: OnDemandSlot[tuple[CheckpointInfo, ...]] = OnDemandSlot()
        self._checkpoint_data: OnDemandSlot[bytes] = OnDemandSlot()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def snapshot(self) -> Snapshot | None:
        return self._snapshot

    @property
    def last_error(self) -> FetchError | None:
        return self._last_error

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def checkpoints(self) -> OnDemandSlot[tuple[CheckpointInfo, ...]]:
        return self._checkpoints

    @property
    def checkpoint_data(self) -> OnDemandSlot[bytes]:
        return self._checkpoint_data

    # =========================================================================
    # Periodic snapshot
    # =========================================================================

    def begin_fetch(self) -> None:
        self._in_flight = True

    def apply_success(self, snapshot: Snapshot) -> Snapshot | None:
        """Replace the whole snapshot and clear the error.

        Returns:
            The snapshot that was replaced, or None on the first success.
        """
        previous = self._snapshot
        self._snapshot = snapshot
        self._last_error = None
        self._in_flight = False
        self._connected = True
        self._consecutive_failures = 0
        return previous

    def apply_failure(self, error: FetchError) -> None:
        """Record a failed cycle; the previous snapshot stays untouched."""
        self._last_error = error
        self._in_flight = False
        self._consecutive_failures += 1
        if error.kind == CONNECTION_ERROR_KIND:
            self._connected = False
        elif error.kind == "server":
            self._connected = True
        logger.warning(
            f"Snapshot fetch failed ({error.kind}, {self._consecutive_failures} in a row): "
            f"{error.message}"
        )

    def list_context(self) -> ListContext:
        """Identifiers of every selectable list, for selection bookkeeping."""
        return self.build_list_context(self._snapshot, self._checkpoints.value)

    @staticmethod
    def build_list_context(
        snapshot: Snapshot | None,
        checkpoints: tuple[CheckpointInfo, ...] | None = None,
    ) -> ListContext:
        checkpoint_ids = tuple(c.checkpoint_id for c in checkpoints or ())
        if snapshot is None:
            return ListContext(checkpoints=checkpoint_ids)
        metrics = snapshot.metrics.buckets if snapshot.metrics is not None else ()
        return ListContext(
            instances=tuple((i.instance_id, i.status) for i in snapshot.instances),
            images=tuple(image.image_id for image in snapshot.images),
            metrics=tuple(bucket.key for bucket in metrics),
            checkpoints=checkpoint_ids,
        )

    # =========================================================================
    # On-demand: checkpoints list
    # =========================================================================

    def begin_checkpoints(self, instance_id: str) -> None:
        self._checkpoints = OnDemandSlot(key=instance_id, loading=True)

    def apply_checkpoints(
        self, instance_id: str, checkpoints: tuple[CheckpointInfo, ...]
    ) -> bool:
        """Store a checkpoints result; returns False when it is stale."""
        if self._checkpoints.key != instance_id:
            logger.debug(f"Discarding stale checkpoints for {instance_id}")
            return False
        self._checkpoints = replace(
            self._checkpoints, value=checkpoints, error=None, loading=False
        )
        return True

    def fail_checkpoints(self, instance_id: str, error: FetchError) -> bool:
        if self._checkpoints.key != instance_id:
            return False
        self._checkpoints = replace(self._checkpoints, error=error, loading=False)
        return True

    def clear_checkpoints(self) -> None:
        self._checkpoints = OnDemandSlot()

    # =========================================================================
    # On-demand: checkpoint data
    # =========================================================================

    def begin_checkpoint_data(self, key: tuple[str, str]) -> None:
        self._checkpoint_data = OnDemandSlot(key=key, loading=True)

    def apply_checkpoint_data(self, key: tuple[str, str], data: bytes) -> bool:
        if self._checkpoint_data.key != key:
            return False
        self._checkpoint_data = replace(
            self._checkpoint_data, value=data, error=None, loading=False
        )
        return True

    def fail_checkpoint_data(self, key: tuple[str, str], error: FetchError) -> bool:
        if self._checkpoint_data.key != key:
            return False
        self._checkpoint_data = replace(self._checkpoint_data, error=error, loading=False)
        return True

    def clear_checkpoint_data(self) -> None:
        self._checkpoint_data = OnDemandSlot()


__all__ = [
    "DataStore",
    "FetchError",
    "OnDemandSlot",
]
