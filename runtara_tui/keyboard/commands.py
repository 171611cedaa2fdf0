"""Side-effecting commands returned by the dispatcher.

Commands are plain data; the dashboard controller and the app execute them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Quit:
    """End the session."""


@dataclass(frozen=True)
class TriggerRefresh:
    """Fetch the periodic snapshot now."""


@dataclass(frozen=True)
class FetchCheckpoints:
    """Fetch the checkpoints list of one instance."""

    instance_id: str


@dataclass(frozen=True)
class FetchCheckpointData:
    """Fetch the serialized state of one checkpoint."""

    instance_id: str
    checkpoint_id: str

    @property
    def key(self) -> tuple[str, str]:
        return (self.instance_id, self.checkpoint_id)


Command = Quit | TriggerRefresh | FetchCheckpoints | FetchCheckpointData

__all__ = [
    "Command",
    "FetchCheckpointData",
    "FetchCheckpoints",
    "Quit",
    "TriggerRefresh",
]
