"""Checkpoint models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CheckpointInfo(BaseModel):
    """Persisted intermediate state snapshot of an instance.

    The serialized state blob is not part of the summary; it is fetched on
    demand through ``MonitoringClient.get_checkpoint_data``.
    """

    model_config = ConfigDict(frozen=True)

    checkpoint_id: str
    instance_id: str
    sequence: int
    created_at: datetime
    size_bytes: int | None = None


__all__ = ["CheckpointInfo"]
