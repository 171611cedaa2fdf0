"""Fetched data holders."""

from runtara_tui.models.cache.data_store import (
    DataStore,
    FetchError,
    OnDemandSlot,
)
from runtara_tui.models.cache.snapshot import FetchRequest, Snapshot, filter_instances

__all__ = [
    "DataStore",
    "FetchError",
    "FetchRequest",
    "OnDemandSlot",
    "Snapshot",
    "filter_instances",
]
