"""Unit tests for DataStore snapshot and on-demand slot handling."""

from __future__ import annotations

import pytest

from runtara_tui.constants.enums import InstanceStatus, ListKey, StatusFilter
from runtara_tui.models.cache.data_store import DataStore, FetchError
from runtara_tui.models.cache.snapshot import filter_instances


class TestDataStoreSnapshot:
    """Tests for the periodic snapshot lifecycle."""

    @pytest.fixture
    def store(self) -> DataStore:
        return DataStore()

    def test_initial_state(self, store: DataStore) -> None:
        assert store.snapshot is None
        assert store.last_error is None
        assert store.connected is False
        assert store.in_flight is False

    def test_apply_success_replaces_snapshot(self, store, make_snapshot, make_instance) -> None:
        first = make_snapshot(instances=(make_instance("a"),))
        second = make_snapshot(instances=(make_instance("b"),))
        store.begin_fetch()
        assert store.apply_success(first) is None
        assert store.apply_success(second) is first
        assert store.snapshot is second
        assert store.in_flight is False
        assert store.connected is True

    def test_failure_keeps_previous_snapshot(self, store, make_snapshot, make_instance) -> None:
        snapshot = make_snapshot(instances=(make_instance("a"),))
        store.apply_success(snapshot)
        store.begin_fetch()
        store.apply_failure(FetchError.now("timeout", "request timed out"))
        assert store.snapshot is snapshot
        assert store.last_error is not None
        assert store.last_error.message == "request timed out"
        assert store.in_flight is False

    def test_connection_failure_marks_disconnected(self, store, make_snapshot) -> None:
        store.apply_success(make_snapshot())
        store.apply_failure(FetchError.now("connection", "refused"))
        assert store.connected is False

    def test_server_failure_keeps_connected(self, store) -> None:
        store.apply_failure(FetchError.now("server", "server error 500: boom"))
        assert store.connected is True

    def test_success_clears_error(self, store, make_snapshot) -> None:
        store.apply_failure(FetchError.now("timeout", "slow"))
        store.apply_success(make_snapshot())
        assert store.last_error is None

    def test_list_context_reflects_snapshot(self, store, make_snapshot, make_instance, make_image, make_metrics) -> None:
        store.apply_success(
            make_snapshot(
                instances=(
                    make_instance("a", InstanceStatus.RUNNING),
                    make_instance("b", InstanceStatus.FAILED),
                ),
                images=(make_image("img-1"),),
                metrics=make_metrics(buckets=2),
            )
        )
        lists = store.list_context()
        assert lists.ids(ListKey.INSTANCES) == ("a", "b")
        assert lists.ids(ListKey.INSTANCES, StatusFilter.FAILED) == ("b",)
        assert lists.ids(ListKey.IMAGES) == ("img-1",)
        assert len(lists.ids(ListKey.METRICS)) == 2

    def test_find_instance(self, make_snapshot, make_instance) -> None:
        snapshot = make_snapshot(instances=(make_instance("a"),))
        assert snapshot.find_instance("a") is not None
        assert snapshot.find_instance("missing") is None

    def test_visible_instances(self, make_snapshot, make_instance) -> None:
        snapshot = make_snapshot(
            instances=(
                make_instance("a", InstanceStatus.FAILED),
                make_instance("b", InstanceStatus.RUNNING),
            )
        )
        assert [i.instance_id for i in snapshot.visible_instances(StatusFilter.FAILED)] == ["a"]


class TestFilterInstances:
    """Tests for filter_instances."""

    def test_keeps_original_order(self, make_instance) -> None:
        instances = (
            make_instance("a", InstanceStatus.RUNNING),
            make_instance("b", InstanceStatus.COMPLETED),
            make_instance("c", InstanceStatus.RUNNING),
        )
        visible = filter_instances(instances, StatusFilter.RUNNING)
        assert [i.instance_id for i in visible] == ["a", "c"]

    def test_all_keeps_everything(self, make_instance) -> None:
        instances = (make_instance("a", InstanceStatus.UNKNOWN),)
        assert filter_instances(instances, StatusFilter.ALL) == instances


class TestOnDemandSlots:
    """Tests for checkpoint slots keyed by their request."""

    @pytest.fixture
    def store(self) -> DataStore:
        return DataStore()

    def test_checkpoints_loading_then_loaded(self, store, make_checkpoint) -> None:
        store.begin_checkpoints("inst-1")
        assert store.checkpoints.loading is True
        assert store.apply_checkpoints("inst-1", (make_checkpoint("cp-1", 1),)) is True
        assert store.checkpoints.loading is False
        assert store.list_context().checkpoints == ("cp-1",)

    def test_stale_checkpoints_are_discarded(self, store, make_checkpoint) -> None:
        store.begin_checkpoints("inst-2")
        assert store.apply_checkpoints("inst-1", (make_checkpoint("cp-1", 1),)) is False
        assert store.checkpoints.value is None
        assert store.checkpoints.loading is True

    def test_checkpoints_failure_recorded(self, store) -> None:
        store.begin_checkpoints("inst-1")
        assert store.fail_checkpoints("inst-1", FetchError.now("server", "gone")) is True
        assert store.checkpoints.error is not None
        assert store.checkpoints.loading is False

    def test_checkpoint_data_keyed_by_pair(self, store) -> None:
        store.begin_checkpoint_data(("inst-1", "cp-1"))
        assert store.apply_checkpoint_data(("inst-1", "cp-2"), b"{}") is False
        assert store.apply_checkpoint_data(("inst-1", "cp-1"), b"{}") is True
        assert store.checkpoint_data.value == b"{}"

    def test_clear_resets_slots(self, store) -> None:
        store.begin_checkpoints("inst-1")
        store.begin_checkpoint_data(("inst-1", "cp-1"))
        store.clear_checkpoints()
        store.clear_checkpoint_data()
        assert store.checkpoints.key is None
        assert store.checkpoint_data.key is None
