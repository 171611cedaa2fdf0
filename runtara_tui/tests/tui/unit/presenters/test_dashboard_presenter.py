"""Unit tests for DashboardPresenter.

Renderables are printed into a recording rich Console and checked as plain
text, so the tests do not depend on styling details.
"""

from __future__ import annotations

from rich.console import Console, RenderableType

from runtara_tui.constants.enums import InstanceStatus
from runtara_tui.controllers.dashboard_controller import DashboardController
from runtara_tui.controllers.monitoring.errors import MonitoringConnectionError
from runtara_tui.keyboard.commands import FetchCheckpointData
from runtara_tui.models.state.app_settings import AppSettings
from runtara_tui.screens.dashboard.presenter import (
    DashboardPresenter,
    status_style,
    success_rate_style,
)


def _text(renderable: RenderableType) -> str:
    console = Console(record=True, width=200, color_system=None)
    console.print(renderable)
    return console.export_text()


def _loaded(controller: DashboardController, snapshot) -> DashboardController:
    controller.begin_snapshot_fetch()
    controller.apply_snapshot(snapshot)
    return controller


class TestStyles:
    def test_status_colors(self) -> None:
        assert status_style(InstanceStatus.FAILED) == "red"
        assert status_style(InstanceStatus.RUNNING) == "blue"

    def test_success_rate_thresholds(self) -> None:
        assert success_rate_style(99.0) == "green"
        assert success_rate_style(85.0) == "yellow"
        assert success_rate_style(10.0) == "red"
        assert success_rate_style(None) == "grey50"


class TestChrome:
    """Tests for header, tabs, banner and footer."""

    def test_header_shows_server_tenant_and_connection(self, settings, clock, make_snapshot) -> None:
        controller = _loaded(DashboardController(settings, clock=clock), make_snapshot())
        header = DashboardPresenter().header(controller.frame()).plain
        assert "runtara.test:8002" in header
        assert "Tenant: acme" in header
        assert "Connected" in header

    def test_banner_hidden_without_error(self, settings, clock) -> None:
        controller = DashboardController(settings, clock=clock)
        assert DashboardPresenter().banner(controller.frame()) is None

    def test_banner_after_failure(self, settings, clock, make_snapshot) -> None:
        controller = _loaded(DashboardController(settings, clock=clock), make_snapshot())
        controller.begin_snapshot_fetch()
        controller.apply_snapshot_failure(MonitoringConnectionError("cannot reach runtara.test:8002"))
        frame = controller.frame()
        banner = DashboardPresenter().banner(frame).plain
        assert "cannot reach runtara.test:8002" in banner
        assert "showing last snapshot" in banner
        assert "Disconnected" in DashboardPresenter().header(frame).plain

    def test_tabs_list_all_tabs(self, settings, clock) -> None:
        tabs = DashboardPresenter().tabs(DashboardController(settings, clock=clock).frame()).plain
        for label in ("1:Instances", "2:Images", "3:Metrics", "4:Health"):
            assert label in tabs

    def test_footer_countdown(self, settings, clock) -> None:
        controller = DashboardController(settings, clock=clock)
        controller.poll()
        clock.advance(2)
        footer = DashboardPresenter().footer(controller.frame()).plain
        assert "Next refresh in 3s" in footer
        assert "f:Filter" in footer


class TestContent:
    """Tests for per-tab and detail content."""

    def test_instances_table(self, settings, clock, make_snapshot, make_instance) -> None:
        controller = _loaded(
            DashboardController(settings, clock=clock),
            make_snapshot(
                instances=(
                    make_instance("inst-run", InstanceStatus.RUNNING),
                    make_instance("inst-fail", InstanceStatus.FAILED),
                )
            ),
        )
        controller.handle_key("f")
        text = _text(DashboardPresenter().content(controller.frame()))
        assert "Filter: Running" in text
        assert "Total: 2" in text
        assert "inst-run" in text
        assert "inst-fail" not in text

    def test_metrics_hint_without_tenant(self, clock) -> None:
        controller = DashboardController(AppSettings(), clock=clock)
        controller.handle_key("3")
        text = _text(DashboardPresenter().content(controller.frame()))
        assert "Please specify a tenant ID to view metrics" in text
        assert "runtara-tui -t <tenant_id>" in text

    def test_metrics_table(self, settings, clock, make_snapshot, make_metrics) -> None:
        controller = _loaded(
            DashboardController(settings, clock=clock),
            make_snapshot(metrics=make_metrics(buckets=2)),
        )
        controller.handle_key("3")
        text = _text(DashboardPresenter().content(controller.frame()))
        assert "Granularity: Hourly" in text
        assert "90.0%" in text

    def test_health_panel(self, settings, clock, make_snapshot) -> None:
        controller = _loaded(DashboardController(settings, clock=clock), make_snapshot())
        controller.handle_key("4")
        text = _text(DashboardPresenter().content(controller.frame()))
        assert "Healthy" in text
        assert "1.2.0" in text
        assert "1m 30s" in text

    def test_instance_detail(self, settings, clock, make_snapshot, make_instance) -> None:
        controller = _loaded(
            DashboardController(settings, clock=clock),
            make_snapshot(
                instances=(make_instance("inst-1", InstanceStatus.FAILED, error={"reason": "oom"}),)
            ),
        )
        controller.handle_key("enter")
        text = _text(DashboardPresenter().content(controller.frame()))
        assert "inst-1" in text
        assert '"reason": "oom"' in text

    def test_instance_missing_from_snapshot(self, settings, clock, make_snapshot, make_instance) -> None:
        controller = _loaded(
            DashboardController(settings, clock=clock),
            make_snapshot(instances=(make_instance("inst-1"),)),
        )
        controller.handle_key("enter")
        controller.begin_snapshot_fetch()
        controller.apply_snapshot(make_snapshot())
        text = _text(DashboardPresenter().content(controller.frame()))
        assert "not in the latest snapshot" in text

    def test_checkpoints_loading_then_data(self, settings, clock, make_snapshot, make_instance, make_checkpoint) -> None:
        controller = _loaded(
            DashboardController(settings, clock=clock),
            make_snapshot(instances=(make_instance("inst-1"),)),
        )
        controller.handle_key("enter")
        controller.begin_checkpoints(controller.handle_key("c"))
        presenter = DashboardPresenter()
        assert "Loading checkpoints" in _text(presenter.content(controller.frame()))

        controller.apply_checkpoints("inst-1", [make_checkpoint("cp-1", 1)])
        assert "cp-1" in _text(presenter.content(controller.frame()))

        command = controller.handle_key("enter")
        assert isinstance(command, FetchCheckpointData)
        controller.begin_checkpoint_data(command)
        controller.apply_checkpoint_data(command.key, b"\xff\x00")
        assert "unreadable" in _text(presenter.content(controller.frame()))

    def test_checkpoint_detail_shows_summary(self, settings, clock, make_snapshot, make_instance, make_checkpoint) -> None:
        controller = _loaded(
            DashboardController(settings, clock=clock),
            make_snapshot(instances=(make_instance("inst-1"),)),
        )
        controller.handle_key("enter")
        controller.begin_checkpoints(controller.handle_key("c"))
        controller.apply_checkpoints("inst-1", [make_checkpoint("cp-1", 1)])
        command = controller.handle_key("enter")
        controller.begin_checkpoint_data(command)
        presenter = DashboardPresenter()
        loading = _text(presenter.content(controller.frame()))
        assert "Checkpoint ID:  cp-1" in loading
        assert "Loading checkpoint data" in loading

        controller.apply_checkpoint_data(command.key, b'{"step": 2}')
        text = _text(presenter.content(controller.frame()))
        assert "Checkpoint ID:  cp-1" in text
        assert "Instance ID:    inst-1" in text
        assert "Created At:     2026-01-01 12:00:00" in text
        assert '"step": 2' in text
