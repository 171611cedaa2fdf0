"""Dashboard presenter - turns a frame snapshot into rich renderables.

The presenter only reads ``FrameSnapshot``; it holds no state and never
touches the controller.
"""

from __future__ import annotations

import logging
from datetime import datetime

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from runtara_tui.constants.enums import InstanceStatus, ListKey, MetricsGranularity, Tab, ViewMode
from runtara_tui.constants.values import APP_TITLE, NEVER, NO_VALUE, STATUS_COLORS
from runtara_tui.controllers.dashboard_controller import FrameSnapshot
from runtara_tui.models.core import MetricBucket
from runtara_tui.screens.dashboard.config import (
    CHECKPOINT_TABLE_COLUMNS,
    DETAIL_KEY_HINTS,
    IMAGE_TABLE_COLUMNS,
    INSTANCE_TABLE_COLUMNS,
    LIST_KEY_HINTS,
    METRICS_TABLE_COLUMNS,
    SUCCESS_RATE_GOOD,
    SUCCESS_RATE_WARN,
)
from runtara_tui.utils.formatting import (
    decode_checkpoint_data,
    format_bytes,
    format_datetime,
    format_duration_ms,
    format_percent,
    format_seconds,
    pretty_json,
    truncate,
)

logger = logging.getLogger(__name__)

SELECTED_STYLE = "on grey23"


def status_style(status: InstanceStatus) -> str:
    return STATUS_COLORS.get(status.value, "white")


def success_rate_style(rate: float | None) -> str:
    if rate is None:
        return "grey50"
    if rate >= SUCCESS_RATE_GOOD:
        return "green"
    if rate >= SUCCESS_RATE_WARN:
        return "yellow"
    return "red"


def _table(columns: list[tuple[str, int]], title: str) -> Table:
    table = Table(title=title, expand=True, header_style="bold yellow")
    for name, width in columns:
        table.add_column(name, min_width=min(width, 12), max_width=width, no_wrap=True)
    return table


def _scrolled(lines: list[Text], offset: int) -> Text:
    start = min(offset, max(0, len(lines) - 1))
    return Text("\n").join(lines[start:])


class DashboardPresenter:
    """Builds the header, tab bar, banner, content and footer of one frame."""

    # =========================================================================
    # Chrome
    # =========================================================================

    def header(self, frame: FrameSnapshot) -> Text:
        text = Text.assemble((f" {APP_TITLE} ", "bold cyan"), f"| Server: {frame.server} ")
        if frame.tenant_id:
            text.append(f"| Tenant: {frame.tenant_id} ", style="cyan")
        if frame.connected:
            text.append("| Connected", style="green")
        else:
            text.append("| Disconnected", style="red")
        if frame.in_flight:
            text.append(" | Refreshing...", style="grey50")
        return text

    def tabs(self, frame: FrameSnapshot) -> Text:
        text = Text()
        for index, tab in enumerate(Tab, start=1):
            label = f" {index}:{tab.value} "
            if tab is frame.view.tab:
                text.append(label, style="bold reverse yellow")
            else:
                text.append(label, style="grey62")
        return text

    def banner(self, frame: FrameSnapshot) -> Text | None:
        """Error banner for the last failure, or None when healthy."""
        messages: list[str] = []
        if frame.last_error is not None:
            suffix = " (showing last snapshot)" if frame.snapshot is not None else ""
            messages.append(f"{frame.last_error.message}{suffix}")
        if frame.view.view_mode is ViewMode.CHECKPOINTS_LIST and frame.checkpoints.error:
            messages.append(f"Failed to list checkpoints: {frame.checkpoints.error.message}")
        if frame.view.view_mode is ViewMode.CHECKPOINT_DETAIL and frame.checkpoint_data.error:
            messages.append(f"Failed to get checkpoint: {frame.checkpoint_data.error.message}")
        if not messages:
            return None
        return Text(" Error: " + " | ".join(messages), style="bold white on red")

    def footer(self, frame: FrameSnapshot) -> Text:
        mode = frame.view.view_mode
        if mode is ViewMode.LIST:
            hints = LIST_KEY_HINTS[frame.view.tab]
        else:
            hints = DETAIL_KEY_HINTS[mode]
        text = Text(hints, style="grey50")
        if frame.tenant_id:
            text.append(f" | Tenant: {frame.tenant_id}", style="cyan")
        if mode is ViewMode.LIST:
            text.append(f" | Next refresh in {int(frame.next_refresh_in)}s", style="grey50")
        return text

    # =========================================================================
    # Content
    # =========================================================================

    def content(self, frame: FrameSnapshot) -> RenderableType:
        mode = frame.view.view_mode
        if mode is ViewMode.INSTANCE_DETAIL:
            return self.instance_detail(frame)
        if mode is ViewMode.CHECKPOINTS_LIST:
            return self.checkpoints_list(frame)
        if mode is ViewMode.CHECKPOINT_DETAIL:
            return self.checkpoint_detail(frame)
        tab = frame.view.tab
        if tab is Tab.INSTANCES:
            return self.instances(frame)
        if tab is Tab.IMAGES:
            return self.images(frame)
        if tab is Tab.METRICS:
            return self.metrics(frame)
        return self.health(frame)

    def instances(self, frame: FrameSnapshot) -> RenderableType:
        view = frame.view
        snapshot = frame.snapshot
        all_instances = snapshot.instances if snapshot else ()
        visible = snapshot.visible_instances(view.status_filter) if snapshot else ()
        filter_line = Text.assemble(
            " Filter: ",
            (view.status_filter.value, "bold cyan"),
            f" | Total: {len(all_instances)} | Press 'f' to cycle filter",
        )
        table = _table(INSTANCE_TABLE_COLUMNS, f"Instances ({len(visible)})")
        selected = view.selected(ListKey.INSTANCES)
        for index, instance in enumerate(visible):
            table.add_row(
                instance.instance_id,
                instance.tenant_id,
                Text(instance.status.value, style=status_style(instance.status)),
                truncate(instance.image_id or NO_VALUE, 24),
                format_datetime(instance.created_at),
                format_datetime(instance.updated_at),
                style=SELECTED_STYLE if index == selected else None,
            )
        return Group(filter_line, table)

    def images(self, frame: FrameSnapshot) -> RenderableType:
        images = frame.snapshot.images if frame.snapshot else ()
        table = _table(IMAGE_TABLE_COLUMNS, f"Images ({len(images)})")
        selected = frame.view.selected(ListKey.IMAGES)
        for index, image in enumerate(images):
            table.add_row(
                image.name,
                image.tag,
                image.tenant_id,
                image.runner_type,
                format_bytes(image.size_bytes),
                format_datetime(image.created_at),
                style=SELECTED_STYLE if index == selected else None,
            )
        return table

    def metrics(self, frame: FrameSnapshot) -> RenderableType:
        view = frame.view
        tenant_text = f"Tenant: {frame.tenant_id}" if frame.tenant_id else "No tenant selected (use -t flag)"
        info = Text.assemble(
            " Granularity: ",
            (view.granularity.label, "bold cyan"),
            f" | {tenant_text} | Press 'g' to toggle granularity",
        )
        metrics = frame.snapshot.metrics if frame.snapshot else None
        if metrics is None:
            if frame.tenant_id is None:
                hint = Text.assemble(
                    ("\n  Please specify a tenant ID to view metrics\n", "yellow"),
                    "\n  Run with: runtara-tui -t <tenant_id>",
                )
            else:
                hint = Text.assemble(
                    ("\n  No metrics data available\n", "yellow"),
                    "\n  Press 'r' to refresh",
                )
            return Group(info, Panel(hint, title="Metrics"))

        title = f"Metrics ({len(metrics.buckets)} buckets)"
        if metrics.start_time and metrics.end_time:
            title = (
                f"Metrics ({metrics.start_time:%m-%d %H:%M} - {metrics.end_time:%m-%d %H:%M}) "
                f"({len(metrics.buckets)} buckets)"
            )
        table = _table(METRICS_TABLE_COLUMNS, title)
        selected = view.selected(ListKey.METRICS)
        for index, bucket in enumerate(metrics.buckets):
            table.add_row(
                *self._metric_cells(bucket, metrics.granularity),
                style=SELECTED_STYLE if index == selected else None,
            )
        return Group(info, table)

    @staticmethod
    def _metric_cells(bucket: MetricBucket, granularity: MetricsGranularity) -> list[Text | str]:
        if granularity is MetricsGranularity.HOURLY:
            when = bucket.bucket_time.strftime("%m-%d %H:00")
        else:
            when = bucket.bucket_time.strftime("%Y-%m-%d")
        rate = bucket.success_rate_percent
        return [
            when,
            str(bucket.invocation_count),
            Text(str(bucket.success_count), style="green"),
            Text(str(bucket.failure_count), style="red" if bucket.failure_count else "grey50"),
            Text(format_percent(rate), style=success_rate_style(rate)),
            format_seconds(bucket.avg_duration_seconds),
            format_seconds(bucket.max_duration_seconds),
        ]

    def health(self, frame: FrameSnapshot) -> RenderableType:
        health = frame.snapshot.health if frame.snapshot else None
        if health is None:
            body = Text.assemble(
                ("\n  No health data available\n", "yellow"),
                "\n  Press 'r' to refresh",
            )
            return Panel(body, title="Health Status")
        last_refresh = NEVER
        if frame.snapshot is not None:
            age = (datetime.now(frame.snapshot.fetched_at.tzinfo) - frame.snapshot.fetched_at)
            last_refresh = f"{max(0, int(age.total_seconds()))}s ago"
        rows = [
            ("Status", "Healthy" if health.healthy else "Unhealthy",
             "bold green" if health.healthy else "bold red"),
            ("Version", health.version, "cyan"),
            ("Uptime", format_duration_ms(health.uptime_ms), "cyan"),
            ("Active Instances", str(health.active_instances), "cyan"),
            ("Server", frame.server, "white"),
            ("Last Refresh", last_refresh, "white"),
        ]
        body = Text()
        for label, value, style in rows:
            body.append(f"  {label + ':':<18}")
            body.append(value, style=style)
            body.append("\n\n")
        return Panel(body, title="Health Status")

    # =========================================================================
    # Detail views
    # =========================================================================

    def instance_detail(self, frame: FrameSnapshot) -> RenderableType:
        current = frame.view.current_frame
        instance_id = current.instance_id if current else ""
        instance = frame.snapshot.find_instance(instance_id) if frame.snapshot else None
        if instance is None:
            body = Text(f"\n  Instance {instance_id} is not in the latest snapshot", style="yellow")
            return Panel(body, title="Instance Details")

        lines: list[Text] = [
            Text.assemble("  Instance ID: ", (instance.instance_id, "cyan")),
            Text.assemble("  Tenant:      ", instance.tenant_id),
            Text.assemble("  Status:      ", (instance.status.value, status_style(instance.status))),
            Text.assemble("  Image:       ", instance.image_id or NO_VALUE),
            Text.assemble("  Created:     ", format_datetime(instance.created_at)),
            Text.assemble("  Updated:     ", format_datetime(instance.updated_at)),
            Text.assemble("  Started:     ", format_datetime(instance.started_at)),
            Text.assemble("  Finished:    ", format_datetime(instance.finished_at)),
            Text.assemble("  Retries:     ", f"{instance.retry_count} / {instance.max_retries}"),
        ]
        for label, payload, style in (
            ("Input", instance.input, "white"),
            ("Output", instance.output, "green"),
            ("Error", instance.error, "red"),
        ):
            if payload is None:
                continue
            lines.append(Text(""))
            lines.append(Text(f"  {label}:", style="bold"))
            lines.extend(Text(f"    {line}", style=style) for line in pretty_json(payload).splitlines())
        return Panel(_scrolled(lines, frame.view.detail_scroll), title="Instance Details")

    def checkpoints_list(self, frame: FrameSnapshot) -> RenderableType:
        current = frame.view.current_frame
        instance_id = current.instance_id if current else ""
        slot = frame.checkpoints
        title = f"Checkpoints for {truncate(instance_id, 40)}"
        if slot.loading:
            return Panel(Text("\n  Loading checkpoints...", style="grey50"), title=title)
        checkpoints = slot.value or ()
        if slot.error is not None and not checkpoints:
            return Panel(Text("\n  Checkpoints unavailable", style="yellow"), title=title)
        table = _table(CHECKPOINT_TABLE_COLUMNS, f"{title} ({len(checkpoints)})")
        selected = frame.view.selected(ListKey.CHECKPOINTS)
        for index, checkpoint in enumerate(checkpoints):
            table.add_row(
                str(checkpoint.sequence),
                checkpoint.checkpoint_id,
                format_bytes(checkpoint.size_bytes),
                format_datetime(checkpoint.created_at),
                style=SELECTED_STYLE if index == selected else None,
            )
        return table

    def _checkpoint_summary(self, frame: FrameSnapshot) -> Text:
        current = frame.view.current_frame
        checkpoint_id = (current.checkpoint_id if current else None) or ""
        instance_id = current.instance_id if current else ""
        created = NO_VALUE
        for checkpoint in frame.checkpoints.value or ():
            if checkpoint.checkpoint_id == checkpoint_id:
                created = format_datetime(checkpoint.created_at)
                break
        return Text("\n").join(
            [
                Text.assemble(("  Checkpoint ID:  ", "grey50"), (checkpoint_id, "yellow")),
                Text.assemble(("  Instance ID:    ", "grey50"), instance_id),
                Text.assemble(("  Created At:     ", "grey50"), created),
                Text(""),
                Text("  Data:", style="bold grey50"),
                Text(""),
            ]
        )

    def checkpoint_detail(self, frame: FrameSnapshot) -> RenderableType:
        current = frame.view.current_frame
        checkpoint_id = current.checkpoint_id if current else ""
        slot = frame.checkpoint_data
        title = f"Checkpoint {truncate(checkpoint_id or '', 40)}"
        summary = self._checkpoint_summary(frame)
        if slot.loading:
            body = Text("  Loading checkpoint data...", style="grey50")
            return Panel(Group(summary, body), title=title)
        if slot.value is None:
            body = Text("  Checkpoint data unavailable", style="yellow")
            return Panel(Group(summary, body), title=title)
        decoded = decode_checkpoint_data(slot.value)
        lines = [Text(f"  {line}") for line in decoded.splitlines()]
        title = f"{title} ({format_bytes(len(slot.value))})"
        return Panel(Group(summary, _scrolled(lines, frame.view.detail_scroll)), title=title)


__all__ = [
    "DashboardPresenter",
    "status_style",
    "success_rate_style",
]
