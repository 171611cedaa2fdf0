"""Command-line entry point for the Runtara TUI.

Click-based launcher: resolves settings from flags, environment and an
optional YAML config file, probes the management API once and then hands the
terminal over to the Textual app.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import click

from runtara_tui import __version__
from runtara_tui.app import RuntaraMonitorApp
from runtara_tui.constants import (
    APP_NAME,
    ENV_SERVER_ADDR,
    ENV_SKIP_CERT_VERIFICATION,
)
from runtara_tui.controllers.monitoring import HttpMonitoringClient, MonitoringError
from runtara_tui.models.core import HealthSnapshot
from runtara_tui.models.state.app_settings import AppSettings, ConfigLoadError, ConfigManager

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def init_logging(log_file: Path | None, level: str = "INFO") -> None:
    """Route package logs to a file; the terminal belongs to the UI."""
    package_logger = logging.getLogger("runtara_tui")
    package_logger.handlers.clear()
    if log_file is None:
        package_logger.addHandler(logging.NullHandler())
        package_logger.propagate = True
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level.upper())
    package_logger.propagate = False


async def probe_server(settings: AppSettings) -> HealthSnapshot:
    """Check once that the management API answers before the UI starts."""
    async with HttpMonitoringClient(settings) as client:
        return await client.check_connection()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-s",
    "--server",
    envvar=ENV_SERVER_ADDR,
    help="Management API address as HOST:PORT.",
)
@click.option("-t", "--tenant", "tenant_id", help="Tenant ID to scope instances, images and metrics.")
@click.option(
    "-r",
    "--refresh",
    "refresh_interval",
    type=float,
    help="Refresh interval in seconds.",
)
@click.option(
    "--skip-cert-verification/--verify-certs",
    "skip_cert_verification",
    envvar=ENV_SKIP_CERT_VERIFICATION,
    default=None,
    help="Skip TLS certificate verification (default: skip).",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML settings file.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write logs to this file.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="INFO",
    show_default=True,
    help="Log level for --log-file.",
)
@click.version_option(__version__, prog_name=APP_NAME)
def main(
    server: str | None,
    tenant_id: str | None,
    refresh_interval: float | None,
    skip_cert_verification: bool | None,
    config_path: Path | None,
    log_file: Path | None,
    log_level: str,
) -> None:
    """Terminal dashboard for monitoring a Runtara environment."""
    init_logging(log_file, log_level)
    try:
        settings = ConfigManager.load(
            config_path,
            {
                "server": server,
                "tenant_id": tenant_id,
                "refresh_interval": refresh_interval,
                "skip_cert_verification": skip_cert_verification,
            },
        )
    except ConfigLoadError as e:
        raise click.UsageError(str(e)) from e

    logger.info(f"Connecting to {settings.server} (tenant={settings.tenant_id})")
    try:
        health = asyncio.run(probe_server(settings))
    except MonitoringError as e:
        logger.error(f"Startup probe failed: {e.summary}")
        click.echo(f"Error: cannot connect to {settings.server}: {e.summary}", err=True)
        sys.exit(1)
    logger.info(f"Management API {health.version} is {'healthy' if health.healthy else 'unhealthy'}")

    RuntaraMonitorApp(settings).run()
    logger.info("Dashboard closed")


__all__ = ["init_logging", "main", "probe_server"]
