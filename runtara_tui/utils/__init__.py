"""Utility helpers for the Runtara TUI."""

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

__all__ = [
    "decode_checkpoint_data",
    "format_bytes",
    "format_datetime",
    "format_duration_ms",
    "format_percent",
    "format_seconds",
    "pretty_json",
    "truncate",
]
