"""Display formatting helpers."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from runtara_tui.constants.values import NO_VALUE, UNREADABLE

_KB = 1024
_MB = _KB * 1024
_GB = _MB * 1024


def format_datetime(value: datetime | None) -> str:
    if value is None:
        return NO_VALUE
    return value.strftime("%Y-%m-%d %H:%M:%S")


def format_duration_ms(ms: int | float) -> str:
    """Format a duration as its two largest units, e.g. ``3h 12m``."""
    secs = int(ms) // 1000
    mins = secs // 60
    hours = mins // 60
    days = hours // 24
    if days > 0:
        return f"{days}d {hours % 24}h"
    if hours > 0:
        return f"{hours}h {mins % 60}m"
    if mins > 0:
        return f"{mins}m {secs % 60}s"
    return f"{secs}s"


def format_seconds(value: float | None) -> str:
    if value is None:
        return NO_VALUE
    return f"{value:.2f}s"


def format_percent(value: float | None) -> str:
    if value is None:
        return NO_VALUE
    return f"{value:.1f}%"


def format_bytes(value: int | None) -> str:
    if value is None:
        return NO_VALUE
    if value >= _GB:
        return f"{value / _GB:.1f} GB"
    if value >= _MB:
        return f"{value / _MB:.1f} MB"
    if value >= _KB:
        return f"{value / _KB:.1f} KB"
    return f"{value} B"


def truncate(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return f"{text[: max(0, max_len - 3)]}..."


def pretty_json(value: Any) -> str:
    """Indent a JSON-compatible payload, falling back to ``repr``."""
    try:
        return json.dumps(value, indent=2, sort_keys=True, default=str)
    except (TypeError, ValueError):
        return repr(value)


def decode_checkpoint_data(data: bytes) -> str:
    """Render a checkpoint state blob for display.

    JSON is indented. Other UTF-8 text is shown as-is. Blobs that do not
    decode, or that hold control characters, render as ``unreadable``.
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return UNREADABLE
    try:
        parsed = json.loads(text)
    except ValueError:
        if any(not char.isprintable() and char not in "\n\r\t" for char in text):
            return UNREADABLE
        return text
    return pretty_json(parsed)


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
