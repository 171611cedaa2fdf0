"""Runtara TUI - terminal dashboard for the Runtara durable-execution platform."""

__version__ = "0.1.0"
