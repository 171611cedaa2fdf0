"""Data models for the Runtara TUI."""
