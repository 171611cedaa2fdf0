"""Error taxonomy for the Runtara management API client."""

from __future__ import annotations


class MonitoringError(Exception):
    """Base exception for failed management API calls."""

    kind = "error"

    @property
    def summary(self) -> str:
        return str(self) or self.kind


class MonitoringConnectionError(MonitoringError):
    """Transport or TLS handshake failure."""

    kind = "connection"


class MonitoringTimeoutError(MonitoringError):
    """The server did not answer within the configured timeout."""

    kind = "timeout"


class MonitoringServerError(MonitoringError):
    """The server answered with an error status or an unusable payload."""

    kind = "server"

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"server error {code}: {message}")
        self.code = code
        self.message = message


__all__ = [
    "MonitoringConnectionError",
    "MonitoringError",
    "MonitoringServerError",
    "MonitoringTimeoutError",
]
