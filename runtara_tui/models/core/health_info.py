"""Service health models."""

from pydantic import BaseModel, ConfigDict


class HealthSnapshot(BaseModel):
    """Management service health as reported by the server."""

    model_config = ConfigDict(frozen=True)

    healthy: bool = False
    version: str = "unknown"
    uptime_ms: int = 0
    active_instances: int = 0


__all__ = ["HealthSnapshot"]
