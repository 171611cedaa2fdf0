"""Registered container image models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ImageInfo(BaseModel):
    """Container image registered for a tenant."""

    model_config = ConfigDict(frozen=True)

    image_id: str
    name: str
    tag: str = "latest"
    tenant_id: str
    runner_type: str = "Unknown"
    created_at: datetime
    size_bytes: int | None = None

    @property
    def reference(self) -> str:
        return f"{self.name}:{self.tag}"


__all__ = ["ImageInfo"]
