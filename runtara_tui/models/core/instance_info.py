"""Workflow instance models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from runtara_tui.constants.enums import InstanceStatus


class InstanceInfo(BaseModel):
    """One durable workflow execution tracked by the platform."""

    model_config = ConfigDict(frozen=True)

    instance_id: str
    tenant_id: str
    status: InstanceStatus = InstanceStatus.UNKNOWN
    image_id: str = ""
    created_at: datetime
    updated_at: datetime | None = None
    started_at: datetime | None = None
    finished_at: datetime | None = None
    retry_count: int = 0
    max_retries: int = 0
    input: Any = None
    output: Any = None
    error: Any = None

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value: Any) -> InstanceStatus:
        return InstanceStatus.parse(value)

    @model_validator(mode="before")
    @classmethod
    def _error_only_when_failed(cls, data: Any) -> Any:
        # Error payloads are only meaningful for failed instances.
        if isinstance(data, dict) and data.get("error") is not None:
            if InstanceStatus.parse(data.get("status")) is not InstanceStatus.FAILED:
                return {**data, "error": None}
        return data


__all__ = ["InstanceInfo"]
