"""Enriched topology models handed to the visualization layer.

Field names serialize to camelCase to stay compatible with existing
dashboard consumers.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from kubetopo.constants.enums import OwnerKind


class ServiceSummary(BaseModel):
    """Matched service name and exposure type."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str


class OwnerResolution(BaseModel):
    """Result of walking a pod's ownership chain."""

    model_config = ConfigDict(frozen=True)

    group_name: str = ""
    owner_kind: OwnerKind | None = None
    replicas: int = 0


class EnrichedWorkloadRecord(BaseModel):
    """One pod row of the topology snapshot."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str
    short_name: str
    status: str
    cpu: str = ""
    cpu_percent: float = 0.0
    memory: str = ""
    deployment: str = ""
    is_deployment_pod: bool = False
    layer: str = ""
    owner_kind: OwnerKind | None = None
    replicas: int = 0
    service: ServiceSummary | None = None
    labels: dict[str, str] = Field(default_factory=dict)
    load_balancer_eligible: bool = False


class Snapshot(BaseModel):
    """Result of one poll: records plus degradation marker."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    records: list[EnrichedWorkloadRecord] = Field(default_factory=list, alias="data")
    degraded: bool = Field(default=False, alias="isMocked")
    reason: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return self.model_dump(mode="json", by_alias=True)


class PodStatusSummary(BaseModel):
    """Lightweight pod status row for status views."""

    model_config = ConfigDict(frozen=True)

    name: str
    status: str = "Unknown"
    ready: bool = False
    restarts: int = 0
    age: str = ""
