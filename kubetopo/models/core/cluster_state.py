"""Cluster-level models fetched once per poll."""

from pydantic import BaseModel, ConfigDict, Field

from kubetopo.constants.enums import GroupKind
from kubetopo.models.core.workload_instance import (
    ResourceUsageSample,
    WorkloadInstance,
)


class WorkloadGroup(BaseModel):
    """A Deployment or StatefulSet."""

    model_config = ConfigDict(frozen=True)

    kind: GroupKind
    name: str
    namespace: str
    replicas: int = 0
    selector: dict[str, str] = Field(default_factory=dict)


class NetworkService(BaseModel):
    """A Service and its pod selector."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    type: str = "ClusterIP"
    cluster_ip: str | None = None
    selector: dict[str, str] = Field(default_factory=dict)


class NodeSummary(BaseModel):
    """Minimal node identity and readiness."""

    model_config = ConfigDict(frozen=True)

    name: str
    is_ready: bool = False


class ClusterState(BaseModel):
    """Everything listed from the control plane in one poll."""

    model_config = ConfigDict(frozen=True)

    pods: list[WorkloadInstance] = Field(default_factory=list)
    nodes: list[NodeSummary] = Field(default_factory=list)
    services: list[NetworkService] = Field(default_factory=list)
    deployments: list[WorkloadGroup] = Field(default_factory=list)
    stateful_sets: list[WorkloadGroup] = Field(default_factory=list)


class MetricSamples(BaseModel):
    """Pod usage samples keyed by (namespace, name)."""

    model_config = ConfigDict(frozen=True)

    samples: dict[tuple[str, str], ResourceUsageSample] = Field(default_factory=dict)

    def get(self, namespace: str, name: str) -> ResourceUsageSample | None:
        """Return the sample for one pod, if reported."""
        return self.samples.get((namespace, name))

    def __len__(self) -> int:
        return len(self.samples)
