"""Pod-level models decoded from the Kubernetes and metrics APIs."""

from pydantic import BaseModel, ConfigDict, Field

from kubetopo.constants.enums import OwnerKind, PodPhase


class ContainerStatusInfo(BaseModel):
    """Runtime status of one container."""

    model_config = ConfigDict(frozen=True)

    name: str
    ready: bool = False
    restart_count: int = 0
    waiting_reason: str | None = None
    is_waiting: bool = False


class ContainerLimitsInfo(BaseModel):
    """Configured limits of one container, raw quantity strings."""

    model_config = ConfigDict(frozen=True)

    name: str
    cpu_limit: str | None = None
    memory_limit: str | None = None


class OwnerReference(BaseModel):
    """One owner reference; unknown kinds decode to ``OwnerKind.UNKNOWN``."""

    model_config = ConfigDict(frozen=True)

    kind: OwnerKind
    name: str = ""
    raw_kind: str = ""


class WorkloadInstance(BaseModel):
    """A pod as seen by one poll."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    phase: PodPhase = PodPhase.UNKNOWN
    raw_phase: str = ""
    container_statuses: list[ContainerStatusInfo] = Field(default_factory=list)
    containers: list[ContainerLimitsInfo] = Field(default_factory=list)
    labels: dict[str, str] = Field(default_factory=dict)
    owner_references: list[OwnerReference] = Field(default_factory=list)
    creation_timestamp: str | None = None

    @property
    def primary_owner(self) -> OwnerReference | None:
        """First owner reference; later entries are ignored."""
        return self.owner_references[0] if self.owner_references else None

    @property
    def cpu_limit(self) -> str | None:
        """CPU limit of the primary container."""
        return self.containers[0].cpu_limit if self.containers else None


class ResourceUsageSample(BaseModel):
    """Current usage of the primary container of one pod."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    cpu: str = ""
    memory: str = ""
