"""Ownership resolution - maps a pod to its owning workload group."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from kubetopo.constants.defaults import APP_NAME_LABEL_KEYS_DEFAULT
from kubetopo.constants.enums import OwnerKind
from kubetopo.models.core.cluster_state import WorkloadGroup
from kubetopo.models.core.topology_record import OwnerResolution
from kubetopo.models.core.workload_instance import WorkloadInstance
from kubetopo.utils.name_utils import derive_group_name
from kubetopo.utils.selectors import first_selector_match

logger = logging.getLogger(__name__)


class OwnershipResolver:
    """Resolves the owning Deployment or StatefulSet of a pod.

    Only the first owner reference is considered. A ReplicaSet owner is
    resolved one level up to the Deployment whose selector matches the pod
    labels; first match in fetch order wins when several match.
    """

    def __init__(self, app_name_label_keys: Sequence[str] = APP_NAME_LABEL_KEYS_DEFAULT) -> None:
        self._app_name_label_keys = tuple(app_name_label_keys)

    def _label_group_name(self, pod: WorkloadInstance) -> str:
        for key in self._app_name_label_keys:
            value = pod.labels.get(key)
            if value:
                return value
        return ""

    def _fallback_group_name(self, pod: WorkloadInstance, owned: bool) -> str:
        """Group name when no group object was matched."""
        label_name = self._label_group_name(pod)
        if label_name or not owned:
            return label_name
        return derive_group_name(pod.name)

    def resolve_owner(
        self,
        pod: WorkloadInstance,
        deployments: Sequence[WorkloadGroup],
        stateful_sets: Sequence[WorkloadGroup],
    ) -> OwnerResolution:
        """Resolve group name, owner kind and desired replica count."""
        owner = pod.primary_owner
        if owner is None:
            return OwnerResolution(group_name=self._fallback_group_name(pod, owned=False))

        if owner.kind is OwnerKind.REPLICA_SET:
            deployment = first_selector_match(deployments, pod.namespace, pod.labels)
            if deployment is not None:
                return OwnerResolution(
                    group_name=deployment.name,
                    owner_kind=OwnerKind.DEPLOYMENT,
                    replicas=deployment.replicas,
                )
            logger.debug("No Deployment matches pod %s/%s", pod.namespace, pod.name)
            return OwnerResolution(
                group_name=self._fallback_group_name(pod, owned=True),
                owner_kind=OwnerKind.REPLICA_SET,
            )

        if owner.kind is OwnerKind.STATEFUL_SET:
            stateful_set = next(
                (
                    group
                    for group in stateful_sets
                    if group.name == owner.name and group.namespace == pod.namespace
                ),
                None,
            )
            return OwnerResolution(
                group_name=owner.name or self._fallback_group_name(pod, owned=True),
                owner_kind=OwnerKind.STATEFUL_SET,
                replicas=stateful_set.replicas if stateful_set else 0,
            )

        # Other controllers (DaemonSet, Job, ...) are not grouped.
        return OwnerResolution(group_name=self._fallback_group_name(pod, owned=False))
