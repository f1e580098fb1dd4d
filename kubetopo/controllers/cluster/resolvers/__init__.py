"""Per-pod ownership and service resolution."""

from kubetopo.controllers.cluster.resolvers.ownership_resolver import OwnershipResolver
from kubetopo.controllers.cluster.resolvers.service_matcher import (
    exposure_type,
    match_service,
)

__all__ = ["OwnershipResolver", "exposure_type", "match_service"]
