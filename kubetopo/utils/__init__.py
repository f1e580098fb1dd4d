"""Utility functions for kubetopo."""

from kubetopo.utils.name_utils import (
    derive_group_name,
    is_ordinal_pod_name,
    shorten_pod_name,
)
from kubetopo.utils.resource_parser import cpu_percent_of_limit, parse_cpu_millicores
from kubetopo.utils.selectors import selector_matches

__all__ = [
    "cpu_percent_of_limit",
    "derive_group_name",
    "is_ordinal_pod_name",
    "parse_cpu_millicores",
    "selector_matches",
    "shorten_pod_name",
]
