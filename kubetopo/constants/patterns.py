"""Regex patterns for pod name parsing."""

import re

# postgres-0, web-2b-12: <base>-<integer>
ORDINAL_POD_PATTERN = re.compile(r"^(?P<base>.+)-(?P<ordinal>\d+)$")

# server-5489b5fdcf-9vj6b: <base>-<pod-template-hash>-<suffix>
REPLICA_POD_PATTERN = re.compile(
    r"^(?P<base>.+)-(?P<hash>[a-f0-9]+)-(?P<suffix>[a-z0-9]{5})$",
    re.IGNORECASE,
)

__all__ = [
    "ORDINAL_POD_PATTERN",
    "REPLICA_POD_PATTERN",
]
