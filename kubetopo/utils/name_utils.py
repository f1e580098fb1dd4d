"""Pod name helpers for display names and group name derivation."""

from kubetopo.constants.patterns import ORDINAL_POD_PATTERN, REPLICA_POD_PATTERN


def is_ordinal_pod_name(name: str) -> bool:
    """True for ``<base>-<integer>`` names.

    A name that also has the ``<base>-<hash>-<suffix>`` shape, such as a
    ReplicaSet pod whose 5-char suffix happens to be all digits, counts as a
    ReplicaSet pod instead.
    """
    return bool(ORDINAL_POD_PATTERN.match(name)) and not REPLICA_POD_PATTERN.match(name)


def shorten_pod_name(name: str) -> str:
    """Shorten a pod name for display.

    - Ordinal names (``postgres-0``, ``web-2b-0``) are returned unchanged.
    - ``server-5489b5fdcf-9vj6b`` becomes ``server-9vj6``.
    - Otherwise ``<first segment>-<first 4 chars of last segment>``.
    """
    if is_ordinal_pod_name(name):
        return name

    match = REPLICA_POD_PATTERN.match(name)
    if match:
        return f"{match.group('base')}-{match.group('suffix')[:4]}"

    parts = name.split("-")
    if len(parts) < 2:
        return name
    return f"{parts[0]}-{parts[-1][:4]}"


def derive_group_name(name: str) -> str:
    """Derive a group name from a pod name by dropping generated segments."""
    if is_ordinal_pod_name(name):
        return name

    match = REPLICA_POD_PATTERN.match(name)
    if match:
        return match.group("base")

    base, sep, _ = name.rpartition("-")
    return base if sep and base else name
