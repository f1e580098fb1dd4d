"""Label selector matching."""

from collections.abc import Iterable, Mapping
from typing import TypeVar

T = TypeVar("T")


def selector_matches(selector: Mapping[str, str], labels: Mapping[str, str]) -> bool:
    """Return True when every selector pair appears identically in labels.

    An empty selector matches nothing.
    """
    if not selector:
        return False
    return all(labels.get(key) == value for key, value in selector.items())


def first_selector_match(
    candidates: Iterable[T],
    namespace: str,
    labels: Mapping[str, str],
) -> T | None:
    """Return the first candidate in ``namespace`` whose selector matches.

    Candidates need ``namespace`` and ``selector`` attributes. Ties resolve
    to fetch order.
    """
    for candidate in candidates:
        if candidate.namespace != namespace:  # type: ignore[attr-defined]
            continue
        if selector_matches(candidate.selector, labels):  # type: ignore[attr-defined]
            return candidate
    return None
