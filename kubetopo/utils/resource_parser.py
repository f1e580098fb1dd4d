"""Resource parsing utilities for CPU values.

Provides functions to parse Kubernetes CPU quantity strings into integer
millicores:
- Millicores: "100m" -> 100
- Cores: "1" -> 1000, "0.5" -> 500
- Nanocores/microcores as reported by metrics-server: "73000000n" -> 73
"""

import logging
import math

from kubetopo.errors import CpuParseError

logger = logging.getLogger(__name__)

# Divisors converting a suffixed value to millicores.
_CPU_SUFFIX_DIVISORS: tuple[tuple[str, int], ...] = (
    ("n", 1_000_000),
    ("u", 1_000),
    ("m", 1),
)


def parse_cpu_millicores_strict(cpu_str: str | None) -> int:
    """Parse a CPU quantity to integer millicores.

    Args:
        cpu_str: CPU value as string (e.g., "100m", "1.5", "250000000n")

    Returns:
        Millicores, truncated toward zero. Empty or missing input is 0.

    Raises:
        CpuParseError: If the value is not a valid quantity.
    """
    if not cpu_str:
        return 0

    value = str(cpu_str).strip()
    if not value:
        return 0
    if value.startswith("-"):
        raise CpuParseError(f"Negative CPU quantity: {cpu_str!r}")

    for suffix, divisor in _CPU_SUFFIX_DIVISORS:
        if value.endswith(suffix):
            number = _to_float(value[: -len(suffix)], cpu_str)
            return math.trunc(number / divisor)

    return math.trunc(_to_float(value, cpu_str) * 1000)


def parse_cpu_millicores(cpu_str: str | None) -> int:
    """Parse a CPU quantity to millicores, logging and returning 0 on error."""
    try:
        return parse_cpu_millicores_strict(cpu_str)
    except CpuParseError:
        logger.warning("Ignoring malformed CPU value %r", cpu_str)
        return 0


def cpu_percent_of_limit(usage_millicores: int, limit_millicores: int) -> float:
    """Return usage as a percent of the limit, one decimal, capped at 100.

    A missing (zero) limit yields 0.0; no other denominator is used.
    """
    if limit_millicores <= 0 or usage_millicores <= 0:
        return 0.0
    return min(round(usage_millicores / limit_millicores * 100, 1), 100.0)


def _to_float(text: str, original: str | None) -> float:
    try:
        number = float(text)
    except ValueError as exc:
        raise CpuParseError(f"Invalid CPU quantity: {original!r}") from exc
    if math.isnan(number) or math.isinf(number):
        raise CpuParseError(f"Invalid CPU quantity: {original!r}")
    return number
