"""Controller contract shared by kubetopo data sources.

A controller owns one data source (here, the cluster API plus its metrics
backend) and exposes an availability probe and a full fetch.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class WorkerResult:
    """Outcome of one poll as seen by a polling loop."""

    success: bool
    data: Any | None = None
    error: str | None = None
    duration_ms: float = 0.0


class BaseController(ABC):
    """Abstract controller over a pollable data source."""

    @abstractmethod
    async def check_connection(self) -> bool:
        """Return True when the source can currently be queried."""
        ...

    @abstractmethod
    async def fetch_all(self) -> dict[str, Any]:
        """Fetch everything the source offers as a JSON-compatible dict."""
        ...
