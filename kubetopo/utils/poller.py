"""SnapshotPoller - repeated, non-overlapping topology polls.

Usage:
    poller = SnapshotPoller(controller, interval=30.0, on_snapshot=publish)
    poller.start()
    ...
    await poller.stop()
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import TYPE_CHECKING

from kubetopo.controllers.base import WorkerResult
from kubetopo.models.core.topology_record import Snapshot

if TYPE_CHECKING:
    from kubetopo.controllers.cluster.controller import TopologyController

logger = logging.getLogger(__name__)


class SnapshotPoller:
    """Owns the polling interval and cancellation handle for one consumer.

    A poll never starts while the previous one is in flight. The clock and
    sleep function are injectable so tests can drive the loop.
    """

    def __init__(
        self,
        controller: TopologyController,
        interval: float | None = None,
        on_snapshot: Callable[[Snapshot], None] | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._controller = controller
        self.interval = (
            interval if interval is not None else controller.settings.poll_interval_seconds
        )
        self._on_snapshot = on_snapshot
        self._clock = clock
        self._sleep = sleep
        self._task: asyncio.Task[None] | None = None
        self._stopping = False
        self._polling = False
        self.latest: Snapshot | None = None
        self.last_result: WorkerResult | None = None

    @property
    def is_running(self) -> bool:
        """True while the polling loop task is alive."""
        return self._task is not None and not self._task.done()

    async def poll_once(self) -> Snapshot | None:
        """Run one poll unless one is already in flight.

        Returns:
            The new snapshot, or None when skipped.
        """
        if self._polling:
            logger.debug("Poll still in flight, skipping")
            return None

        self._polling = True
        started = self._clock()
        try:
            snapshot = await self._controller.get_snapshot()
        finally:
            self._polling = False

        self.latest = snapshot
        self.last_result = WorkerResult(
            success=not snapshot.degraded,
            data=snapshot,
            error=snapshot.reason,
            duration_ms=(self._clock() - started) * 1000,
        )
        if self._on_snapshot is not None:
            try:
                self._on_snapshot(snapshot)
            except Exception:
                logger.exception("Snapshot callback failed")
        return snapshot

    async def run(self) -> None:
        """Poll until stopped; the interval is measured between poll starts."""
        while not self._stopping:
            started = self._clock()
            await self.poll_once()
            if self._stopping:
                break
            elapsed = self._clock() - started
            await self._sleep(max(0.0, self.interval - elapsed))

    def start(self) -> asyncio.Task[None]:
        """Start the polling loop on the running event loop."""
        if self.is_running:
            assert self._task is not None
            return self._task
        self._stopping = False
        self._task = asyncio.create_task(self.run())
        return self._task

    async def stop(self) -> None:
        """Stop the loop and cancel any poll in flight."""
        self._stopping = True
        was_polling = self._polling
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()
            with suppress(asyncio.CancelledError):
                await task
        # The controller runs the poll in its own shielded task.
        if was_polling:
            await self._controller.cancel()
