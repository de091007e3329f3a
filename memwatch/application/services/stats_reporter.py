"""
Background reporter that periodically logs a stats snapshot.
"""
import asyncio
from typing import Optional

from memwatch.application.services.state_store import SharedStateStore
from memwatch.config.logging_utils import log_background_stats, log_operation_error
from memwatch.domain.entities.state_models import StatsSnapshot


class StatsReporter:
    """Emits one log record per interval until stopped."""

    def __init__(self, store: SharedStateStore, interval_seconds: float = 5.0):
        self.store = store
        self.interval_seconds = interval_seconds
        self._stop_event: Optional[asyncio.Event] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def tick(self) -> StatsSnapshot:
        """Sample the store once and log it."""
        snapshot = self.store.snapshot()
        log_background_stats(
            snapshot.request_count,
            snapshot.memory_allocated_mb,
            snapshot.debug_mode,
        )
        return snapshot

    async def _run(self) -> None:
        while True:
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=self.interval_seconds)
                return
            except asyncio.TimeoutError:
                pass
            try:
                self.tick()
            except Exception as e:
                log_operation_error("background", str(e))

    def start(self) -> None:
        """Schedule the periodic task on the running event loop."""
        if self.running:
            return
        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self._run(), name="memwatch-stats-reporter")

    async def stop(self) -> None:
        """Signal the task to finish and wait for it."""
        if self._task is None:
            return
        self._stop_event.set()
        await self._task
        self._task = None
        self._stop_event = None
