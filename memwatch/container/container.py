# memwatch/container/container.py
import time
from typing import Optional

from memwatch.application.services.state_store import SharedStateStore
from memwatch.application.services.stats_reporter import StatsReporter
from memwatch.config.logging_utils import log_application_event
from memwatch.config.settings import Settings
from memwatch.domain.entities.state_models import Configuration
from memwatch.infrastructure.monitoring.bridge import (
    MonitoringBridge,
    NullMonitoringBridge,
    register_state_watches,
)
from memwatch.infrastructure.monitoring.prometheus import PrometheusMonitoringBridge


class Container:
    """Builds the shared state and its collaborators once per application."""

    def __init__(self, settings: Settings, monitoring: Optional[MonitoringBridge] = None):
        self.settings = settings
        self.state_store = SharedStateStore(
            Configuration(
                max_memory_limit=settings.default_max_memory_mb,
                debug_enabled=settings.default_debug_mode,
            )
        )
        self.stats_reporter = StatsReporter(
            self.state_store,
            interval_seconds=settings.stats_interval_seconds,
        )
        if monitoring is None:
            monitoring = PrometheusMonitoringBridge() if settings.monitoring_enabled else NullMonitoringBridge()
        self.monitoring = monitoring
        self._started = False
        self._watches_registered = False
        self.started_at: Optional[float] = None

    async def startup(self) -> None:
        if self._started:
            return
        # Errors from the monitoring bridge propagate and abort startup
        self.monitoring.initialize()
        if not self._watches_registered:
            register_state_watches(self.state_store, self.monitoring)
            self._watches_registered = True
        log_application_event("Monitoring bridge ready", type(self.monitoring).__name__)

        self.stats_reporter.start()
        self.started_at = time.time()
        log_application_event("Stats reporter started", f"every {self.settings.stats_interval_seconds}s")
        self._started = True

    async def shutdown(self) -> None:
        if not self._started:
            return
        await self.stats_reporter.stop()
        self.monitoring.close()
        self._started = False
        log_application_event("Container shut down")
