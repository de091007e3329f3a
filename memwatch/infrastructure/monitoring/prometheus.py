"""
Prometheus-backed monitoring bridge.

Registered accessors are evaluated at scrape time by a custom collector on a
registry owned by the bridge, so several applications can live in one process.
"""
import re
import threading
from typing import Dict, Iterator, Optional, Tuple

from prometheus_client import CollectorRegistry, generate_latest
from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily, Metric

from memwatch.config.logging_config import logger
from memwatch.infrastructure.monitoring.bridge import Accessor, MonitoringBridge

_METRIC_NAME_RE = re.compile(r"^[a-zA-Z_:][a-zA-Z0-9_:]*$")

GAUGE = "gauge"
COUNTER = "counter"


class _AccessorCollector:
    """Collector that turns registered accessors into metric families."""

    def __init__(self):
        self._lock = threading.Lock()
        self._watches: Dict[str, Tuple[str, Accessor]] = {}

    def add(self, name: str, kind: str, accessor: Accessor) -> None:
        if not _METRIC_NAME_RE.match(name):
            raise ValueError(f"Invalid metric name: {name!r}")
        with self._lock:
            if name in self._watches:
                raise ValueError(f"Metric already registered: {name}")
            self._watches[name] = (kind, accessor)

    def collect(self) -> Iterator[Metric]:
        with self._lock:
            watches = list(self._watches.items())
        for name, (kind, accessor) in watches:
            try:
                value = accessor()
            except Exception as e:
                logger.warning(f"Monitoring accessor '{name}' failed: {e}")
                continue
            if kind == COUNTER:
                yield CounterMetricFamily(name, f"Counter watch {name}", value=value)
            else:
                yield GaugeMetricFamily(name, f"Gauge watch {name}", value=value)


class PrometheusMonitoringBridge(MonitoringBridge):
    """Exposes registered watches through a prometheus_client registry."""

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or CollectorRegistry()
        self._collector = _AccessorCollector()
        self._initialized = False

    def initialize(self) -> None:
        if self._initialized:
            return
        self.registry.register(self._collector)
        self._initialized = True
        logger.info("Prometheus monitoring bridge initialized")

    def register_gauge(self, name: str, accessor: Accessor) -> None:
        self._collector.add(name, GAUGE, accessor)

    def register_counter(self, name: str, accessor: Accessor) -> None:
        self._collector.add(name, COUNTER, accessor)

    def exposition(self) -> bytes:
        """Render the registry in the Prometheus text format."""
        return generate_latest(self.registry)

    def close(self) -> None:
        if not self._initialized:
            return
        self.registry.unregister(self._collector)
        self._initialized = False
