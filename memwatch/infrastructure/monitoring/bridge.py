"""
Monitoring bridge interface.

The service exposes live values to an external monitoring collaborator
through read-only accessors. The collaborator is optional: the
NullMonitoringBridge accepts every registration and does nothing with it.
"""
from abc import ABC, abstractmethod
from typing import Callable, Union

from memwatch.application.services.state_store import SharedStateStore

Number = Union[int, float]
Accessor = Callable[[], Number]


class MonitoringBridge(ABC):
    """Abstract monitoring collaborator."""

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the collaborator. Raising here aborts application startup."""
        pass

    @abstractmethod
    def register_gauge(self, name: str, accessor: Accessor) -> None:
        """Expose a value that can go up and down."""
        pass

    @abstractmethod
    def register_counter(self, name: str, accessor: Accessor) -> None:
        """Expose a monotonically increasing value."""
        pass

    @abstractmethod
    def close(self) -> None:
        pass


class NullMonitoringBridge(MonitoringBridge):
    """Used when monitoring is disabled."""

    def initialize(self) -> None:
        pass

    def register_gauge(self, name: str, accessor: Accessor) -> None:
        pass

    def register_counter(self, name: str, accessor: Accessor) -> None:
        pass

    def close(self) -> None:
        pass


def register_state_watches(store: SharedStateStore, bridge: MonitoringBridge) -> None:
    """Register the store's watch accessors with the bridge."""
    bridge.register_gauge("app_config_max_memory_mb", lambda: store.get_config().max_memory_limit)
    bridge.register_gauge("app_config_debug_mode", lambda: int(store.get_config().debug_enabled))
    bridge.register_gauge("app_memory_bytes", store.memory_bytes)
    bridge.register_counter("app_request_count", store.request_count)
