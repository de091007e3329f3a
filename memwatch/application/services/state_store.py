"""
Shared state store for configuration, the simulated memory buffer and the request counter.
"""
import threading

from memwatch.config.logging_utils import log_config_updated, log_memory_event
from memwatch.domain.entities.state_models import MEGABYTE, Configuration, StatsSnapshot
from memwatch.domain.exceptions import InvalidPayloadException, LimitExceededException


def zeroed_region(size_mb: int) -> bytearray:
    return bytearray(size_mb * MEGABYTE)


class SharedStateStore:
    """
    Owns the three pieces of process state, each behind its own lock.

    The entities are independently atomic but not jointly atomic: a reader
    may see a new configuration together with an old buffer. The
    "buffer <= limit" rule is enforced only when allocating; lowering the
    limit afterwards leaves an existing buffer in place.
    """

    def __init__(self, initial_config: Configuration):
        self._config = initial_config
        self._config_lock = threading.Lock()

        self._buffer = bytearray()
        self._buffer_lock = threading.Lock()

        self._request_count = 0
        self._request_lock = threading.Lock()

    # Configuration

    def get_config(self) -> Configuration:
        with self._config_lock:
            return self._config

    def set_config(self, new: Configuration) -> None:
        with self._config_lock:
            self._config = new
        log_config_updated(new.max_memory_limit, new.debug_enabled)

    # Simulated memory

    def allocate(self, size_mb: int) -> None:
        """
        Replace the buffer with a zero-filled region of ``size_mb`` megabytes.

        The region is zero-filled before the buffer lock is taken; the lock
        only covers the swap, so readers never wait on the fill.

        Raises:
            LimitExceededException: ``size_mb`` is above the current limit,
                or the region cannot be allocated at all.
            InvalidPayloadException: ``size_mb`` is negative.
        """
        limit = self.get_config().max_memory_limit
        if size_mb > limit:
            raise LimitExceededException(
                f"Requested size exceeds maximum: {size_mb} MB > {limit} MB"
            )
        if size_mb < 0:
            raise InvalidPayloadException(f"size_mb must be non-negative, got {size_mb}")
        try:
            region = zeroed_region(size_mb)
        except (MemoryError, OverflowError) as e:
            raise LimitExceededException(f"Requested size cannot be allocated: {size_mb} MB") from e

        self._swap_buffer(region)
        log_memory_event("Memory allocated", size_mb=size_mb)

    def release(self) -> None:
        self._swap_buffer(bytearray())
        log_memory_event("Memory released")

    def _swap_buffer(self, region: bytearray) -> None:
        with self._buffer_lock:
            previous, self._buffer = self._buffer, region
        # Old buffer is freed outside the lock
        del previous

    def memory_bytes(self) -> int:
        with self._buffer_lock:
            return len(self._buffer)

    def current_usage_mb(self) -> int:
        return self.memory_bytes() // MEGABYTE

    # Request counter

    def increment_request_count(self) -> int:
        with self._request_lock:
            self._request_count += 1
            return self._request_count

    def request_count(self) -> int:
        with self._request_lock:
            return self._request_count

    def snapshot(self) -> StatsSnapshot:
        """Read all three entities, one lock at a time."""
        return StatsSnapshot(
            request_count=self.request_count(),
            memory_allocated_mb=self.current_usage_mb(),
            debug_mode=self.get_config().debug_enabled,
        )
