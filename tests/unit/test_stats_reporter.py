import asyncio
import logging

import pytest

from memwatch.application.services.stats_reporter import StatsReporter
from memwatch.domain.entities.state_models import Configuration


def test_tick_logs_snapshot(bare_store, caplog):
    caplog.set_level(logging.INFO, logger="memwatch")
    bare_store.increment_request_count()
    bare_store.increment_request_count()
    bare_store.allocate(3)
    bare_store.set_config(Configuration(max_memory_limit=100, debug_enabled=True))

    snapshot = StatsReporter(bare_store, interval_seconds=5).tick()

    assert snapshot.request_count == 2
    assert snapshot.memory_allocated_mb == 3
    assert snapshot.debug_mode is True
    assert "Background stats request_count=2 memory_allocated_mb=3 debug_mode=True" in caplog.text


def test_tick_does_not_count_as_request(bare_store):
    reporter = StatsReporter(bare_store)
    reporter.tick()
    reporter.tick()
    assert bare_store.request_count() == 0


@pytest.mark.asyncio
async def test_start_and_stop(bare_store):
    reporter = StatsReporter(bare_store, interval_seconds=3600)
    reporter.start()
    assert reporter.running
    await reporter.stop()
    assert not reporter.running


@pytest.mark.asyncio
async def test_stop_without_start_is_noop(bare_store):
    reporter = StatsReporter(bare_store)
    await reporter.stop()
    assert not reporter.running


@pytest.mark.slow
@pytest.mark.asyncio
async def test_ticks_on_interval(bare_store, caplog):
    caplog.set_level(logging.INFO, logger="memwatch")
    reporter = StatsReporter(bare_store, interval_seconds=0.05)
    reporter.start()
    await asyncio.sleep(0.3)
    await reporter.stop()
    ticks = [r for r in caplog.records if "Background stats" in r.getMessage()]
    assert len(ticks) >= 2


@pytest.mark.asyncio
async def test_failing_tick_keeps_reporter_alive(bare_store, caplog, monkeypatch):
    caplog.set_level(logging.INFO, logger="memwatch")
    calls = []

    def broken_snapshot():
        calls.append(1)
        raise RuntimeError("boom")

    monkeypatch.setattr(bare_store, "snapshot", broken_snapshot)
    reporter = StatsReporter(bare_store, interval_seconds=0.01)
    reporter.start()
    await asyncio.sleep(0.1)
    assert reporter.running
    await reporter.stop()
    assert len(calls) >= 2
    assert "Failed - boom" in caplog.text
