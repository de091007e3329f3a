import pytest
import factory
from fastapi.testclient import TestClient

from memwatch.application.services.state_store import SharedStateStore
from memwatch.config.settings import Settings
from memwatch.domain.entities.state_models import Configuration
from memwatch.main import create_app


class ConfigPayloadFactory(factory.DictFactory):
    max_memory_mb = 100
    debug_mode = False


class MemoryPayloadFactory(factory.DictFactory):
    action = "allocate"
    size_mb = factory.Sequence(lambda n: n % 10)


@pytest.fixture
def test_settings():
    # Long interval so background ticks never interleave with request assertions
    return Settings(stats_interval_seconds=3600, monitoring_enabled=True)


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def client(app):
    """
    Yield a TestClient for a fresh application.
    Entering the client runs the lifespan, so the reporter and bridge are live.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def store(app) -> SharedStateStore:
    return app.state.container.state_store


@pytest.fixture
def bare_store() -> SharedStateStore:
    return SharedStateStore(Configuration(max_memory_limit=100, debug_enabled=False))


@pytest.fixture
def config_payload():
    return ConfigPayloadFactory


@pytest.fixture
def memory_payload():
    return MemoryPayloadFactory
