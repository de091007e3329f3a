import pytest
from pydantic import ValidationError

from memwatch.domain.entities.state_models import (
    Configuration,
    ConfigUpdateRequest,
    MemoryAction,
    MemoryRequest,
    StatsSnapshot,
)
from memwatch.domain.exceptions import (
    DomainException,
    InvalidActionException,
    InvalidPayloadException,
    LimitExceededException,
    MethodNotAllowedException,
)


def test_domain_exceptions():
    for exc in (InvalidPayloadException, InvalidActionException, LimitExceededException):
        assert issubclass(exc, DomainException)
        assert exc.status_code == 400
    assert MethodNotAllowedException.status_code == 405


def test_config_request_to_configuration():
    payload = ConfigUpdateRequest.parse_body(b'{"max_memory_mb": 42, "debug_mode": true, "extra": [1]}')
    assert payload.to_configuration() == Configuration(max_memory_limit=42, debug_enabled=True)


def test_config_request_defaults():
    payload = ConfigUpdateRequest.parse_body(b"{}")
    assert payload.max_memory_mb == 0
    assert payload.debug_mode is False


def test_memory_request_defaults():
    payload = MemoryRequest.parse_body(b'{"action": "release"}')
    assert payload.action == MemoryAction.RELEASE.value
    assert payload.size_mb == 0


@pytest.mark.parametrize("body", [
    b"",
    b"{",
    b'"text"',
    b'{"max_memory_mb": "7"}',
    b'{"debug_mode": "false"}',
])
def test_config_request_invalid(body):
    with pytest.raises(InvalidPayloadException):
        ConfigUpdateRequest.parse_body(body)


@pytest.mark.parametrize("body", [
    b'{"action": ["allocate"]}',
    b'{"size_mb": true}',
    b'{"size_mb": 1e3}',
])
def test_memory_request_invalid(body):
    with pytest.raises(InvalidPayloadException):
        MemoryRequest.parse_body(body)


def test_configuration_is_frozen():
    config = Configuration(max_memory_limit=1, debug_enabled=False)
    with pytest.raises(ValidationError):
        config.max_memory_limit = 2


def test_stats_snapshot_dump():
    snapshot = StatsSnapshot(request_count=1, memory_allocated_mb=0, debug_mode=False)
    assert snapshot.model_dump() == {"request_count": 1, "memory_allocated_mb": 0, "debug_mode": False}


def test_null_values_keep_zero_values():
    payload = ConfigUpdateRequest.parse_body(b'{"max_memory_mb": null, "debug_mode": true}')
    assert payload.max_memory_mb == 0
    assert payload.debug_mode is True

    payload = MemoryRequest.parse_body(b'{"action": null, "size_mb": null}')
    assert payload.action == ""
    assert payload.size_mb == 0


def test_null_body_decodes_to_zero_values():
    assert ConfigUpdateRequest.parse_body(b"null").to_configuration() == Configuration(
        max_memory_limit=0, debug_enabled=False
    )


def test_keys_match_case_insensitively():
    payload = ConfigUpdateRequest.parse_body(b'{"Max_Memory_MB": 5, "DEBUG_MODE": true}')
    assert payload.max_memory_mb == 5
    assert payload.debug_mode is True


def test_last_matching_key_wins():
    payload = MemoryRequest.parse_body(b'{"size_mb": 1, "SIZE_MB": 2}')
    assert payload.size_mb == 2


@pytest.mark.parametrize("value,valid", [
    (2**63 - 1, True),
    (-2**63, True),
    (2**63, False),
    (-2**63 - 1, False),
    (10**20, False),
])
def test_integer_fields_bounded_to_int64(value, valid):
    bodies = [
        (ConfigUpdateRequest, f'{{"max_memory_mb": {value}}}'.encode()),
        (MemoryRequest, f'{{"action": "allocate", "size_mb": {value}}}'.encode()),
    ]
    for model, body in bodies:
        if valid:
            model.parse_body(body)
        else:
            with pytest.raises(InvalidPayloadException):
                model.parse_body(body)
