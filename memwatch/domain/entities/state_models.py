"""
Models for the shared service state and the request/response payloads.
"""
from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, ValidationError, model_validator

from memwatch.domain.exceptions import InvalidPayloadException


MEGABYTE = 1024 * 1024

# Integer payload fields decode into a signed 64-bit value
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1


class MemoryAction(str, Enum):
    """Actions accepted by the memory endpoint."""
    ALLOCATE = "allocate"
    RELEASE = "release"


class Configuration(BaseModel):
    """Service configuration. Replaced wholesale on update, never validated."""
    model_config = ConfigDict(frozen=True)

    max_memory_limit: int = Field(description="Maximum allocatable size in MB")
    debug_enabled: bool = False


class _Payload(BaseModel):
    """
    Base for request bodies.

    Decoding is lenient about shape and strict about types:
    - unknown keys are ignored, missing keys fall back to zero values
    - keys match field names case-insensitively, the last matching key wins
    - ``null`` (for a field or the whole body) leaves the zero value in place
    - every other value must have the exact JSON type
    """
    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _fold_keys(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        by_folded_name = {name.lower(): name for name in cls.model_fields}
        folded = {}
        for key, value in data.items():
            name = key if key in cls.model_fields else by_folded_name.get(key.lower())
            if name is None or value is None:
                continue
            folded[name] = value
        return folded

    @classmethod
    def parse_body(cls, body: bytes):
        """Decode a raw JSON body, raising InvalidPayloadException on any failure."""
        try:
            return cls.model_validate_json(body)
        except ValidationError as e:
            raise InvalidPayloadException(f"Invalid request body: {e.error_count()} error(s)") from e


class ConfigUpdateRequest(_Payload):
    """Request body for POST /config."""
    max_memory_mb: StrictInt = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    debug_mode: StrictBool = False

    def to_configuration(self) -> Configuration:
        return Configuration(max_memory_limit=self.max_memory_mb, debug_enabled=self.debug_mode)


class MemoryRequest(_Payload):
    """Request body for POST /memory. The action is checked by the handler, not here."""
    action: StrictStr = ""
    size_mb: StrictInt = Field(default=0, ge=INT64_MIN, le=INT64_MAX)


class StatsSnapshot(BaseModel):
    """Response body for GET /stats and the payload of one reporter tick."""
    request_count: int
    memory_allocated_mb: int
    debug_mode: bool
