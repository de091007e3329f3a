"""
Response classes for the memwatch API.
"""
import orjson
from fastapi.responses import Response


class FastJSONResponse(Response):
    """
    JSON response serialized with orjson.
    """
    media_type = "application/json"

    def render(self, content) -> bytes:
        return orjson.dumps(content)


class EmptyResponse(Response):
    """200 acknowledgment with no body."""

    def __init__(self, **kwargs):
        super().__init__(content=b"", status_code=200, **kwargs)
