"""
Configuration update endpoint.
"""
from fastapi import APIRouter, Request

from memwatch.api.dependencies import get_state_store, raise_http_error, require_method
from memwatch.api.responses.response import EmptyResponse
from memwatch.domain.entities.state_models import ConfigUpdateRequest
from memwatch.domain.exceptions import DomainException

router = APIRouter(tags=["config"])


async def update_config(request: Request):
    """
    Replace the service configuration with {max_memory_mb, debug_mode}.
    """
    store = get_state_store(request)
    store.increment_request_count()
    try:
        require_method(request, "POST")
        payload = ConfigUpdateRequest.parse_body(await request.body())
    except DomainException as e:
        raise_http_error(e, allowed="POST")

    store.set_config(payload.to_configuration())
    return EmptyResponse()


# No method list: every method reaches the handler and is counted
router.add_route("/config", update_config)
