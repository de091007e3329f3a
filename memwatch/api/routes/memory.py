"""
Simulated memory endpoint: allocate or release the shared buffer.
"""
from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool

from memwatch.api.dependencies import get_state_store, raise_http_error, require_method
from memwatch.api.responses.response import EmptyResponse
from memwatch.domain.entities.state_models import MemoryAction, MemoryRequest
from memwatch.domain.exceptions import DomainException, InvalidActionException

router = APIRouter(tags=["memory"])


async def manage_memory(request: Request):
    """
    Allocate `size_mb` megabytes or release the buffer.
    Allocation above the configured maximum is rejected and leaves the buffer as it was.
    """
    store = get_state_store(request)
    store.increment_request_count()
    try:
        require_method(request, "POST")
        payload = MemoryRequest.parse_body(await request.body())

        if payload.action == MemoryAction.ALLOCATE.value:
            # Zero-filling large buffers happens off the event loop
            await run_in_threadpool(store.allocate, payload.size_mb)
        elif payload.action == MemoryAction.RELEASE.value:
            store.release()
        else:
            raise InvalidActionException(f"Invalid action: {payload.action!r}")
    except DomainException as e:
        raise_http_error(e, allowed="POST")

    return EmptyResponse()


router.add_route("/memory", manage_memory)
