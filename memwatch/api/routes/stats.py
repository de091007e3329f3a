from fastapi import APIRouter, Request

from memwatch.api.dependencies import get_state_store, raise_http_error, require_method
from memwatch.api.responses.response import FastJSONResponse
from memwatch.domain.exceptions import DomainException

router = APIRouter(tags=["stats"])


async def report_stats(request: Request):
    """
    Current request count (including this request), buffer usage in MB and debug flag.
    """
    store = get_state_store(request)
    store.increment_request_count()
    try:
        require_method(request, "GET")
    except DomainException as e:
        raise_http_error(e, allowed="GET")

    return FastJSONResponse(store.snapshot().model_dump())


router.add_route("/stats", report_stats)
