"""
Request-scoped access to the application container and shared state.
"""
from typing import NoReturn

from fastapi import HTTPException, Request

from memwatch.application.services.state_store import SharedStateStore
from memwatch.container.container import Container
from memwatch.domain.exceptions import DomainException, MethodNotAllowedException


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_state_store(request: Request) -> SharedStateStore:
    return request.app.state.container.state_store


def require_method(request: Request, allowed: str) -> None:
    if request.method != allowed:
        raise MethodNotAllowedException(f"Method not allowed: {request.method}, use {allowed}")


def raise_http_error(error: DomainException, allowed: str = "") -> NoReturn:
    """Translate a domain exception into the HTTPException FastAPI renders."""
    headers = None
    if isinstance(error, MethodNotAllowedException) and allowed:
        headers = {"Allow": allowed}
    raise HTTPException(status_code=error.status_code, detail=str(error), headers=headers) from error
