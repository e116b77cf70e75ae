"""
Methods Router - Presentation Layer

This module defines the FastAPI router that exposes the method
dispatcher over HTTP. Both routes return the dispatcher envelope
unchanged; only the HTTP status code is derived from it.
"""

from typing import Any, Dict

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Body, Depends, Path, status
from fastapi.responses import JSONResponse

from src.application.dtos.envelope_dto import DispatchRequestDTO
from src.application.services.method_dispatcher import (
    ERROR_INVALID_PARAMETERS,
    ERROR_METHOD_REQUIRED,
    UNKNOWN_METHOD_PREFIX,
    MethodDispatcher,
)
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Methods"])


def _to_response(envelope: Dict[str, Any]) -> JSONResponse:
    status_code = status.HTTP_200_OK
    if not envelope.get("ok"):
        error = envelope.get("error") or ""
        if error.startswith(UNKNOWN_METHOD_PREFIX):
            status_code = status.HTTP_404_NOT_FOUND
        elif error in (ERROR_INVALID_PARAMETERS, ERROR_METHOD_REQUIRED):
            status_code = status.HTTP_400_BAD_REQUEST
    return JSONResponse(content=envelope, status_code=status_code)


@router.post("")
@inject
async def dispatch(
    request: DispatchRequestDTO,
    method_dispatcher: MethodDispatcher = Depends(Provide["method_dispatcher"]),
) -> JSONResponse:
    """
    Dispatch a ``{method, params}`` call.

    Args:
        request: Method name and its parameters
        method_dispatcher: Injected dispatcher

    Returns:
        JSONResponse: The result envelope
    """
    logger.info("methods.dispatch_requested", method=request.method)
    envelope = await method_dispatcher.dispatch(request.method, request.params)
    return _to_response(envelope)


@router.post("/{method}")
@inject
async def call_method(
    method: str = Path(description="Method name, e.g. list_devices"),
    params: Any = Body(default=None),
    method_dispatcher: MethodDispatcher = Depends(Provide["method_dispatcher"]),
) -> JSONResponse:
    """
    Call one method with the JSON request body as its parameters.

    An absent body is treated as an empty parameter object.
    """
    logger.info("methods.call_requested", method=method)
    envelope = await method_dispatcher.dispatch(method, params)
    return _to_response(envelope)
