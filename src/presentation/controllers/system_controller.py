"""System endpoints exposing status, info and capabilities."""

import time
from datetime import datetime, timezone

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Request, status

from src.application.dtos.host_dto import GatewayInfoDTO
from src.application.models import GatewayInfo
from src.application.services.method_dispatcher import MethodDispatcher
from src.application.use_cases.host_use_cases import GetGatewayInfoUseCase
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


def _uptime_seconds(request: Request) -> float:
    started_at = getattr(request.app.state, "started_at", None)
    if started_at is None:
        return 0.0
    return max(0.0, (datetime.now(timezone.utc) - started_at).total_seconds())


@router.get("/")
@inject
async def root(
    gateway_info: GatewayInfo = Depends(Provide["gateway_info"]),
) -> dict:
    """Identify the gateway."""
    return {
        "name": gateway_info.title,
        "version": gateway_info.version,
        "status": "running",
    }


@router.get("/status")
async def service_status(request: Request) -> dict:
    """Liveness probe; does not touch the object store."""
    return {
        "status": "ok",
        "uptime": _uptime_seconds(request),
        "timestamp": int(time.time() * 1000),
    }


@router.get("/api/info", response_model=GatewayInfoDTO)
@inject
async def info(
    request: Request,
    get_gateway_info_use_case: GetGatewayInfoUseCase = Depends(
        Provide["get_gateway_info_use_case"]
    ),
) -> GatewayInfoDTO:
    """Return strategic information about the gateway."""
    started_at = getattr(request.app.state, "started_at", None)
    try:
        info_response = get_gateway_info_use_case.execute(started_at)
        logger.debug("info.retrieved", version=info_response.version)
        return info_response
    except Exception as exc:  # pragma: no cover - defensive logging path
        logger.error("info.fetch.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to retrieve gateway info",
        ) from exc


@router.get("/api/capabilities")
@inject
async def capabilities(
    gateway_info: GatewayInfo = Depends(Provide["gateway_info"]),
    method_dispatcher: MethodDispatcher = Depends(Provide["method_dispatcher"]),
) -> dict:
    """List the methods accepted by the dispatch endpoints."""
    return {
        "server": gateway_info.title,
        "version": gateway_info.version,
        "capabilities": method_dispatcher.methods(),
    }
