from fastapi import APIRouter, Depends, Request
from app import schemas
from app.auth.session import SessionAuthorizer
from app.dependencies import get_authorizer, get_orchestrator
from app.logger import app_logger
from app.orchestrator import Duplicated, VIPOrchestrator
from app.responses import Status, response

router = APIRouter()


def remote_addr(request: Request) -> str:
    return request.client.host if request.client else "unknown"


@router.post("/list")
def list_vip(
    params: schemas.ListVIPRequest,
    request: Request,
    authorizer: SessionAuthorizer = Depends(get_authorizer),
    orchestrator: VIPOrchestrator = Depends(get_orchestrator),
) -> dict:
    app_logger.debug(f"listVIP request from {remote_addr(request)}: {params!r}")

    user = authorizer.resolve(params.session_id)
    vips = orchestrator.list(user.id, params.pagination)
    return response(Status.OK, data=vips)


@router.post("/add")
def add_vip(
    params: schemas.AddVIPRequest,
    request: Request,
    authorizer: SessionAuthorizer = Depends(get_authorizer),
    orchestrator: VIPOrchestrator = Depends(get_orchestrator),
) -> dict:
    app_logger.debug(f"addVIP request from {remote_addr(request)}: {params!r}")

    user = authorizer.resolve(params.session_id)
    result = orchestrator.add(
        user.id,
        params.ip_id,
        params.active_host_id,
        params.standby_host_id,
        params.description,
    )
    if isinstance(result, Duplicated):
        return response(Status.DUPLICATED, message=f"duplicated VIP: ip_id={result.ip_id}")

    return response(Status.OK, data=result.vip)


@router.post("/remove")
def remove_vip(
    params: schemas.RemoveVIPRequest,
    request: Request,
    authorizer: SessionAuthorizer = Depends(get_authorizer),
    orchestrator: VIPOrchestrator = Depends(get_orchestrator),
) -> dict:
    app_logger.debug(f"removeVIP request from {remote_addr(request)}: {params!r}")

    user = authorizer.resolve(params.session_id)
    if orchestrator.remove(user.id, params.id) is None:
        return response(Status.NOT_FOUND, message=f"not found VIP to remove: {params.id}")

    return response(Status.OK)


@router.post("/toggle")
def toggle_vip(
    params: schemas.ToggleVIPRequest,
    request: Request,
    authorizer: SessionAuthorizer = Depends(get_authorizer),
    orchestrator: VIPOrchestrator = Depends(get_orchestrator),
) -> dict:
    app_logger.debug(f"toggleVIP request from {remote_addr(request)}: {params!r}")

    user = authorizer.resolve(params.session_id)
    if orchestrator.toggle(user.id, params.id) is None:
        return response(Status.NOT_FOUND, message=f"not found VIP to toggle: {params.id}")

    return response(Status.OK)
