# Info_app/api/rest.py
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
import logging

from Info_app.api.deps import get_service
from Info_app.schemas import SetRequest
from Info_app.service import InfoService

log = logging.getLogger(__name__)
rest_router = APIRouter()

# sync handlers: FastAPI runs them in the worker thread pool, so store reads run in parallel

@rest_router.get("/healthz")
def healthz(service: InfoService = Depends(get_service)):
    return {
        "status": "ok",
        "keys": len(service.store),
        "subscribers": len(service.broadcaster),
    }

@rest_router.api_route("/set", methods=["GET", "POST"], response_class=PlainTextResponse)
def set_value(
    request: Request,
    key: str | None = None,
    value: str | None = None,
    service: InfoService = Depends(get_service),
):
    try:
        req = SetRequest(key=key, value=value)
    except ValidationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="missing key or value")

    client_ip = request.client.host if request.client else "unknown"
    delivered = service.set(req.key, req.value)
    log.info("[REST] ⇐ set key=%s from=%s notified=%d", req.key, client_ip, delivered)
    return "ok"

@rest_router.get("/get", response_class=PlainTextResponse)
def get_value(key: str | None = None, service: InfoService = Depends(get_service)):
    if not key:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="missing key")

    value, found = service.get(key)
    if not found:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return value

@rest_router.get("/getall")
def get_all(service: InfoService = Depends(get_service)) -> dict[str, str]:
    return service.get_all()
