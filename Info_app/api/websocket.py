# Info_app/api/websocket.py
import logging

import anyio
from anyio import CancelScope
from fastapi import APIRouter, WebSocket
from starlette.websockets import WebSocketDisconnect, WebSocketState

from Info_app.api.deps import get_service
from Info_app.realtime import Subscriber

log = logging.getLogger(__name__)
ws_router = APIRouter()


async def _drain(ws: WebSocket, scope: CancelScope) -> None:
    """Read and ignore inbound frames until the client goes away."""
    while True:
        msg = await ws.receive()
        if msg["type"] == "websocket.disconnect":
            break
    scope.cancel()


async def _deliver(ws: WebSocket, sub: Subscriber, scope: CancelScope) -> None:
    while True:
        payload = await sub.get()              # '{"key": ..., "value": ...}'
        try:
            await ws.send_text(payload)
        except (WebSocketDisconnect, RuntimeError, OSError) as e:
            log.warning("[WS] send failed, closing subscriber: %s", e)
            break
    scope.cancel()


@ws_router.websocket("/info-ws")
async def info_ws(ws: WebSocket):
    broadcaster = get_service(ws).broadcaster

    # 구독을 accept 보다 먼저 등록: the client never misses a write made after it is connected
    sub = broadcaster.subscribe()
    client = f"{ws.client.host}:{ws.client.port}" if ws.client else "unknown"
    try:
        await ws.accept()
        log.info("[WS] subscriber connected from=%s (total=%d)", client, len(broadcaster))

        # whichever side finishes first cancels the other
        async with anyio.create_task_group() as tg:
            tg.start_soon(_drain, ws, tg.cancel_scope)
            tg.start_soon(_deliver, ws, sub, tg.cancel_scope)

        # still attached here only when delivery gave up first
        if ws.application_state == WebSocketState.CONNECTED and ws.client_state == WebSocketState.CONNECTED:
            await ws.close()
    finally:
        # no awaits here: this also runs when the connection task itself is cancelled
        broadcaster.remove(sub)
        sub.close()
        log.info("[WS] subscriber disconnected from=%s dropped=%d (total=%d)", client, sub.dropped, len(broadcaster))
