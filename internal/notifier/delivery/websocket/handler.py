"""WebSocket transport for the change notifier.

Each connection gets its own hub subscription; events are pushed as the
JSON envelope ``{"channel", "action", "post"}``. Client messages are read
only to notice the disconnect.
"""

import asyncio

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect  # type: ignore

from internal.httpserver.type import Dependencies
from ...hub import Subscription

router = APIRouter()


def get_ws_deps(websocket: WebSocket) -> Dependencies:
    return websocket.app.state.deps


async def _pump(websocket: WebSocket, subscription: Subscription) -> None:
    while True:
        event = await subscription.get()
        await websocket.send_json(event.to_dict())


async def _drain_client(websocket: WebSocket) -> None:
    while True:
        await websocket.receive_text()


@router.websocket("/socket")
async def socket_endpoint(websocket: WebSocket, deps: Dependencies = Depends(get_ws_deps)):
    # Subscribe before accepting so no event published after the handshake is missed
    subscription = deps.hub.subscribe()
    try:
        await websocket.accept()
        deps.logger.info(f"internal.notifier.delivery.websocket: client {subscription.id} connected")

        tasks = [
            asyncio.create_task(_pump(websocket, subscription)),
            asyncio.create_task(_drain_client(websocket)),
        ]
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

        for task in done:
            exc = task.exception()
            if exc is not None and not isinstance(exc, WebSocketDisconnect):
                deps.logger.warning(f"internal.notifier.delivery.websocket: client {subscription.id}: {exc}")
    finally:
        deps.hub.unsubscribe(subscription)
        deps.logger.info(f"internal.notifier.delivery.websocket: client {subscription.id} disconnected")


__all__ = ["router"]
