from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import StreamingResponse

from telnyxbridge.api import deps
from telnyxbridge.core.config import get_settings
from telnyxbridge.core.events import EventBroker, event_stream

router = APIRouter(tags=["streams"])


def _sse_headers() -> dict[str, str]:
    return {"Cache-Control": "no-cache", "Connection": "keep-alive", "X-Accel-Buffering": "no"}


@router.get("/events", summary="Server-sent state-sync events")
async def events_route(
    request: Request,
    current_user_id: str | None = Query(default=None, alias="currentUserID"),
    broker: EventBroker = Depends(deps.get_broker),
):
    """Stream state-sync events for ``currentUserID``.

    Without a user id the stream only receives broadcasts (events published
    to every session).
    """
    settings = get_settings()
    sub = broker.subscribe(current_user_id)

    async def _frames():
        try:
            async for frame in event_stream(sub, request.is_disconnected, settings.sse_heartbeat_seconds):
                yield frame
        finally:
            broker.unsubscribe(sub)

    return StreamingResponse(_frames(), media_type="text/event-stream", headers=_sse_headers())
