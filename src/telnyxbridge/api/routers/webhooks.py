from typing import Any
from fastapi import APIRouter, Body, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from telnyxbridge.api import deps
from telnyxbridge.core.events import EventBroker
from telnyxbridge.services.webhook import ingest_webhook

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post("/telnyx", response_class=PlainTextResponse, summary="Ingest a Telnyx webhook event")
async def telnyx_webhook_route(
    payload: Any = Body(default=None),
    session: AsyncSession = Depends(deps.get_db),
    broker: EventBroker = Depends(deps.get_broker),
):
    """Store the raw payload in the system thread; always answers ``success``."""
    await ingest_webhook(session, broker=broker, payload=payload)
    return PlainTextResponse("success")
