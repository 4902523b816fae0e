import logging
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from telnyxbridge.core.config import get_settings
from telnyxbridge.core.errors import TelnyxBridgeError
from telnyxbridge.core.events import EventBroker
from telnyxbridge.core.extra import ExtraRegistry
from telnyxbridge.core.logging import configure_logging
from telnyxbridge.api.routers import (
    health,
    platform,
    streams,
    webhooks,
)

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger("telnyxbridge.api")

app = FastAPI(title=settings.app_name)

# Per-process context shared by every request; both are lost on restart.
app.state.extras = ExtraRegistry()
app.state.broker = EventBroker(queue_size=settings.sse_queue_size)

if settings.enable_cors:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(TelnyxBridgeError)
async def domain_error_handler(request: Request, exc: TelnyxBridgeError):
    # errors not mapped by a route are hard failures of the operation
    logger.error("api.domain_error", extra={"path": request.url.path, "error": type(exc).__name__, "detail": str(exc)})
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("api.store_error", extra={"path": request.url.path}, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def _include(router):
    app.include_router(router, prefix=settings.api_prefix)

_include(health.router)
_include(platform.router)
_include(webhooks.router)
_include(streams.router)

@app.get("/")
async def root():
    return {"service": settings.app_name, "status": "ok"}
