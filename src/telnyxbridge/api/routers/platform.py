"""Platform RPC routes.

Every operation is a ``POST`` with a camelCase JSON body and answers
``{"data": ...}``.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from telnyxbridge.api import deps
from telnyxbridge.core.errors import ThreadNotFoundError, UserNotFoundError
from telnyxbridge.core.events import EventBroker
from telnyxbridge.core.extra import ExtraRegistry
from telnyxbridge.schemas.base import DataResponse
from telnyxbridge.schemas.message import GetMessagesRequest, MessageRead, SendMessageRequest
from telnyxbridge.schemas.pagination import Paginated, PaginatedWithCursors
from telnyxbridge.schemas.session import InitRequest, LoginRequest, LoginResult
from telnyxbridge.schemas.thread import CreateThreadRequest, GetThreadRequest, GetThreadsRequest, ThreadRead
from telnyxbridge.schemas.user import SearchUsersRequest, UserRead
from telnyxbridge.services import platform as platform_service

logger = logging.getLogger("telnyxbridge.api")

router = APIRouter(tags=["platform"])


@router.post("/login", response_model=DataResponse[LoginResult], summary="Log in",
             responses={401: {"description": "Credentials did not produce a session"}})
async def login_route(
    payload: LoginRequest,
    session: AsyncSession = Depends(deps.get_db),
    extras: ExtraRegistry = Depends(deps.get_extras),
    broker: EventBroker = Depends(deps.get_broker),
):
    logger.info("api.login", extra={"user_id": payload.current_user_id, "kind": payload.creds.kind})
    user = await platform_service.login(
        session,
        extras=extras,
        broker=broker,
        creds=payload.creds,
        user_id=payload.current_user_id,
    )
    if user is None:
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"data": None})
    return DataResponse[LoginResult](
        data=LoginResult(current_user=user, extra=extras.get(payload.current_user_id))
    )


@router.post("/init", response_model=DataResponse[str], summary="Restore a serialized session")
async def init_route(payload: InitRequest, extras: ExtraRegistry = Depends(deps.get_extras)):
    logger.info("api.init", extra={"user_id": payload.session.current_user.id})
    platform_service.init_user(extras, payload.session)
    return DataResponse[str](data="success")


@router.post("/createThread", response_model=DataResponse[ThreadRead], summary="Create a thread")
async def create_thread_route(
    payload: CreateThreadRequest,
    session: AsyncSession = Depends(deps.get_db),
    extras: ExtraRegistry = Depends(deps.get_extras),
):
    logger.info("api.createThread", extra={"user_id": payload.current_user_id})
    try:
        thread = await platform_service.create_thread(
            session,
            extras=extras,
            user_ids=payload.user_ids,
            current_user_id=payload.current_user_id,
            title=payload.title,
            message_text=payload.message_text,
        )
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    await session.commit()
    return DataResponse[ThreadRead](data=thread)


@router.post("/getMessages", response_model=DataResponse[Paginated[MessageRead]],
             summary="List the messages of a thread")
async def get_messages_route(payload: GetMessagesRequest, session: AsyncSession = Depends(deps.get_db)):
    logger.info("api.getMessages", extra={"user_id": payload.current_user_id, "thread_id": payload.thread_id})
    messages = await platform_service.get_messages(
        session,
        thread_id=payload.thread_id,
        current_user_id=payload.current_user_id,
        pagination=payload.pagination,
    )
    return DataResponse[Paginated[MessageRead]](data=messages)


@router.post("/getThread", response_model=DataResponse[ThreadRead], summary="Get a thread")
async def get_thread_route(payload: GetThreadRequest, session: AsyncSession = Depends(deps.get_db)):
    logger.info("api.getThread", extra={"user_id": payload.current_user_id, "thread_id": payload.thread_id})
    try:
        thread = await platform_service.get_thread(
            session, thread_id=payload.thread_id, current_user_id=payload.current_user_id
        )
    except ThreadNotFoundError:
        raise HTTPException(status_code=404, detail="Thread not found")
    return DataResponse[ThreadRead](data=thread)


@router.post("/getThreads", response_model=DataResponse[PaginatedWithCursors[ThreadRead]],
             summary="List the threads of the current user")
async def get_threads_route(payload: GetThreadsRequest, session: AsyncSession = Depends(deps.get_db)):
    logger.info("api.getThreads", extra={"user_id": payload.current_user_id, "inbox": payload.inbox_name})
    threads = await platform_service.get_threads(
        session,
        inbox_name=payload.inbox_name,
        current_user_id=payload.current_user_id,
        pagination=payload.pagination,
    )
    return DataResponse[PaginatedWithCursors[ThreadRead]](data=threads)


@router.post("/searchUsers", response_model=DataResponse[list[UserRead]], summary="List other users")
async def search_users_route(payload: SearchUsersRequest, session: AsyncSession = Depends(deps.get_db)):
    logger.info("api.searchUsers", extra={"user_id": payload.current_user_id})
    users = await platform_service.search_users(
        session, current_user_id=payload.current_user_id, typed=payload.typed
    )
    return DataResponse[list[UserRead]](data=users)


@router.post("/sendMessage", response_model=DataResponse[str], summary="Send a message")
async def send_message_route(
    payload: SendMessageRequest,
    session: AsyncSession = Depends(deps.get_db),
    broker: EventBroker = Depends(deps.get_broker),
):
    logger.info("api.sendMessage", extra={"user_id": payload.current_user_id, "thread_id": payload.thread_id})
    await platform_service.send_message(
        session,
        broker=broker,
        user_message=payload.user_message,
        thread_id=payload.thread_id,
        content=payload.content,
        current_user_id=payload.current_user_id,
        options=payload.options,
    )
    return DataResponse[str](data="success")
