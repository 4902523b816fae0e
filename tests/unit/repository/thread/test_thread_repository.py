from datetime import datetime, timedelta
import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from telnyxbridge.models.user import User
from telnyxbridge.models.thread import Thread
from telnyxbridge.models.participant import Participant
from telnyxbridge.models.message import Message
from telnyxbridge.repositories import thread as thread_repo

T0 = datetime(2026, 1, 1, 12, 0, 0)


async def _thread_with_members(db_session, thread_id, user_ids, timestamp=T0):
    db_session.add(Thread(id=thread_id, type="single", timestamp=timestamp))
    await db_session.flush()
    db_session.add_all([Participant(user_id=u, thread_id=thread_id) for u in user_ids])
    await db_session.flush()

@pytest.mark.asyncio
@pytest.mark.unit
async def test_select_thread_loads_participants_and_messages(db_session: AsyncSession):
    db_session.add_all([User(id="u1", full_name="One"), User(id="u2", full_name="Two")])
    await db_session.flush()
    await _thread_with_members(db_session, "t1", ["u1", "u2"])
    db_session.add_all([
        Message(id="m2", thread_id="t1", sender_id="u2", text="second", timestamp=T0 + timedelta(seconds=2)),
        Message(id="m1", thread_id="t1", sender_id="u1", text="first", timestamp=T0 + timedelta(seconds=1)),
    ])
    await db_session.flush()

    thread = await thread_repo.select_thread(db_session, "t1", "u1")
    assert thread is not None
    assert {p.user.full_name for p in thread.participants} == {"One", "Two"}
    assert [m.id for m in thread.messages] == ["m1", "m2"]

@pytest.mark.asyncio
@pytest.mark.unit
async def test_select_thread_missing_returns_none(db_session: AsyncSession):
    assert await thread_repo.select_thread(db_session, "nope", "u1") is None

@pytest.mark.asyncio
@pytest.mark.unit
async def test_select_thread_refreshes_messages_added_later(db_session: AsyncSession):
    db_session.add(User(id="u1"))
    await db_session.flush()
    await _thread_with_members(db_session, "t1", ["u1"])
    first = await thread_repo.select_thread(db_session, "t1", "u1")
    assert first is not None and first.messages == []
    db_session.add(Message(id="m1", thread_id="t1", sender_id="u1", text="late", timestamp=T0))
    await db_session.flush()
    again = await thread_repo.select_thread(db_session, "t1", "u1")
    assert [m.id for m in again.messages] == ["m1"]

@pytest.mark.asyncio
@pytest.mark.unit
async def test_select_threads_only_returns_membership(db_session: AsyncSession):
    db_session.add_all([User(id="u1"), User(id="u2")])
    await db_session.flush()
    await _thread_with_members(db_session, "old", ["u1", "u2"], timestamp=T0)
    await _thread_with_members(db_session, "new", ["u1"], timestamp=T0 + timedelta(hours=1))
    await _thread_with_members(db_session, "other", ["u2"])

    threads = await thread_repo.select_threads(db_session, "u1")
    assert [t.id for t in threads] == ["new", "old"]
    # the join on membership must not duplicate threads with several members
    assert len({p.user_id for p in threads[1].participants}) == 2
    assert await thread_repo.select_threads(db_session, "nobody") == []
