import pytest
from sqlalchemy import select

from telnyxbridge.models.message import Message
from telnyxbridge.models.participant import Participant
from telnyxbridge.models.thread import Thread
from telnyxbridge.models.user import User
from telnyxbridge.models.clock import utcnow
from telnyxbridge.services.webhook import ingest_webhook, render_payload


@pytest.mark.unit
def test_render_payload_pretty_prints_with_trailing_newline():
    # integral floats keep their fraction
    assert render_payload({"n": 1.0}) == '{\n  "n": 1.0\n}\n'
    assert render_payload({"event": "x"}) == '{\n  "event": "x"\n}\n'
    assert render_payload({"name": "Zoë"}) == '{\n  "name": "Zoë"\n}\n'


@pytest.mark.asyncio
@pytest.mark.unit
async def test_ingest_webhook_stores_and_broadcasts(db_session, broker, settings):
    db_session.add(Thread(id=settings.system_thread_id, timestamp=utcnow(), is_read_only=True))
    await db_session.commit()
    a, b = broker.subscribe("a"), broker.subscribe("b")

    message = await ingest_webhook(db_session, broker=broker, payload={"event": "x"})

    rows = (await db_session.execute(select(Message))).scalars().all()
    assert len(rows) == 1
    row = rows[0]
    assert row.id == message.id
    assert row.thread_id == settings.system_thread_id
    assert row.sender_id == settings.system_user_id
    assert row.text == '{\n  "event": "x"\n}\n'
    assert row.seen and row.is_delivered and not row.is_sender
    for sub in (a, b):
        event = sub.queue.get_nowait()
        assert event.object_ids == {"threadID": settings.system_thread_id}
        assert event.entries[0]["text"] == row.text


@pytest.mark.asyncio
@pytest.mark.unit
async def test_ingest_webhook_on_empty_store_creates_system_thread(db_session, broker, settings):
    listener = broker.subscribe("a")

    message = await ingest_webhook(db_session, broker=broker, payload={"event": "x"})

    thread = await db_session.get(Thread, settings.system_thread_id)
    assert thread is not None and thread.is_read_only
    assert await db_session.get(User, settings.system_user_id) is not None
    members = (await db_session.execute(
        select(Participant.user_id).where(Participant.thread_id == settings.system_thread_id)
    )).scalars().all()
    assert members == [settings.system_user_id]
    rows = (await db_session.execute(select(Message))).scalars().all()
    welcome = [r for r in rows if r.is_action]
    stored = [r for r in rows if not r.is_action]
    assert len(welcome) == 1
    assert [r.id for r in stored] == [message.id] and stored[0].thread_id == thread.id

    # one event carries the welcome message followed by the webhook payload
    event = listener.queue.get_nowait()
    assert [e["id"] for e in event.entries] == [welcome[0].id, message.id]


@pytest.mark.asyncio
@pytest.mark.unit
async def test_second_webhook_reuses_system_thread(db_session, broker, settings):
    await ingest_webhook(db_session, broker=broker, payload={"n": 1})
    await ingest_webhook(db_session, broker=broker, payload={"n": 2})
    threads = (await db_session.execute(select(Thread))).scalars().all()
    assert [t.id for t in threads] == [settings.system_thread_id]
    texts = (await db_session.execute(
        select(Message.text).where(Message.sender_id == settings.system_user_id)
    )).scalars().all()
    assert sorted(texts) == ['{\n  "n": 1\n}\n', '{\n  "n": 2\n}\n']
