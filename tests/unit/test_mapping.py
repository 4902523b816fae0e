from datetime import datetime, timedelta
import pytest
from telnyxbridge.models.user import User
from telnyxbridge.models.thread import Thread
from telnyxbridge.models.participant import Participant
from telnyxbridge.models.message import Message
from telnyxbridge.services.mapping import map_message, map_thread, map_user

T0 = datetime(2026, 3, 1, 9, 30, 0)


@pytest.mark.unit
def test_map_user_copies_fields():
    row = User(id="u1", full_name="Telnyx User", img_url="data:x", is_self=True)
    user = map_user(row)
    assert user.model_dump(by_alias=True) == {
        "id": "u1",
        "fullName": "Telnyx User",
        "imgURL": "data:x",
        "isSelf": True,
    }


@pytest.mark.unit
def test_map_message_copies_flags():
    row = Message(
        id="m1", thread_id="t1", sender_id="u1", text="hi", timestamp=T0,
        seen=True, is_delivered=True, is_sender=True, is_action=False,
    )
    body = map_message(row).model_dump(by_alias=True, mode="json")
    assert body["senderID"] == "u1" and body["threadID"] == "t1"
    assert body["isSender"] is True and body["seen"] is True and body["isDelivered"] is True
    assert body["isAction"] is False
    assert body["timestamp"].startswith("2026-03-01T09:30:00")


@pytest.mark.unit
def test_map_thread_wraps_collections_without_pagination():
    thread = Thread(
        id="t1", type="single", timestamp=T0, title="Telnyx Events",
        img_url="data:logo", is_unread=False, is_read_only=True,
    )
    thread.participants = [
        Participant(user_id="u1", thread_id="t1", user=User(id="u1", full_name="One", is_self=True)),
        Participant(user_id="Telnyx", thread_id="t1", user=User(id="Telnyx", full_name="Telnyx Events")),
    ]
    thread.messages = [
        Message(id="b", thread_id="t1", sender_id="u1", text="2", timestamp=T0 + timedelta(seconds=5)),
        Message(id="a", thread_id="t1", sender_id="action", text="1", timestamp=T0, is_action=True),
    ]
    mapped = map_thread(thread).model_dump(by_alias=True)
    assert mapped["isReadOnly"] is True and mapped["imgURL"] == "data:logo"
    assert mapped["messages"]["hasMore"] is False
    assert mapped["participants"]["hasMore"] is False
    assert [m["id"] for m in mapped["messages"]["items"]] == ["a", "b"]
    assert [p["id"] for p in mapped["participants"]["items"]] == ["u1", "Telnyx"]

