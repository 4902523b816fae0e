import pytest


@pytest.mark.asyncio
@pytest.mark.smoke
async def test_smoke_login_send_and_list(client, settings):
    # Root
    r_root = await client.get('/')
    assert r_root.status_code == 200
    # Login bootstraps the system thread
    r_login = await client.post('/api/login', json={"creds": {"custom": {"label": "smoke"}}, "currentUserID": "smoke"})
    assert r_login.status_code == 200
    # Webhook then message
    r_hook = await client.post('/api/webhooks/telnyx', json={"event": "x"})
    assert r_hook.text == "success"
    r_send = await client.post('/api/sendMessage', json={
        "threadID": settings.system_thread_id,
        "currentUserID": "smoke",
        "userMessage": {"id": "smoke-1", "text": "ping"},
    })
    assert r_send.status_code == 200
    # List threads
    r_threads = await client.post('/api/getThreads', json={"currentUserID": "smoke"})
    assert r_threads.status_code == 200
    thread = r_threads.json()['data']['items'][0]
    assert len(thread['messages']['items']) == 4
