import pytest

CUSTOM = {"custom": {"label": "A", "apiKey": "KEY", "baseURL": "http://localhost:1234"}}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_login_custom_creds(client):
	resp = await client.post('/api/login', json={"creds": CUSTOM, "currentUserID": "u1"})
	assert resp.status_code == 200
	data = resp.json()['data']
	assert data['currentUser'] == {"id": "u1", "username": "Telnyx User", "displayText": "A"}
	assert data['extra'] == {"label": "A", "apiKey": "KEY"}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_login_bootstraps_system_thread(client, settings):
	await client.post('/api/login', json={"creds": CUSTOM, "currentUserID": "u1"})
	resp = await client.post('/api/getThreads', json={"currentUserID": "u1"})
	assert resp.status_code == 200
	threads = resp.json()['data']['items']
	assert [t['id'] for t in threads] == [settings.system_thread_id]
	assert threads[0]['isReadOnly'] is True
	assert threads[0]['messages']['items'][0]['isAction'] is True


@pytest.mark.asyncio
@pytest.mark.integration
async def test_login_cookie_jar_is_unauthorized(client):
	body = {"creds": {"cookieJarJSON": {"cookies": []}}, "currentUserID": "u1"}
	resp = await client.post('/api/login', json=body)
	assert resp.status_code == 401
	assert resp.json() == {"data": None}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_login_unknown_creds_rejected(client):
	resp = await client.post('/api/login', json={"creds": {"token": "x"}, "currentUserID": "u1"})
	assert resp.status_code == 422
