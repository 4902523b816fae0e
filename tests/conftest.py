import os
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession
from typing import AsyncGenerator

# Configure database for tests via settings module rather than hardcoding directly.
# Allow overriding with TEST_DATABASE_URL; fall back to a local sqlite file.
test_db_url = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///./tests/test.db")
os.environ.setdefault("DATABASE_URL", test_db_url)

from telnyxbridge.core import config as _config  # noqa: E402
_config.get_settings.cache_clear()  # ensure new env vars are picked up # type: ignore[attr-defined]
_settings = _config.get_settings()

from telnyxbridge.api.main import app  # noqa: E402
from telnyxbridge.core.events import EventBroker  # noqa: E402
from telnyxbridge.core.extra import ExtraRegistry  # noqa: E402
from telnyxbridge.db.session import AsyncSessionLocal, engine, Base  # noqa: E402
from telnyxbridge.models.user import User  # noqa: E402
from telnyxbridge.models.thread import Thread  # noqa: E402
from telnyxbridge.models.participant import Participant  # noqa: E402
from telnyxbridge.models.message import Message  # noqa: E402
from sqlalchemy import delete  # noqa: E402


@pytest_asyncio.fixture(autouse=True)
async def prepare_db():
    """Create missing tables, then clear them so every test starts empty.
    Order matters due to FK constraints: Message/Participant -> Thread -> User.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with AsyncSessionLocal() as session:  # type: ignore
        await session.execute(delete(Message))
        await session.execute(delete(Participant))
        await session.execute(delete(Thread))
        await session.execute(delete(User))
        await session.commit()
    yield


@pytest.fixture(autouse=True)
def _reset_process_state():
    """The Extra registry and broker are process-wide; start each test clean."""
    app.state.extras.reset()
    app.state.broker.reset()
    yield
    app.state.extras.reset()
    app.state.broker.reset()


@pytest.fixture(scope="session")
def settings():
    """Expose application settings to tests if needed."""
    return _settings


@pytest.fixture()
def extras() -> ExtraRegistry:
    return ExtraRegistry()


@pytest.fixture()
def broker() -> EventBroker:
    return EventBroker(queue_size=10)


@pytest_asyncio.fixture()
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:  # type: ignore
        yield session


@pytest_asyncio.fixture()
async def client():
    # httpx >=0.28 removed the 'app=' shortcut; use ASGITransport explicitly
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
