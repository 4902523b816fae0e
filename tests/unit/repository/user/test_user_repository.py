import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from telnyxbridge.repositories import user as user_repo

@pytest.mark.asyncio
@pytest.mark.unit
async def test_user_create_and_get(db_session: AsyncSession):
    created = await user_repo.create(db_session, id="u1", full_name="Telnyx User", is_self=True)
    assert created.id == "u1"
    fetched = await user_repo.get_by_id(db_session, "u1")
    assert fetched is not None and fetched.full_name == "Telnyx User" and fetched.is_self

@pytest.mark.asyncio
@pytest.mark.unit
async def test_user_missing_returns_none(db_session: AsyncSession):
    assert await user_repo.get_by_id(db_session, "nobody") is None

@pytest.mark.asyncio
@pytest.mark.unit
async def test_select_users_excludes_current_user(db_session: AsyncSession):
    for user_id in ["c", "a", "b"]:
        await user_repo.create(db_session, id=user_id)
    users = await user_repo.select_users(db_session, "b")
    assert [u.id for u in users] == ["a", "c"]

@pytest.mark.asyncio
@pytest.mark.unit
async def test_select_users_empty(db_session: AsyncSession):
    await user_repo.create(db_session, id="only")
    assert await user_repo.select_users(db_session, "only") == []
