#!/usr/bin/env python3
"""Seed the system account.

Creates the system user (id ``SYSTEM_USER_ID``, default ``Telnyx``) that
participates in the system thread. Safe to run repeatedly: an existing row is
left untouched. Login creates the row on demand as well, so seeding is only
needed to make the account visible in ``searchUsers`` before the first login.

Usage:
  python -m telnyxbridge.db.seed [--create-schema]
"""
from __future__ import annotations

import argparse
import asyncio
import logging

from telnyxbridge.core.config import get_settings
from telnyxbridge.core.logging import configure_logging
from telnyxbridge.db.session import AsyncSessionLocal, Base, engine
from telnyxbridge.repositories import user as user_repo
from telnyxbridge.services.platform import ensure_system_user
import telnyxbridge.models  # noqa: F401 ensure model metadata is loaded

logger = logging.getLogger("telnyxbridge.seed")


async def seed(create_schema: bool = False) -> bool:
    """Returns True when the system account had to be created."""
    settings = get_settings()
    if create_schema:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    async with AsyncSessionLocal() as session:  # type: ignore
        if await user_repo.get_by_id(session, settings.system_user_id) is not None:
            logger.info("seed.skipped", extra={"user_id": settings.system_user_id})
            return False
        await ensure_system_user(session, settings)
        await session.commit()
    logger.info("seed.done", extra={"user_id": settings.system_user_id})
    return True


def main(argv: list[str] | None = None) -> int:  # pragma: no cover
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="create missing tables first (development databases without Alembic)",
    )
    args = parser.parse_args(argv)
    configure_logging(get_settings().log_level)

    async def _run() -> None:
        try:
            await seed(create_schema=args.create_schema)
        finally:
            await engine.dispose()

    asyncio.run(_run())
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
