"""
Integration tests for the conditional UPDATEs behind single-use credentials

Each writer gets its own AsyncSession on the shared file database, so the
guard in the WHERE clause is the only thing keeping two writes apart.
"""
import asyncio
from datetime import timedelta

import pytest

from src.adapter.repositories.access_key_repository import AccessKeyRepository
from src.adapter.repositories.dean_config_repository import DeanConfigRepository
from src.adapter.repositories.reset_token_repository import ResetTokenRepository
from src.app.services.credential_hasher import hash_secret, hash_token
from src.domain.base import utcnow
from src.domain.entities import ResetPurpose, ResetToken
from tests.utils.factories import make_access_key, make_dean_config


async def _store(session_factory, *records):
    async with session_factory() as session:
        for record in records:
            session.add(record)
        await session.commit()


@pytest.mark.asyncio
async def test_claim_succeeds_once_across_sessions(session_factory):
    key = make_access_key()
    await _store(session_factory, key)

    async def claim():
        async with session_factory() as session:
            claimed = await AccessKeyRepository(session).claim(key.token, utcnow())
            await session.commit()
            return claimed

    results = await asyncio.gather(*(claim() for _ in range(4)))

    assert sorted(results) == [False, False, False, True]


@pytest.mark.asyncio
async def test_claim_at_exact_expiry_instant(session_factory):
    """A key is expired only once now is past expires_at"""
    key = make_access_key()
    await _store(session_factory, key)

    async with session_factory() as session:
        repository = AccessKeyRepository(session)
        late = await repository.claim(key.token, key.expires_at + timedelta(microseconds=1))
        on_time = await repository.claim(key.token, key.expires_at)
        await session.commit()

    assert late is False
    assert on_time is True


@pytest.mark.asyncio
async def test_consume_succeeds_once_across_sessions(session_factory):
    now = utcnow()
    token = ResetToken(
        token_hash=hash_token("one-reset-token"),
        purpose=ResetPurpose.master_key_reset,
        key_version=1,
        issued_at=now,
        expires_at=now + timedelta(minutes=10),
    )
    await _store(session_factory, token)

    async def consume():
        async with session_factory() as session:
            consumed = await ResetTokenRepository(session).consume(token.id, utcnow())
            await session.commit()
            return consumed

    results = await asyncio.gather(consume(), consume())

    assert sorted(results) == [False, True]


@pytest.mark.asyncio
async def test_replace_master_key_guards_version(session_factory):
    await _store(session_factory, make_dean_config(key_version=1))

    async def replace(new_key):
        async with session_factory() as session:
            replaced = await DeanConfigRepository(session).replace_master_key(
                1, hash_secret(new_key), utcnow()
            )
            await session.commit()
            return replaced

    results = await asyncio.gather(replace("first-new-key"), replace("second-new-key"))

    assert sorted(results) == [False, True]
    async with session_factory() as session:
        config = await DeanConfigRepository(session).get()
    assert config.key_version == 2
